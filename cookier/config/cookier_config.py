"""
cookier_config module.
This module contains the CookierConfig class definition
"""

import configparser
import os
import socket


class CookierConfig(dict):
    """
    Configuration Object for cookier.

    This class reads and parses configuration files from multiple locations,
    looks for default and host-specific configurations, checks environment
    variables and constructs a set of configuration parameters as
    appropriate.

    The cookie manager provider instantiates this class (through
    get_config()) and then queries it for configuration parameters as
    needed.

    The configuration files are ini files, parsed by the python configparser
    module.

    Files are read as follows:

    The built-in minimal config file is read first by default. This can be
    disabled by passing builtin = False

    If you pass a configstring argument, that will be the only other
    configuration read. A configstring is a string that is treated as if it
    were the contents of a config file.

    If you pass a configfile argument, that file will be the only other
    configuration file read. If configfile is an empty string, no other
    configuration files will be read.

    Otherwise, the following are read in this order:
    * /etc/cookier.conf
    * ~/.cookier.conf

    When reading configuration values from multiple places, any values read
    later will take precedence over values read earlier.
    """

    # By default, ConfigParser treats everything as a string.
    # These lists define configuration keywords that will be converted
    # to another type automatically as they are requested
    _bools = ['cookie_secure']
    _ints = ['token_max_age']
    # Empty strings for these are returned as None
    _nullables = ['cookie_domain', 'cookie_same_site']

    def __init__(self, configfile=None, configstring=None, builtin=True):
        super().__init__()

        self._readfiles(configfile=configfile,
                        configstring=configstring,
                        builtin=builtin)

        # Some parameters can be over-ridden by environment variables
        self._env_overrides()

        # Some values are calculated from config file values
        self._calculate_values()

    def _readfiles(self, configfile=None, configstring=None, builtin=True):
        """
        Read in the prescribed configuration files or strings
        Parameters
        ----------
        configfile: config file to read. See class documentation
        configstring: config file to read. See class documentation
        builtin: whether to read the built-in minimal configuration file.

        Returns
        -------
        None
        """

        # builtin is the module's internal built-in config file.
        # It provides the default values
        _builtin = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                'cookier.conf')

        # Places to look for config files. Later ones take precedence
        self._configfiles = ['/etc/cookier.conf',
                             os.path.expanduser('~/.cookier.conf')]

        # This can be read back to see which config files were actually used.
        self.configfiles_used = []

        # We make this _private so that we can point the public one at
        # 'DEFAULT' if we don't have a specific hostname section. Interpolation is
        # off, secret keys routinely contain % characters
        self._config = configparser.ConfigParser(interpolation=None)

        # Read the config files.
        if builtin:
            self._config.read(_builtin)
            self.configfiles_used.append(_builtin)
        if configstring is not None:
            self._config.read_string(configstring)
            self.configfiles_used.append(':passed-configstring:')
        elif configfile is not None:
            if configfile != '':
                self._config.read(configfile)
                self.configfiles_used.append(configfile)
        else:
            self.configfiles_used.extend(self._config.read(self._configfiles))

        # If the config we read has a section for this hostname, point to
        # that directly. It will inherit anything not specified there from the
        # default section. If not, point directly to the default section.
        hostname = socket.gethostname()
        if hostname in self._config.sections():
            self.config = self._config[hostname]
        else:
            self.config = self._config['DEFAULT']

    def _env_overrides(self):
        """
        Check for environment variables containing configuration values
        """
        envs = {'cookie_prefix': 'APP_PREFIX',
                'secret_key': 'APP_KEY'}

        for key, envvar in envs.items():
            value = os.getenv(envvar)
            if value is not None:
                self.config[key] = value

    def _calculate_values(self):
        """
        After reading all configuration items in, calculate any additional
        vales that are automatically derived from those values read in.
        """
        self._calculate_cookie_same_site()
        self._calculate_cookie_secure()

    def _calculate_cookie_same_site(self):
        """
        Browsers compare the SameSite value case-insensitively, but we
        normalize it so that it can be compared in code.
        """
        self.config['cookie_same_site'] = \
            self.config.get('cookie_same_site', '').strip().lower()

    def _calculate_cookie_secure(self):
        """
        If not set, default to True only when SameSite=None is requested, as
        browsers reject such cookies unless they are Secure.
        """
        if self.config.get('cookie_secure', '') == '':
            self.config['cookie_secure'] = 'True' if \
                self.config['cookie_same_site'] == 'none' else 'False'

    def __getitem__(self, key):
        if key in self._bools:
            return self.config.getboolean(key)
        if key in self._ints:
            return self.config.getint(key)
        if key in self._nullables:
            return self.config[key] or None
        return self.config[key]

    def __setitem__(self, key, value):
        self.config[key] = value

    def __getattr__(self, item):
        return self.__getitem__(item)
