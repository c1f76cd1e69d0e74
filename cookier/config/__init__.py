from .cookier_config import CookierConfig
__all__ = ['get_config', 'CookierConfig']

_config = None

def get_config(configfile=None, configstring=None, builtin=True, reload=False):
    """
    Instantiates (if it doesn't already exist) a singleton CookierConfig
    object, and returns it.

    We store the instance in a global in this module and simply return that
    if it already exists. This avoids re-reading the configuration files for
    each request.

    Passing reload=True will force re-instantiation of the CookierConfig
    object, causing configuration files to be re-read.

    Note that if get_config() has already been called, repeat calls passing
    configfile or configstring will ALSO need to pass reload=True in order
    for those arguments to take effect.

    Parameters
    ----------
    configfile: argument passed to CookierConfig
    configstring: argument passed to CookierConfig
    builtin: argument passed to CookierConfig
    reload: force reloading the configuration

    Returns
    -------
    CookierConfig configuration object instance.
    """

    global _config
    if _config is None or reload is True:
        _config = CookierConfig(configfile=configfile,
                                configstring=configstring,
                                builtin=builtin)

    return _config
