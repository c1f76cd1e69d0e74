"""
Process-wide provider for cookie managers.

The factory is built once, from the configuration, the first time it is
needed; after that it is called once per request to produce a fresh
:any:`Manager` bound to that request.
"""

from cookier.config import get_config
from cookier.logger_dummy import DummyLogger
from cookier.manager import Manager
from cookier.server.wsgi.cookies import CookieJar
from cookier.tokens import TokenCodec


class ManagerFactory(object):
    """
    Holds the settings shared by every request: the cookie name prefix, the
    token codec and the default attributes for outgoing cookies. None of
    them change after construction, so a factory can be shared between
    threads.
    """

    def __init__(self, prefix='', codec=None, path='/', domain=None,
                 secure=False, same_site=None, logger=DummyLogger()):
        self.prefix = prefix
        self.codec = codec
        self.path = path
        self.domain = domain
        self.secure = secure
        self.same_site = same_site
        self.logger = logger

    @classmethod
    def from_config(cls, config, logger=DummyLogger()):
        """
        Builds a factory from a :any:`CookierConfig`. Token decoding is only
        enabled when a ``secret_key`` is configured.
        """
        codec = None
        if config.secret_key:
            codec = TokenCodec(config.secret_key, salt=config.token_salt,
                               max_age=config.token_max_age, logger=logger)

        return cls(prefix=config.cookie_prefix, codec=codec,
                   path=config.cookie_path, domain=config.cookie_domain,
                   secure=config.cookie_secure,
                   same_site=config.cookie_same_site, logger=logger)

    def make_jar(self):
        """
        Returns an empty :any:`CookieJar` using the configured defaults.
        """
        return CookieJar(self.path, self.domain, self.secure, self.same_site,
                         logger=self.logger)

    def __call__(self, request, jar=None):
        if jar is None:
            jar = self.make_jar()
        return Manager(request, jar, self.codec,
                       self.logger).set_prefix(self.prefix)


_factory = None

def get_manager_factory(reload=False):
    """
    Returns the process-wide :any:`ManagerFactory`, building it from
    :py:func:`get_config` on first use (or when ``reload`` is ``True``).
    """
    global _factory
    if _factory is None or reload is True:
        _factory = ManagerFactory.from_config(get_config())

    return _factory
