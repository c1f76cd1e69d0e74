"""
Testing helpers
"""
from io import BytesIO, StringIO

from cookier.config import get_config
from cookier.manager import Manager
from cookier.provider import get_manager_factory
from cookier.server.wsgi.cookies import CookieJar
from cookier.server.wsgi.request import Request
from cookier.tokens import TokenCodec

SECRET = 'not-so-secret'

test_configtext = """
[DEFAULT]
cookie_prefix = app_
secret_key = not-so-secret
"""


def get_test_config(configstring=test_configtext):
    """
    Reloads the configuration singleton (and the manager factory built from
    it) with the test settings, and returns the configuration.
    """
    config = get_config(reload=True, configstring=configstring)
    get_manager_factory(reload=True)
    return config


def make_environ(cookie_header=None, **kw):
    env = {
        'SERVER_NAME':       'test_server',
        'REMOTE_ADDR':       '127.0.0.1',
        'PATH_INFO':         '/',
        'QUERY_STRING':      '',
        'REQUEST_METHOD':    'GET',
        'wsgi.input':        BytesIO(),
        'wsgi.errors':       StringIO(),
        'wsgi.multithread':  False,
        'wsgi.multiprocess': False,
        'wsgi.run_once':     True,
        'wsgi.version':      (1, 0),
        'wsgi.url_scheme':   'http',
    }
    if cookie_header is not None:
        env['HTTP_COOKIE'] = cookie_header
    env.update(kw)
    return env


def get_codec(**kw):
    return TokenCodec(SECRET, **kw)


def make_manager(cookie_header=None, prefix='app_', codec=None, jar=None):
    request = Request(make_environ(cookie_header))
    jar = jar if jar is not None else CookieJar()
    return Manager(request, jar, codec).set_prefix(prefix)


class StartResponse(object):
    """
    Records what the WSGI server would have received.
    """
    def __init__(self):
        self.status = None
        self.headers = None
        self.calls = 0

    def __call__(self, status, headers):
        self.status = status
        self.headers = headers
        self.calls += 1
        return lambda data: None

    def get_all(self, name):
        return [v for (k, v) in self.headers if k.lower() == name.lower()]
