import http.cookies


class Environment(object):
    """
    Thin wrapper around the WSGI ``environ`` dictionary, with named accessors
    for the values the rest of the server needs.
    """
    def __init__(self, env):
        self._env = env

    def __getitem__(self, item):
        return self._env[item]

    def __contains__(self, item):
        return item in self._env

    def get(self, item, default=None):
        return self._env.get(item, default)

    @property
    def server_hostname(self):
        return self._env['SERVER_NAME']

    @property
    def uri(self):
        return self._env.get('PATH_INFO', '/')

    @property
    def qs(self):
        return self._env.get('QUERY_STRING', '')

    @property
    def unparsed_uri(self):
        qs = self.qs
        return self.uri + ('' if not qs else '?' + qs)

    @property
    def remote_ip(self):
        return self._env['REMOTE_ADDR']

    @property
    def method(self):
        return self._env['REQUEST_METHOD']

    @property
    def is_secure(self):
        return self._env.get('wsgi.url_scheme') == 'https'

    @property
    def cookies(self):
        """
        A :py:class:`http.cookies.SimpleCookie` with the cookies sent by the
        client. Empty if there was no Cookie header.
        """
        return http.cookies.SimpleCookie(self._env.get('HTTP_COOKIE', ''))
