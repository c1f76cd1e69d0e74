import json
from urllib.parse import unquote

from .environment import Environment


class Request(object):
    """
    Object encapsulating information related to the HTTP request and values
    derived from it. Apart from the documented methods, it presents a partial
    dictionary-like interface, as syntactic sugar to access the WSGI
    environment:

      * ``request[KEY]``: returns the value for the requested variable
      * ``KEY in request``: ``True`` if a certain variable is present in
        the environment; ``False`` otherwise

    The cookies sent by the client are exposed through :py:attr:`cookies`,
    a plain dictionary that can be altered during the request. Changes to it
    are only visible to code running in the same request; use a
    :any:`CookieJar` to send cookies back to the client.
    """

    def __init__(self, wsgienv):
        self._env = Environment(wsgienv)
        self._cookies = None

    def __getitem__(self, key):
        """
        Provides a dictionary-like interface for the request object to get
        environment values
        """
        return self.get_header_value(key)

    def __contains__(self, key):
        """
        Provides an interface for the request object to enable the query for
        environment values using 'in'
        """
        return self.contains_header(key)

    def get_header_value(self, header_name):
        """
        Returns the value for the ``header_name`` WSGI variable. Raises
        :py:exc:`KeyError` if it doesn't exist.
        """
        return self._env[header_name]

    def contains_header(self, header_name):
        return header_name in self._env

    @property
    def cookies(self):
        """
        Mutable ``name -> value`` dictionary with the request cookies. Values
        are percent-decoded, the way browsers expect servers to read them.
        """
        if self._cookies is None:
            self._cookies = dict((name, unquote(morsel.value))
                                 for name, morsel in self._env.cookies.items())
        return self._cookies

    def cookie(self, name, default=None):
        """
        Returns the value of the cookie ``name``, or ``default`` if the
        request doesn't carry it.
        """
        return self.cookies.get(name, default)

    @property
    def env(self):
        """
        Dictionary-like object that let's access to environment variables.
        Useful for low-level access to information like hostname, remote IP,
        etc.
        """
        return self._env

    @property
    def input(self):
        """
        A file-like object that can be used to read the raw contents of the
        request payload.
        """
        return self._env['wsgi.input']

    @property
    def raw_data(self):
        """
        Reads the whole request payload and returns it as-is.
        """
        length = int(self._env.get('CONTENT_LENGTH') or 0)
        return self.input.read(length) if length > 0 else b''

    @property
    def json(self):
        """
        Tries to interpret the request payload as a JSON encoded string,
        and returns the resulting object. It may raise a :py:exc:`ValueError`
        exception, if the payload is not valid JSON.
        """
        return json.loads(self.raw_data)
