from functools import wraps
from html import escape
from http import HTTPStatus
import json

from .cookies import CookieJar


def only_if_not_started_response(fn):
    @wraps(fn)
    def wrapper(self, *args, **kw):
        assert not self._started_response, \
            "Asked to start a response, but headers have been sent"
        return fn(self, *args, **kw)
    return wrapper


class SetEncoder(json.JSONEncoder):
    """
    Custom JSON encoder that understands sets.

    JSON doesn't have sets. Decoded cookie tokens and other values may
    contain them, so this encoder simply encodes them as lists.
    """
    def default(self, obj):
        if isinstance(obj, set):
            return list(obj)
        return json.JSONEncoder.default(self, obj)


class RequestRedirect(Exception):
    """
    Raising this exception will stop the processing and force a redirect
    status code to be issued.

    Note that the ``RequestRedirect`` exception is not meant to be
    rised directly by user code, and should be used only by lower
    level code to capture and handle the redirection.

    To perform redirections, use instead :any:`Response.redirect_to`.
    """
    pass


redirect_template = """\
<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 3.2 Final//EN">
<title>Redirecting...</title>
<h1>Redirecting...</h1>
<p>You should be redirected automatically to target URL: <a href="{location}">{display_location}</a>.  If not click the link."""


class Response(object):
    """
    The response under construction. Content is accumulated with
    :py:meth:`append` and friends; headers, including one ``Set-Cookie``
    header for every cookie queued in the :any:`CookieJar`, are sent when
    the response starts.
    """

    def __init__(self, wsgienv, start_response, jar=None):
        self.status = HTTPStatus.OK
        self._env = wsgienv
        self._sr = start_response
        self._jar = jar if jar is not None else CookieJar()
        self._bytes_sent = 0
        self.make_empty()
        self._started_response = False

    def __iter__(self):
        for element in self._content:
            if isinstance(element, str):
                element = element.encode('utf8')
            self._bytes_sent += len(element)
            yield element

    @property
    def bytes_sent(self):
        return self._bytes_sent

    @property
    def jar(self):
        return self._jar

    @property
    def started(self):
        return self._started_response

    def respond(self):
        self.start_response()
        return iter(self)

    def start_response(self):
        if not self._started_response:
            self._started_response = True
            status = HTTPStatus(self.status)
            self._sr(
                f'{status.value} {status.phrase}',
                [('Content-Type', self._content_type)] + self._headers[:]
                + [('Set-Cookie', cookie.output()) for cookie in
                   self._jar.get_queued_cookies()]
            )
        return self

    def expire_cookie(self, name, path=None, domain=None):
        """
        Queues the cookie needed to expire the client cookie named ``name``.
        """
        self._jar.queue(self._jar.forget(name, path, domain))
        return self

    def set_cookie(self, name, value='', **kw):
        """
        Queues a client cookie. Attributes different to the name and value
        can be passed as keyword arguments, and are the ones accepted by
        :py:meth:`CookieJar.make`.
        """
        self._jar.queue(name, value, **kw)
        return self

    @property
    def content_type(self):
        return self._content_type

    @content_type.setter
    def content_type(self, content_type):
        self._content_type = content_type

    def set_header(self, name, value):
        """
        Adds a header to be sent with the response.
        """

        self._headers.append((name, value))
        return self

    @only_if_not_started_response
    def append(self, string):
        """
        Appends content to be sent with the response, typically in the form
        of a string.
        """
        self._content.append(string)
        return self

    @only_if_not_started_response
    def append_json(self, obj, **kw):
        """
        Takes an object and appends to the contents a serialized
        representation of it, encoded in JSON format. Any additional keyword
        arguments will be passed verbatim to :py:meth:`json.dumps`.

        Sets the content-type to application/json
        """
        if 'json' not in self._content_type:
            self.content_type = 'application/json'
        self._content.append(json.dumps(obj, cls=SetEncoder, **kw))
        return self

    def make_empty(self):
        self._content = []
        self._content_type = 'text/plain'
        self._headers = []
        self.status = HTTPStatus.OK

    @only_if_not_started_response
    def redirect_to(self, url, code=HTTPStatus.FOUND):
        """
        Stops the processing and returns an HTTP Redirect status code to the
        client, pointing to the specified ``url``. Queued cookies are still
        sent with the redirection.

        :py:meth:`Response.redirect_to` will raise a :any:`RequestRedirect`
        exception.
        """
        self.make_empty()
        self.content_type = 'text/html'
        self.status = code

        self.append(redirect_template.format(location=escape(url),
                                             display_location=escape(url)))
        self.set_header('Location', url)

        raise RequestRedirect()
