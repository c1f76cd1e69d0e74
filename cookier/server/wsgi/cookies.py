"""
Outbound cookies. A :any:`Cookie` describes a single ``Set-Cookie`` header,
and the :any:`CookieJar` keeps the cookies queued during a request until the
:any:`Response` sends its headers.
"""

import datetime
import http.cookies
import re
from urllib.parse import quote

from cookier.logger_dummy import DummyLogger

# Five years, in minutes
FOREVER = 2628000

_legal_name = re.compile(r"^[\w!#$%&'*+\-.^`|~:]+$", re.ASCII)


class Cookie(object):
    """
    Description of a cookie to be sent to the client.

    ``minutes`` is the lifetime of the cookie: 0 makes a session cookie (no
    expiry date is sent), a negative number produces a cookie that tells the
    client to discard any cookie with the same name, path and domain.

    Unless ``raw`` is set, the value is percent-encoded when rendered.
    """

    def __init__(self, name, value, minutes=0, path='/', domain=None,
                 secure=False, http_only=True, raw=False, same_site=None):
        if not self.is_legal_name(name):
            raise ValueError(
                "The cookie name {!r} contains invalid characters".format(name))

        self.name = name
        self.value = '' if value is None else str(value)
        self.minutes = minutes
        if minutes:
            self.expires = datetime.datetime.now(datetime.timezone.utc) + \
                datetime.timedelta(minutes=minutes)
        else:
            self.expires = None
        self.path = path
        self.domain = domain
        self.secure = bool(secure)
        self.http_only = http_only
        self.raw = raw
        self.same_site = same_site.lower() if same_site else None

    @staticmethod
    def is_legal_name(name):
        """
        ``True`` if ``name`` can be sent as a cookie name. Names clashing
        with a cookie attribute (``path``, ``expires``, ...) are refused.
        """
        return bool(name) and _legal_name.match(name) is not None and \
            name.lower() not in http.cookies.Morsel._reserved

    def __repr__(self):
        return '<Cookie {}={!r} path={}>'.format(self.name, self.value,
                                                  self.path)

    @property
    def max_age(self):
        """
        Seconds until the cookie expires (never negative), or ``None`` for a
        session cookie.
        """
        if self.expires is None:
            return None
        return max(0, int(self.minutes * 60))

    def is_cleared(self):
        """
        ``True`` if this cookie asks the client to delete its copy.
        """
        return self.expires is not None and \
            self.expires < datetime.datetime.now(datetime.timezone.utc)

    def morsel(self):
        """
        Returns an equivalent :py:class:`http.cookies.Morsel`.
        """
        coded_value = self.value if self.raw else quote(self.value, safe='')

        morsel = http.cookies.Morsel()
        morsel.set(self.name, self.value, coded_value)
        if self.expires is not None:
            morsel['expires'] = self.expires.strftime('%a, %d %b %Y %H:%M:%S GMT')
            morsel['max-age'] = self.max_age
        if self.path:
            morsel['path'] = self.path
        if self.domain:
            morsel['domain'] = self.domain
        if self.secure:
            morsel['secure'] = True
        if self.http_only:
            morsel['httponly'] = True
        if self.same_site:
            morsel['samesite'] = self.same_site.capitalize()
        return morsel

    def output(self):
        """
        The value for the ``Set-Cookie`` header.
        """
        return self.morsel().OutputString()


class CookieJar(object):
    """
    Creates cookies with a set of default attributes and queues them to be
    sent along with the response.

    Queued cookies are indexed by name and path, so queueing a cookie
    replaces any queued cookie with the same name and path.
    """

    def __init__(self, path='/', domain=None, secure=False, same_site=None,
                 logger=DummyLogger()):
        self.logger = logger
        self._queued = {}
        self.set_defaults(path, domain, secure, same_site)

    def set_defaults(self, path, domain=None, secure=False, same_site=None):
        """
        Sets the attributes used by :py:meth:`make` when the caller doesn't
        pass them.
        """
        self.path = path
        self.domain = domain
        self.secure = secure
        self.same_site = same_site
        return self

    def make(self, name, value, minutes=0, path=None, domain=None,
             secure=None, http_only=True, raw=False, same_site=None):
        """
        Returns a new :any:`Cookie`. ``path``, ``domain``, ``secure`` and
        ``same_site`` fall back to the jar defaults when ``None``.
        """
        return Cookie(name, value, minutes,
                      self.path if path is None else path,
                      self.domain if domain is None else domain,
                      self.secure if secure is None else secure,
                      http_only, raw,
                      self.same_site if same_site is None else same_site)

    def forever(self, name, value, path=None, domain=None, secure=None,
                http_only=True, raw=False, same_site=None):
        """
        Returns a cookie that lasts five years.
        """
        return self.make(name, value, FOREVER, path, domain, secure,
                         http_only, raw, same_site)

    def forget(self, name, path=None, domain=None):
        """
        Returns a cookie that expires the client's cookie ``name``.
        """
        return self.make(name, None, -FOREVER, path, domain)

    def queue(self, *args, **kw):
        """
        Queues a cookie for the response. Takes either a :any:`Cookie`, or
        the same arguments as :py:meth:`make`.
        """
        if args and isinstance(args[0], Cookie):
            cookie = args[0]
        else:
            cookie = self.make(*args, **kw)

        paths = self._queued.setdefault(cookie.name, {})
        # Re-insert, so that the most recent cookie is the last one
        paths.pop(cookie.path, None)
        paths[cookie.path] = cookie
        self.logger.debug("Queued cookie %s (path %s)", cookie.name,
                          cookie.path)

    def unqueue(self, name, path=None):
        """
        Removes a queued cookie. With no ``path``, every queued cookie
        named ``name`` is removed.
        """
        if path is None:
            self._queued.pop(name, None)
            return

        paths = self._queued.get(name)
        if paths is not None:
            paths.pop(path, None)
            if not paths:
                del self._queued[name]

    def queued(self, name, default=None, path=None):
        """
        Returns the queued cookie ``name`` for ``path``. With no ``path``,
        returns the one queued most recently under that name.
        """
        paths = self._queued.get(name)
        if not paths:
            return default
        if path is None:
            return list(paths.values())[-1]
        return paths.get(path, default)

    def has_queued(self, name, path=None):
        return self.queued(name, None, path) is not None

    def get_queued_cookies(self):
        """
        Returns a list with all the queued cookies.
        """
        return [cookie for paths in self._queued.values()
                for cookie in paths.values()]

    def flush_queued_cookies(self):
        self._queued = {}
        return self
