"""
The cookie manager: single access point to the cookies of the current
request, and to the cookies queued for its response.
"""

from collections.abc import Mapping

from slugify import slugify

from cookier.logger_dummy import DummyLogger
from cookier.server.wsgi.cookies import FOREVER, Cookie


def _slugify(name):
    return slugify(name, separator='_', replacements=[['@', '_at_']])


class Manager(object):
    """
    Reads cookies from a :any:`Request` and queues new ones in a
    :any:`CookieJar`, applying a name prefix to every cookie it manages.

    Reads look for the prefixed name first and fall back to the name as
    given, so that cookies created before the prefix was introduced are
    still found. Every value read is passed through the token ``codec`` (if
    any): valid tokens come back decoded, anything else as sent by the
    client.

    The manager also behaves like a dictionary:

       * ``name in cookies``: same as :py:meth:`has`
       * ``cookies[name]``: same as :py:meth:`get`
       * ``cookies[name] = value``: same as :py:meth:`set`, with the default
         attributes
       * ``del cookies[name]``: same as :py:meth:`forget`

    Anything not covered by the manager can be done directly on the jar,
    exposed as :py:attr:`jar`.
    """

    def __init__(self, request, jar, codec=None, logger=DummyLogger()):
        self._request = request
        self._jar = jar
        self._prefix = ''
        self.codec = codec
        self.logger = logger

    @property
    def request(self):
        return self._request

    @property
    def jar(self):
        """
        The :any:`CookieJar` collecting the response cookies.
        """
        return self._jar

    @property
    def prefix(self):
        return self._prefix

    def set_prefix(self, prefix):
        """
        Sets the prefix applied to cookie names, and returns the manager.
        """
        self._prefix = prefix or ''
        return self

    def with_prefix(self, name):
        """
        Returns the cookie name that the manager uses for ``name``: the name
        slugified (lowercase ASCII letters, digits and ``_``) and prefixed,
        unless it carries the prefix already. Applying it to its own result
        returns the same name.
        """
        slug = _slugify(name)
        if slug.startswith(self._prefix):
            return slug
        # Prefixes need not be slugs themselves ('App-')
        if name.startswith(self._prefix):
            rest = name[len(self._prefix):]
            if rest == _slugify(rest):
                return name
        return self._prefix + slug

    def unprefixed(self, name):
        """
        The key under which :py:meth:`all` lists the request cookie
        ``name``.
        """
        # lstrip removes any leading character found in the prefix, not the
        # prefix as a whole
        return name.lstrip(self._prefix)

    def has(self, name):
        """
        ``True`` if the request carries the cookie ``name``, prefixed or not.
        """
        return self.get(name, None, True) is not None

    exists = has

    def get(self, name=None, default=None, original=False):
        """
        Returns the value of the cookie ``name``, or ``default`` if the
        request doesn't have it.

        With no ``name``, returns all the cookies (see :py:meth:`all`). If
        ``name`` is a dictionary or a list, returns several cookies at once
        (see :py:meth:`get_many`).

        If ``original`` is ``True`` the value is returned exactly as sent by
        the client, without trying to decode it as a token.
        """
        if isinstance(name, (Mapping, list, tuple, set)):
            return self.get_many(name)

        if name is None:
            return self.all()

        value = self._request.cookie(self.with_prefix(name)) or \
            self._request.cookie(name)

        if not original:
            value = self.resolve(value)

        return default if value is None else value

    def get_many(self, keys):
        """
        Returns a dictionary with the (resolved) value of several cookies.
        ``keys`` is either a ``name -> default`` dictionary, or a sequence of
        names, which get ``None`` as default. Integer keys in the dictionary
        are taken as positions, their value being the name.
        """
        if isinstance(keys, Mapping):
            items = keys.items()
        else:
            items = enumerate(keys)

        cookies = {}
        for name, default in items:
            if isinstance(name, int):
                name, default = default, None

            cookies[name] = self.get(name, default)

        return cookies

    def get_original(self, name=None, default=None):
        """
        Like :py:meth:`get`, but returns the undecoded value.
        """
        return self.get(name, default, True)

    def all(self):
        """
        Returns all the request cookies, resolved, keyed by their name with
        the prefix characters stripped from the front.
        """
        return dict((self.unprefixed(name), self.resolve(value))
                    for name, value in self._request.cookies.items())

    def resolve(self, value):
        """
        Returns the structure encoded in ``value`` if it is a valid token,
        or ``value`` itself otherwise.
        """
        if self.codec is not None:
            decoded = self.codec.decode(value)
            if decoded:
                return decoded

        return value

    def set(self, name, value, minutes=30, path=None, domain=None,
            secure=None, http_only=True, raw=False, same_site=None):
        """
        Sets the (prefixed) cookie ``name``: the new value is visible to
        the rest of this request straight away, and a cookie is queued to be
        sent with the response. Returns the queued :any:`Cookie`.
        """
        name = self.with_prefix(name)
        cookie = self._jar.make(name, value, minutes, path, domain, secure,
                                http_only, raw, same_site)

        self._request.cookies[name] = value
        self._jar.queue(cookie)
        self.logger.debug("Set cookie %s for %s minutes", name, minutes)
        return cookie

    store = set

    def forever(self, name, value, path=None, domain=None, secure=None,
                http_only=True, raw=False, same_site=None):
        """
        Sets a cookie that lasts five years.
        """
        return self.set(name, value, FOREVER, path, domain, secure,
                        http_only, raw, same_site)

    def forget(self, name, path=None, domain=None):
        """
        Deletes the cookie ``name`` from the request and tells the client to
        discard it. Both the name as given and its prefixed form are
        forgotten, as the cookie may predate the prefix.
        """
        self._forget(name, path, domain)
        self._forget(self.with_prefix(name), path, domain)

    def _forget(self, name, path, domain):
        self._request.cookies.pop(name, None)
        # A name the client can't have sent needs no expiring cookie
        if not Cookie.is_legal_name(name):
            return
        self._jar.queue(self._jar.forget(name, path, domain))
        self.logger.debug("Forgot cookie %s", name)

    delete = forget
    unset = forget
    expire = forget
    destroy = forget

    def unqueue(self, name, path=None):
        """
        Removes the (prefixed) cookie ``name`` from the response queue.
        """
        self._jar.unqueue(self.with_prefix(name), path)

    def has_queued(self, name, path=None):
        """
        ``True`` if the (prefixed) cookie ``name`` is queued for the
        response.
        """
        return self._jar.has_queued(self.with_prefix(name), path)

    def queued(self, name, default=None, path=None):
        return self._jar.queued(self.with_prefix(name), default, path)

    def make(self, name, value, minutes=0, path=None, domain=None,
             secure=None, http_only=True, raw=False, same_site=None):
        """
        Creates a :any:`Cookie` with the jar defaults, without queueing it.
        The name is used as given.
        """
        return self._jar.make(name, value, minutes, path, domain, secure,
                              http_only, raw, same_site)

    def queue(self, *args, **kw):
        self._jar.queue(*args, **kw)

    def __contains__(self, name):
        return self.has(name)

    def __getitem__(self, name):
        return self.get(name)

    def __setitem__(self, name, value):
        self.set(name, value)

    def __delitem__(self, name):
        self.forget(name)
