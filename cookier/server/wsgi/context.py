"""
The context object contains the items representing the web request we are
processing: the request and response objects, the response cookie jar and
the cookie manager for this request.
"""

from threading import local

from cookier.provider import get_manager_factory


# The context storage is a threading local-variable container. Each thread
# will see a different value
__ContextStorage__ = local()


def get_context(initialize=False, factory=None):
    """
    This is a factory function that will return an initialized :any:`Context`
    object. Using this factory ensures that each thread in a multi-thread
    environment gets its own Context object, to avoid overlap.

    Calling ``get_context()`` within a thread of execution will return always
    the same object.

    The user shouldn't invoke ``get_context(initialize=True)``, which is
    meant only to create a fresh ``Context`` at the beginning of processing a
    new query. ``factory`` is the ManagerFactory that the new Context will
    use, the process-wide one if ``None``.
    """

    if initialize:
        __ContextStorage__.ctx = Context(factory)

    return getattr(__ContextStorage__, 'ctx', None)


def invalidate_context():
    __ContextStorage__.ctx = None


class Context(object):
    """
    Main interface class. It exposes the request and response objects,
    and the cookies.

    In addition, as shorthand, if one tries to access to an attribute that
    doesn't exist in ``Context``, it will return the equivalent attribute in
    the :any:`Request` object.

    Eg: ``ctx.env`` is the same as ``ctx.req.env``
    """
    def __init__(self, factory=None):
        self.req = None
        self.resp = None
        self.jar = None
        self._factory = factory
        self._cookies = None

    def set_content(self, req, resp, jar):
        """
        Sets the request/response objects and the cookie jar. Not meant to be
        used by user applications.
        """
        self.req = req
        self.resp = resp
        self.jar = jar
        self._cookies = None

    def __getattr__(self, attr):
        if attr.startswith('_') or self.__dict__.get('req') is None:
            raise AttributeError(attr)
        return getattr(self.req, attr)

    @property
    def cookies(self):
        """
        The :any:`Manager` for this request, built on first use by the
        process-wide :any:`ManagerFactory` (or the one passed to the
        context).
        """
        if self._cookies is None:
            factory = self._factory or get_manager_factory()
            self._cookies = factory(self.req, self.jar)
        return self._cookies
