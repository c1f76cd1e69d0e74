"""
This module contains the middleware layer in our WSGI stack.

CookierContextMiddleware sets up the per-request context (request,
response, cookie jar and cookie manager) before handing the request to the
application, and tears it down afterwards.
"""

from cookier.logger_dummy import DummyLogger
from cookier.provider import get_manager_factory

from .context import get_context, invalidate_context
from .request import Request
from .response import Response, RequestRedirect


class CookierContextMiddleware(object):
    """
    Takes care of:
    - providing the 'context', with fresh Request and Response objects
    - creating the CookieJar whose cookies the Response will send
    - handling RequestRedirect exceptions raised by the application
    - invalidating the context once the request is done

    ``factory`` is the :any:`ManagerFactory` used to build the cookie
    managers; by default, the process-wide one.
    """

    def __init__(self, application, factory=None, logger=DummyLogger()):
        self.application = application
        self.factory = factory
        self.logger = logger

    def __call__(self, environ, start_response):
        factory = self.factory or get_manager_factory()
        ctx = get_context(initialize=True, factory=factory)

        try:
            jar = factory.make_jar()
            request = Request(environ)
            response = Response(environ, start_response, jar)
            ctx.set_content(request, response, jar)

            try:
                return self.application(environ, start_response)
            except RequestRedirect:
                return ctx.resp.respond()
        except Exception:
            self.logger.error("Error processing %s", environ.get('PATH_INFO'),
                              exc_info=True)
            raise
        finally:
            self.close()

    def close(self):
        invalidate_context()
