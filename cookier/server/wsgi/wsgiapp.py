"""
This module contains the WSGI application. The WSGI application is
'application', a small debug page that shows the cookies of the request
as the cookie manager sees them, and counts the visits of the client in a
cookie of its own.
"""
from cookier.server.wsgi.middlewares import CookierContextMiddleware
from cookier.server.wsgi.context import get_context


def cookie_report(environ, start_response):
    ctx = get_context()
    cookies, resp = ctx.cookies, ctx.resp
    resp.set_header('Cache-Control', 'no-cache')

    try:
        visits = int(cookies.get_original('visits', 0)) + 1
    except ValueError:
        visits = 1
    cookies.set('visits', visits)

    resp.append_json({'uri': ctx.env.uri,
                      'prefix': cookies.prefix,
                      'cookies': cookies.all(),
                      'visits': visits}, indent=2)
    return resp.respond()


application = CookierContextMiddleware(cookie_report)

# Provide a basic WSGI server for testing
if __name__ == '__main__':
    import wsgiref.simple_server

    from cookier.logger import logger, setdemon

    setdemon(False)

    server = 'localhost'
    port = 8000

    try:
        httpd = wsgiref.simple_server.make_server(
            server, port, CookierContextMiddleware(cookie_report,
                                                   logger=logger))
        logger.info("Serving on http://%s:%d/", server, port)
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("\nExiting after Ctrl-c")
