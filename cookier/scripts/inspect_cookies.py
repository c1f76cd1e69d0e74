"""
Show how the cookie manager reads a Cookie: header.

Usage: python -m cookier.scripts.inspect_cookies [options] 'a=1; app_b=2'

For every cookie in the header it prints the name sent by the client, the
key the manager lists it under, the raw value and the resolved (decoded)
value. The header is read from stdin if not given as an argument.
"""
import datetime
import sys
from optparse import OptionParser

from cookier.config import get_config
from cookier.provider import ManagerFactory
from cookier.server.wsgi.request import Request


def inspect_cookies(header, factory):
    """
    Returns a list of (name, key, raw value, resolved value) tuples, one
    per cookie in the ``header`` string, as seen by a Manager made by
    ``factory``.
    """
    request = Request({'HTTP_COOKIE': header})
    manager = factory(request)

    rows = []
    for name, raw in request.cookies.items():
        rows.append((name, manager.unprefixed(name), raw,
                     manager.resolve(raw)))
    return rows


if __name__ == "__main__":

    parser = OptionParser(usage="%prog [options] [cookie header]")
    parser.add_option("--prefix", action="store", dest="prefix", default=None,
                      help="Cookie prefix, overriding the configuration")
    parser.add_option("--secret", action="store", dest="secret", default=None,
                      help="Token secret key, overriding the configuration")
    parser.add_option("--debug", action="store_true", dest="debug",
                      help="Increase log level to debug")
    parser.add_option("--demon", action="store_true", dest="demon",
                      help="Run as a background demon, do not generate stdout")

    (options, args) = parser.parse_args()

    from cookier.logger import logger, setdebug, setdemon

    # Logging level to debug? Include stdio log?
    setdebug(options.debug)
    setdemon(options.demon)

    logger.info("*********    inspect_cookies.py - starting up at %s",
                datetime.datetime.now())

    config = get_config()
    if options.prefix is not None:
        config['cookie_prefix'] = options.prefix
    if options.secret is not None:
        config['secret_key'] = options.secret
    factory = ManagerFactory.from_config(config, logger=logger)

    header = ' '.join(args) if args else sys.stdin.read().strip()
    if not header:
        logger.error("No cookie header given")
        sys.exit(1)

    for name, key, raw, resolved in inspect_cookies(header, factory):
        print(f"{name}\t{key}\t{raw!r}\t{resolved!r}")

    logger.info("*** inspect_cookies.py exiting normally at %s",
                datetime.datetime.now())
