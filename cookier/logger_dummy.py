# Kept apart from the logger module so that library code can import it
# without configuring the python root logger

class DummyLogger(object):
    """
    Stand-in for a logging.Logger used as the default ``logger`` argument of
    the cookie classes. It discards everything, or with ``print=True`` it
    prints each message (with its %-style arguments applied) to stdout.
    """
    levels = ('debug', 'info', 'warning', 'error', 'critical', 'exception')

    def __init__(self, print=False):
        emit = self._print if print else self._discard
        for level in self.levels:
            setattr(self, level, emit)

    def _discard(self, msg, *args, **kwargs):
        pass

    def _print(self, msg, *args, **kwargs):
        print(msg % args if args else msg)
