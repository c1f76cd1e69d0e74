"""
Token encoding for cookie values.

The cookie manager passes every value it reads through :any:`TokenCodec`.
Values that were produced by :py:meth:`TokenCodec.encode` (with the same
secret and salt) come back as the original structure; anything else is
reported as "not a token" by returning ``None``.
"""

from itsdangerous import BadData, URLSafeTimedSerializer

from cookier.logger_dummy import DummyLogger


class TokenCodec(object):
    """
    Signs structures into URL-safe strings and back.

    ``secret`` is the signing key, ``salt`` namespaces the signatures so that
    tokens minted for other purposes with the same key are not accepted.
    ``max_age`` is the token lifetime in seconds; ``None`` or 0 disables the
    age check.
    """

    def __init__(self, secret, salt='cookier', max_age=None,
                 logger=DummyLogger()):
        self._serializer = URLSafeTimedSerializer(secret, salt=salt)
        self.max_age = max_age or None
        self.logger = logger

    def encode(self, obj):
        """
        Returns the signed token for ``obj``, which must be JSON serializable.
        """
        return self._serializer.dumps(obj)

    def decode(self, value):
        """
        Returns the structure carried by the token ``value``, or ``None`` if
        ``value`` is not a valid token: not a string, badly signed, malformed
        or expired.
        """
        if not isinstance(value, str) or not value:
            return None

        try:
            return self._serializer.loads(value, max_age=self.max_age)
        except BadData as e:
            self.logger.debug("Not a token (%s): %s", type(e).__name__, value)
            return None
