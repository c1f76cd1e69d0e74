from cookier.tokens import TokenCodec
from cookier_tests.code_tests.helpers import get_codec


def test_encode_decode():
    codec = get_codec()
    token = codec.encode({'user': 'jane', 'roles': ['admin']})

    assert isinstance(token, str)
    assert codec.decode(token) == {'user': 'jane', 'roles': ['admin']}


def test_not_a_token():
    codec = get_codec()

    assert codec.decode('abc123') is None
    assert codec.decode('') is None
    assert codec.decode(None) is None
    assert codec.decode(42) is None


def test_tampered_token():
    codec = get_codec()
    token = codec.encode({'user': 'jane'})

    assert codec.decode(token + 'x') is None


def test_other_secret_or_salt():
    token = get_codec().encode('hello')

    assert TokenCodec('another secret').decode(token) is None
    assert get_codec(salt='elsewhere').decode(token) is None


def test_expired_token():
    token = get_codec().encode('hello')

    # Any token is older than a negative age
    assert get_codec(max_age=-1).decode(token) is None
    assert get_codec(max_age=0).decode(token) == 'hello'
    assert get_codec(max_age=3600).decode(token) == 'hello'
