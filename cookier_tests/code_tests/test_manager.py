import pytest

from cookier.manager import Manager
from cookier.server.wsgi.cookies import FOREVER
from cookier.server.wsgi.response import Response
from cookier_tests.code_tests.helpers import (make_manager, make_environ,
                                              get_codec, StartResponse)


@pytest.mark.parametrize('prefix', ['', 'app_', 'App-'])
@pytest.mark.parametrize('name', ['session', 'app_session', 'Remember Me',
                                  'ÜberCookie', '', 'App-x'])
def test_with_prefix_idempotent(prefix, name):
    m = make_manager(prefix=prefix)
    once = m.with_prefix(name)

    assert m.with_prefix(once) == once
    if once:
        assert m.set(once, 'v').name == once


def test_with_prefix():
    m = make_manager(prefix='app_')

    assert m.with_prefix('session') == 'app_session'
    assert m.with_prefix('app_session') == 'app_session'
    assert m.with_prefix('Remember Me!') == 'app_remember_me'
    assert m.with_prefix('ÜberCookie') == 'app_ubercookie'


def test_with_prefix_slugifies_prefixed_names():
    m = make_manager(prefix='App-')

    assert m.with_prefix('App-foo_bar') == 'App-foo_bar'
    assert m.with_prefix('App-Foo Bar') == 'App-app_foo_bar'
    assert m.set('App-Foo Bar', 'v').name == 'App-app_foo_bar'


def test_prefix_property():
    m = make_manager(prefix='')

    assert m.prefix == ''
    assert m.set_prefix('app_') is m
    assert m.prefix == 'app_'
    assert m.set_prefix(None).prefix == ''


def test_get_prefixed_first():
    m = make_manager('theme=light; app_theme=dark')

    assert m.get('theme') == 'dark'


def test_get_falls_back_to_raw_name():
    m = make_manager('legacy=old')

    assert m.get('legacy') == 'old'


def test_get_empty_prefixed_falls_back():
    m = make_manager('theme=light')
    m.request.cookies['app_theme'] = ''

    assert m.get('theme') == 'light'


def test_get_default():
    m = make_manager('other=1')

    assert m.get('missing') is None
    assert m.get('missing', 'D') == 'D'
    assert m['missing'] is None


def test_get_decodes_tokens():
    codec = get_codec()
    token = codec.encode({'user': 7})
    m = make_manager('app_session=%s; app_plain=abc123' % token, codec=codec)

    assert m.get('session') == {'user': 7}
    assert m.get_original('session') == token
    assert m.get('session', original=True) == token
    assert m.get('plain') == 'abc123'
    assert m.get_original('plain') == 'abc123'


def test_get_without_codec_returns_raw():
    token = get_codec().encode({'user': 7})
    m = make_manager('app_session=%s' % token)

    assert m.get('session') == token


def test_resolve():
    codec = get_codec()
    m = make_manager(codec=codec)

    assert m.resolve(codec.encode([1, 2])) == [1, 2]
    assert m.resolve('plain') == 'plain'
    assert m.resolve(None) is None
    # Valid tokens carrying an empty structure are left alone
    empty = codec.encode({})
    assert m.resolve(empty) == empty


def test_get_many():
    m = make_manager('app_a=1; b=2')

    assert m.get_many({'x': 1, 'y': 2}) == {'x': 1, 'y': 2}
    assert m.get_many({'a': 'D', 'c': 'D'}) == {'a': '1', 'c': 'D'}
    assert m.get_many(['a', 'b', 'c']) == {'a': '1', 'b': '2', 'c': None}
    assert m.get_many({0: 'a', 'c': 3}) == {'a': '1', 'c': 3}
    assert m.get(['a', 'c']) == {'a': '1', 'c': None}
    assert m.get({'c': 5}) == {'c': 5}


def test_all():
    codec = get_codec()
    token = codec.encode('decoded')
    m = make_manager('app_theme=dark; legacy=old; app_t=%s' % token,
                     codec=codec)

    assert m.all() == {'theme': 'dark', 'legacy': 'old', 't': 'decoded'}
    assert m.get() == m.all()


def test_all_strips_prefix_characters():
    # Leading characters found in the prefix are stripped, even when the
    # cookie doesn't carry the prefix
    m = make_manager('apple=1')

    assert m.all() == {'le': '1'}


def test_has():
    m = make_manager('app_theme=dark; legacy=old')

    assert m.has('theme')
    assert m.has('legacy')
    assert not m.has('missing')
    assert m.exists('theme')
    assert 'theme' in m
    assert 'missing' not in m


def test_has_matches_original_get():
    m = make_manager('app_theme=dark')
    for name in ('theme', 'missing'):
        assert m.has(name) == (m.get(name, None, True) is not None)


def test_set():
    m = make_manager()
    cookie = m.set('foo', 'bar')

    assert cookie.name == 'app_foo'
    assert cookie.value == 'bar'
    assert cookie.minutes == 30
    assert cookie.http_only is True
    assert m.get('foo') == 'bar'
    assert m.request.cookie('app_foo') == 'bar'
    assert m.has_queued('foo')
    assert m.queued('foo') is cookie
    assert m.jar.queued('app_foo').value == 'bar'


def test_set_attributes():
    m = make_manager()
    cookie = m.set('foo', 'bar', 5, '/path', 'example.com', True, False,
                   True, 'strict')

    assert cookie.minutes == 5
    assert cookie.path == '/path'
    assert cookie.domain == 'example.com'
    assert cookie.secure is True
    assert cookie.http_only is False
    assert cookie.raw is True
    assert cookie.same_site == 'strict'
    assert m.has_queued('foo', '/path')
    assert not m.has_queued('foo', '/')


def test_set_token_value():
    codec = get_codec()
    m = make_manager(codec=codec)
    m.set('session', codec.encode({'user': 7}))

    assert m.get('session') == {'user': 7}


def test_store_and_forever():
    m = make_manager()

    assert Manager.store is Manager.set
    assert m.store('a', '1').minutes == 30
    cookie = m.forever('b', '2')
    assert cookie.minutes == FOREVER
    assert m.get('b') == '2'


def test_forget():
    m = make_manager('foo=1; app_foo=2')
    m.forget('foo')

    assert m.get('foo') is None
    assert m.get(m.with_prefix('foo')) is None
    assert m.get('foo', 'D') == 'D'
    assert not m.has('foo')
    assert m.jar.queued('foo').is_cleared()
    assert m.jar.queued('app_foo').is_cleared()


def test_forget_after_set():
    m = make_manager()
    m.set('foo', 'bar')
    m.forget('foo')

    assert m.get('foo') is None
    assert m.queued('foo').is_cleared()


def test_forget_aliases():
    assert Manager.delete is Manager.forget
    assert Manager.unset is Manager.forget
    assert Manager.expire is Manager.forget
    assert Manager.destroy is Manager.forget


def test_forget_illegal_raw_name():
    m = make_manager()
    m.request.cookies['My Cookie'] = 'local'
    m.forget('My Cookie')

    queued = m.jar.get_queued_cookies()
    assert [c.name for c in queued] == ['app_my_cookie']
    assert 'My Cookie' not in m.request.cookies


def test_unqueue():
    m = make_manager()
    m.set('foo', 'bar')
    m.unqueue('foo')

    assert not m.has_queued('foo')
    # Same-request visibility is not affected
    assert m.get('foo') == 'bar'


def test_subscript():
    m = make_manager()
    m['foo'] = 'bar'

    assert m['foo'] == 'bar'
    assert 'foo' in m
    assert m.has_queued('foo')

    del m['foo']
    assert 'foo' not in m
    assert m.queued('foo').is_cleared()


def test_jar_passthrough():
    m = make_manager()
    cookie = m.make('raw_name', 'v', 10)
    m.queue(cookie)

    assert cookie.name == 'raw_name'
    assert m.jar.has_queued('raw_name')
    assert not m.has('raw_name')


def test_forget_attribute_name():
    m = make_manager('app_version=2')
    m.request.cookies['version'] = '1'
    m.forget('version')

    assert m.get('version') is None
    assert not m.jar.has_queued('version')
    assert m.jar.queued('app_version').is_cleared()


def test_set_attribute_name_without_prefix():
    m = make_manager(prefix='')

    with pytest.raises(ValueError):
        m.set('path', 'x')
    assert m.get('path') is None
    assert not m.jar.get_queued_cookies()


def _set_cookie_headers(m):
    sr = StartResponse()
    Response(make_environ(), sr, m.jar).respond()
    return dict((header.split('=', 1)[0], header)
                for header in sr.get_all('Set-Cookie'))


def test_response_after_forget_and_set():
    m = make_manager('foo=1; app_foo=2')
    m.forget('foo')
    m.forget('version')
    m.set('theme', 'dark')

    headers = _set_cookie_headers(m)

    assert sorted(headers) == ['app_foo', 'app_theme', 'app_version', 'foo']
    for name in ('foo', 'app_foo', 'app_version'):
        assert headers[name].startswith(name + '=; ')
        assert 'Max-Age=0' in headers[name]
    assert headers['app_theme'].startswith('app_theme=dark; ')
    assert 'Max-Age=1800' in headers['app_theme']
