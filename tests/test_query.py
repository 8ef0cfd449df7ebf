import pytest

import uricodec
from uricodec import query


class TestParseQuery:
    @pytest.mark.parametrize(
        'query_string,expected',
        [
            (b'', []),
            (b'?', []),
            (
                b'key1=value1&key2=value2',
                [(b'key1', b'value1'), (b'key2', b'value2')],
            ),
            (b'key1&key2=value2', [(b'key1', None), (b'key2', b'value2')]),
            (b'?key1=value1', [(b'key1', b'value1')]),
            (b'??a', [(b'?a', None)]),
            (b'a=1;b=2&c=3', [(b'a', b'1'), (b'b', b'2'), (b'c', b'3')]),
            (b'a=', [(b'a', b'')]),
            (b'=b', [(b'', b'b')]),
            (b'a=b=c', [(b'a', b'b=c')]),
            (b'a=1&', [(b'a', b'1')]),
            (b'&', [(b'', None)]),
            (b'a&&b', [(b'a', None), (b'', None), (b'b', None)]),
            (b'a=1&a=2&a', [(b'a', b'1'), (b'a', b'2'), (b'a', None)]),
        ],
    )
    def test_parse(self, query_string, expected):
        assert query.parse_query(query_string) == expected

    def test_parse_decodes(self):
        assert query.parse_query(b'a+b=c+d&e%26f=g%3Dh%2B') == [
            (b'a b', b'c d'),
            (b'e&f', b'g=h+'),
        ]

    def test_parse_keep_plus(self):
        assert query.parse_query(b'q=a+b%2Bc', unquote_plus=False) == [
            (b'q', b'a+b+c')
        ]

    def test_parse_malformed_escapes(self):
        assert query.parse_query(b'x=%&y=%Q&z=100%') == [
            (b'x', b'%'),
            (b'y', b'%Q'),
            (b'z', b'100%'),
        ]

    def test_parse_preserves_order(self):
        qs = b'z=1&a=2&m=3&a=4'
        assert [k for k, _ in query.parse_query(qs)] == [b'z', b'a', b'm', b'a']


class TestRenderQuery:
    @pytest.mark.parametrize('prefix', [True, False])
    def test_empty(self, prefix):
        assert query.render_query([], prefix) == b''
        assert query.render_query([], prefix=prefix) == b''

    def test_render(self):
        q = [(b'key1', b'value1'), (b'key2', None), (b'key3', b'')]
        assert query.render_query(q) == b'?key1=value1&key2&key3='
        assert query.render_query(q, prefix=False) == b'key1=value1&key2&key3='

    def test_render_encodes(self):
        q = [(b'a b', b'c&d'), (b'e=f', b'g+h;i'), (b'\xff', b'~-_.')]
        assert query.render_query(q, False) == (
            b'a%20b=c%26d&e%3Df=g%2Bh%3Bi&%FF=~-_.'
        )

    def test_render_never_emits_semicolon_separator(self):
        rendered = query.render_query(query.parse_query(b'a=1;b=2'), False)
        assert rendered == b'a=1&b=2'

    def test_render_accepts_tuples(self):
        assert query.render_query(((b'a', b'1'), (b'b', None))) == b'?a=1&b'

    @pytest.mark.parametrize(
        'q',
        [
            [],
            [(b'', b'')],
            [(b'a', None), (b'a', b''), (b'a', b'1')],
            [(b'k e+y', b'v&a=l;u?e'), (b'\x00\xff', b'%41')],
            [(b'?', b'?'), (b'', b'=')],
        ],
    )
    @pytest.mark.parametrize('prefix', [True, False])
    def test_round_trip(self, q, prefix):
        assert query.parse_query(query.render_query(q, prefix)) == q

    def test_trailing_bare_empty_key_is_lost(self):
        rendered = query.render_query([(b'a', None), (b'', None)])
        assert rendered == b'?a&'
        assert query.parse_query(rendered) == [(b'a', None)]

    def test_hoisted(self):
        assert uricodec.parse_query is query.parse_query
        assert uricodec.render_query is query.render_query
