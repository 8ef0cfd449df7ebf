from urllib.parse import quote_from_bytes
from urllib.parse import unquote_to_bytes

import pytest

from uricodec import constants
from uricodec import percent


class TestEncode:
    def test_unreserved_passthrough(self):
        data = b'ABCXYZabcxyz0189-_.~'
        assert percent.encode(data) == data
        assert percent.encode(data, constants.PATH_UNRESERVED) == data

    @pytest.mark.parametrize(
        'data,expected',
        [
            (b'', b''),
            (b'ab cd', b'ab%20cd'),
            (b'ab/cd', b'ab%2Fcd'),
            (b'ab+cd=42,9', b'ab%2Bcd%3D42%2C9'),
            (b'%26', b'%2526'),
            ('ç€'.encode(), b'%C3%A7%E2%82%AC'),
            (b'\x00\x7f', b'%00%7F'),
        ],
    )
    def test_query_set(self, data, expected):
        assert percent.encode(data) == expected
        assert percent.encode_query(data) == expected
        assert percent.url_encode(data) == expected

    @pytest.mark.parametrize(
        'data,expected',
        [
            (b'a:b@c&d=e+f$g,h', b'a:b@c&d=e+f$g,h'),
            (b'a/b', b'a%2Fb'),
            (b'a?b#c', b'a%3Fb%23c'),
            (b'foo bar', b'foo%20bar'),
        ],
    )
    def test_path_set(self, data, expected):
        assert percent.encode(data, constants.PATH_UNRESERVED) == expected
        assert percent.encode_path_segment(data) == expected
        assert percent.url_encode(data, in_query=False) == expected

    def test_uppercase_hex(self):
        assert percent.encode(b'\xff') == b'%FF'
        assert percent.encode(b'\xab\xcd', constants.PATH_UNRESERVED) == b'%AB%CD'

    def test_custom_unreserved_set(self):
        assert percent.encode(b'a/b c', b'/') == b'a/b%20c'
        assert percent.encode(b'a/b c', b' /') == b'a/b c'
        assert percent.encode(b'a-b', b'') == b'a%2Db'

    def test_encoders_are_shared(self):
        assert percent._get_encoder(constants.QUERY_UNRESERVED) is percent.encode_query
        assert (
            percent._get_encoder(constants.PATH_UNRESERVED)
            is percent.encode_path_segment
        )

    def test_prop_encode_models_stdlib_quote(self, arbitrary_bytes):
        for case in arbitrary_bytes:
            assert percent.encode(case) == quote_from_bytes(case, safe='').encode()

    def test_prop_encode_path_models_stdlib_quote(self, arbitrary_bytes):
        for case in arbitrary_bytes:
            expected = quote_from_bytes(case, safe=':@&=+$,').encode()
            assert percent.encode(case, constants.PATH_UNRESERVED) == expected


class TestDecode:
    def test_decode(self, decode_approach):
        assert percent.decode(b'abcd') == b'abcd'
        assert percent.decode(b'ab%20cd') == b'ab cd'
        assert percent.decode(b'ab%2Fcd') == b'ab/cd'
        assert percent.decode(b'This thing is %C3%A7') == 'This thing is ç'.encode()
        assert percent.decode(b'%c3%a7') == 'ç'.encode()
        assert percent.decode(b'%FF') == b'\xff'

    @pytest.mark.parametrize(
        'encoded,expected',
        [
            (b'%', b'%'),
            (b'ab%', b'ab%'),
            (b'ab%2', b'ab%2'),
            (b'ab%2Gcd', b'ab%2Gcd'),
            (b'%%41', b'%A'),
            (b'%Q', b'%Q'),
            (b'ab%2Fcd: 100% coverage', b'ab/cd: 100% coverage'),
            (b'%s' * 100, b'%s' * 100),
            (b'%41' * 100, b'A' * 100),
        ],
    )
    def test_decode_bad_coding(self, encoded, expected, decode_approach):
        assert percent.decode(encoded) == expected
        assert len(percent.decode(encoded)) <= len(encoded)

    def test_decode_unquote_plus(self, decode_approach):
        assert percent.decode(b'/disk/lost+found/fd0') == b'/disk/lost found/fd0'
        assert percent.decode(b'/disk/lost+found/fd0', unquote_plus=False) == (
            b'/disk/lost+found/fd0'
        )

        assert percent.decode(b'x=ab%2Bcd%3D42%2C9') == b'x=ab+cd=42,9'
        assert percent.decode(b'x=ab%2Bcd%3D42%2C9', unquote_plus=False) == (
            b'x=ab+cd=42,9'
        )

    @pytest.mark.parametrize('unquote_plus', [True, False])
    def test_decode_percent_plus(self, unquote_plus, decode_approach):
        expected = b'% 2' if unquote_plus else b'%+2'
        assert percent.decode(b'%+2', unquote_plus=unquote_plus) == expected

    @pytest.mark.parametrize(
        'encoded,expected',
        [
            (bytearray(b'abcd'), b'abcd'),
            (bytearray(b'a%41'), b'aA'),
            (bytearray(b'a+b%2B%'), b'a b+%'),
            (bytearray(b'%41' * 10), b'A' * 10),
            (bytearray(b'%zz' * 10), b'%zz' * 10),
        ],
    )
    def test_decode_bytearray(self, encoded, expected, decode_approach):
        decoded = percent.decode(encoded)
        assert decoded == expected
        assert type(decoded) is bytes

    def test_url_decode_alias(self):
        assert percent.url_decode is percent.decode

    def test_prop_decode_models_stdlib_unquote(self, arbitrary_bytes, decode_approach):
        for case in arbitrary_bytes:
            expected = unquote_to_bytes(case.replace(b'+', b' '))
            assert percent.decode(case) == expected

    @pytest.mark.parametrize(
        'unreserved',
        [constants.QUERY_UNRESERVED, constants.PATH_UNRESERVED, b'', b' /'],
    )
    def test_prop_decode_inverts_encode(
        self, unreserved, arbitrary_bytes, decode_approach
    ):
        for case in arbitrary_bytes:
            case = case.replace(b'+', b'')
            encoded = percent.encode(case, unreserved)
            assert percent.decode(encoded, unquote_plus=False) == case
