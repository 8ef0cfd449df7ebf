# Copyright 2013 by Rackspace Hosting, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Percent-encoding primitives.

This module implements byte-level percent-encoding and decoding. Every
function here takes and returns ``bytes``; character decoding is left to the
query and path modules built on top::

    from uricodec import percent

    percent.encode(b'a b')  # b'a%20b'
    percent.decode(b'a+b%21')  # b'a b!'
"""

from __future__ import annotations

import functools
from typing import Callable, List

from uricodec.constants import ALPHANUMERIC
from uricodec.constants import HEX_DIGITS
from uricodec.constants import PATH_UNRESERVED
from uricodec.constants import PYPY
from uricodec.constants import QUERY_UNRESERVED

__all__ = (
    'decode',
    'encode',
    'encode_path_segment',
    'encode_query',
    'url_decode',
    'url_encode',
)

# This map construction is based on urllib's implementation
_HEX_TO_BYTE = {
    bytes([a, b]): bytes([int(bytes([a, b]), 16)])
    for a in HEX_DIGITS
    for b in HEX_DIGITS
}


def _create_byte_encoder(unreserved: bytes) -> Callable[[bytes], bytes]:
    allowed = ALPHANUMERIC + unreserved

    # NOTE: Index the lookup table by byte value; iterating over a bytes
    #   object yields ints, so map() can feed it directly.
    lookup: List[bytes] = []
    for code_point in range(256):
        if code_point in allowed:
            lookup.append(bytes([code_point]))
        else:
            # NOTE: Must be upper-case.
            lookup.append('%{0:02X}'.format(code_point).encode())

    encode_byte = lookup.__getitem__

    def encoder(data: bytes) -> bytes:
        # PERF(kgriffs): Very fast way to check, learned from urlib.quote
        if not data.rstrip(allowed):
            return bytes(data)

        # PERF(kgriffs): map() is faster than list comp or generator comp on
        # CPython 3.
        return b''.join(map(encode_byte, data))

    return encoder


encode_query = _create_byte_encoder(QUERY_UNRESERVED)
encode_query.__name__ = 'encode_query'
encode_query.__doc__ = """Percent-encode a query string key or value.

Letters, digits, and ``-_.~`` are left as-is; every other byte is
percent-encoded with upper-case hex digits. The result models
``urllib.parse.quote_from_bytes(data, safe='')``.

Args:
    data (bytes): Raw key or value to encode.

Returns:
    bytes: The escaped version of `data`.
"""

encode_path_segment = _create_byte_encoder(PATH_UNRESERVED)
encode_path_segment.__name__ = 'encode_path_segment'
encode_path_segment.__doc__ = """Percent-encode a single path segment.

In addition to letters, digits, and ``-_.~``, the sub-delimiters
``:@&=+$,`` are left as-is since they carry no special meaning inside a
segment. Notably, ``/`` is always escaped.

Args:
    data (bytes): Raw segment to encode.

Returns:
    bytes: The escaped version of `data`.
"""

_KNOWN_ENCODERS = {
    QUERY_UNRESERVED: encode_query,
    PATH_UNRESERVED: encode_path_segment,
}


@functools.lru_cache(maxsize=64)
def _get_encoder(unreserved: bytes) -> Callable[[bytes], bytes]:
    return _KNOWN_ENCODERS.get(unreserved) or _create_byte_encoder(unreserved)


def encode(data: bytes, unreserved: bytes = QUERY_UNRESERVED) -> bytes:
    """Percent-encode a byte string.

    ASCII letters and digits are never escaped. Any other byte is replaced
    with ``%XX`` (upper-case hex) unless it appears in `unreserved`.

    Args:
        data (bytes): The bytes to encode.

    Keyword Arguments:
        unreserved (bytes): Extra bytes to leave unescaped (default
            :attr:`~uricodec.constants.QUERY_UNRESERVED`). Use
            :attr:`~uricodec.constants.PATH_UNRESERVED` for path segments.

    Returns:
        bytes: An escaped version of `data`.
    """

    return _get_encoder(bytes(unreserved))(data)


def url_encode(data: bytes, in_query: bool = True) -> bytes:
    """Percent-encode `data` for use in either a query string or a path.

    Args:
        data (bytes): The bytes to encode.
        in_query (bool): Set to ``False`` to encode `data` as a path
            segment rather than a query string component (default ``True``).

    Returns:
        bytes: An escaped version of `data`.
    """

    if in_query:
        return encode_query(data)
    return encode_path_segment(data)


def _join_tokens_bytearray(tokens: List[bytes]) -> bytes:
    decoded = bytearray(tokens[0])
    for token in tokens[1:]:
        token_partial = token[:2]
        try:
            decoded += _HEX_TO_BYTE[token_partial] + token[2:]
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            decoded += b'%' + token

    return bytes(decoded)


def _join_tokens_list(tokens: List[bytes]) -> bytes:
    decoded = tokens[:1]
    # PERF(vytas): Do not copy list: a simple bool flag is fastest on PyPy JIT.
    skip = True
    for token in tokens:
        if skip:
            skip = False
            continue

        token_partial = token[:2]
        try:
            decoded.append(_HEX_TO_BYTE[token_partial] + token[2:])
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            decoded.append(b'%' + token)

    return b''.join(decoded)


# PERF(vytas): The best method to join many byte strings depends on the Python
#   implementation. On CPython, bytearray += often comes on top, while on
#   PyPy b''.join(list) is the recommended approach.
_join_tokens = _join_tokens_list if PYPY else _join_tokens_bytearray


def decode(data: bytes, unquote_plus: bool = True) -> bytes:
    """Decode percent-encoded bytes.

    This function models ``urllib.parse.unquote_to_bytes``, optionally
    preceded by replacing ``'+'`` with ``' '``. It never fails: a ``'%'``
    that is not followed by two hex digits is kept as-is, and the output is
    never longer than the input.

    Args:
        data (bytes): Percent-encoded bytes.

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to retain any plus ('+')
            characters in the given bytes, rather than converting them to
            spaces (default ``True``). Typically you should set this
            to ``False`` when decoding any part of a URI other than the
            query string.

    Returns:
        bytes: The decoded bytes.
    """

    # NOTE: Normalize to bytes so that bytearray tokens can be hashed below.
    decoded = bytes(data)

    # NOTE: Replacing literal pluses first is safe since an escaped plus
    #   (%2B) only materializes below.
    if unquote_plus and b'+' in decoded:
        decoded = decoded.replace(b'+', b' ')

    # Short-circuit if we can
    if b'%' not in decoded:
        return decoded

    # PERF(kgriffs): This was found to be faster than using
    # a regex sub call or list comprehension with a join.
    tokens = decoded.split(b'%')
    # PERF(vytas): Just use in-place add for a low number of items:
    if len(tokens) < 8:
        decoded = tokens[0]
        for token in tokens[1:]:
            token_partial = token[:2]
            try:
                decoded += _HEX_TO_BYTE[token_partial] + token[2:]
            except KeyError:
                # malformed percentage like "x=%" or "y=%+"
                decoded += b'%' + token

        return bytes(decoded)

    return _join_tokens(tokens)


url_decode = decode
