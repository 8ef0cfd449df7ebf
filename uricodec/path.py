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

"""Path utilities.

This module encodes and decodes lists of path segments, optionally
combined with a query string::

    from uricodec import path

    path.encode_path(['foo bar', 'baz'], [(b'x', b'1')])
    # b'/foo%20bar/baz?x=1'

    path.decode_path(b'/foo%20bar/baz?x=1')
    # (['foo bar', 'baz'], [(b'x', b'1')])
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from uricodec._typing import Query
from uricodec._typing import QueryItem
from uricodec._typing import Segments
from uricodec.percent import decode
from uricodec.percent import encode_path_segment
from uricodec.query import _encode_text
from uricodec.query import _render_query_into
from uricodec.query import parse_query

__all__ = (
    'decode_path',
    'decode_path_segments',
    'encode_path',
    'encode_path_segments',
    'encode_path_segments_relative',
    'extract_path',
)

_logger = logging.getLogger(__name__)

_ABSOLUTE_FORM_PREFIXES = (b'http://', b'https://')


def _encode_segments_into(buf: bytearray, segments: Iterable[str]):
    for segment in segments:
        buf += b'/'
        buf += encode_path_segment(_encode_text(segment))


def encode_path_segments(segments: Iterable[str]) -> bytes:
    """Encode a list of path segments into a URL path.

    Each segment is UTF-8 encoded, percent-encoded (leaving letters,
    digits, and ``-_.~:@&=+$,`` intact), and prefixed with a slash.
    Lone surrogates are encoded as-is rather than raising an error.
    For example::

        >>> encode_path_segments(['foo', 'bar', 'baz'])
        b'/foo/bar/baz'

        >>> encode_path_segments(['foo bar', 'baz/bin'])
        b'/foo%20bar/baz%2Fbin'

        >>> encode_path_segments(['שלום'])
        b'/%D7%A9%D7%9C%D7%95%D7%9D'

    Args:
        segments (list): Path segments as ``str``.

    Returns:
        bytes: The encoded path, or ``b''`` if `segments` is empty.
    """

    buf = bytearray()
    _encode_segments_into(buf, segments)
    return bytes(buf)


def encode_path_segments_relative(segments: Iterable[str]) -> bytes:
    """Like :func:`encode_path_segments`, but without the initial slash."""

    return b'/'.join(
        encode_path_segment(_encode_text(segment)) for segment in segments
    )


def decode_path_segments(encoded_path: bytes) -> Segments:
    """Parse a list of path segments from a URL path.

    A single leading slash is ignored. Pluses are retained as-is, and
    invalid UTF-8 is replaced with U+FFFD.

    Args:
        encoded_path (bytes): The path to decode, without any query string.

    Returns:
        list: The decoded segments. Both ``b''`` and ``b'/'`` yield an
        empty list.
    """

    if encoded_path in (b'', b'/'):
        return []

    if encoded_path[:1] == b'/':
        encoded_path = encoded_path[1:]

    return [
        decode(segment, unquote_plus=False).decode('utf-8', 'replace')
        for segment in encoded_path.split(b'/')
    ]


def encode_path(segments: Iterable[str], query: Iterable[QueryItem]) -> bytes:
    """Encode a whole path (path segments + query string).

    Args:
        segments (list): Path segments as ``str``.
        query (list): A :class:`~uricodec.Query`; an empty query adds
            nothing to the result.

    Returns:
        bytes: The encoded path and query string.
    """

    buf = bytearray()
    _encode_segments_into(buf, segments)
    _render_query_into(buf, query, prefix=True)
    return bytes(buf)


def decode_path(encoded: bytes) -> Tuple[Segments, Query]:
    """Decode a whole path (path segments + query string).

    The input is split at the first ``'?'``; see also
    :func:`decode_path_segments` and :func:`~uricodec.parse_query`.

    Returns:
        tuple: A (*segments*, *query*) tuple.
    """

    path, _, query_string = encoded.partition(b'?')
    return decode_path_segments(path), parse_query(query_string)


def extract_path(target: bytes) -> bytes:
    """Extract the path (and query string) from an HTTP request target.

    This is a best-effort helper for request targets given in absolute
    form, as in ``GET http://example.com/path HTTP/1.1``. Only a literal,
    lower-case ``http://`` or ``https://`` prefix is recognized; everything
    up to the next slash is discarded. For example::

        >>> extract_path(b'/path')
        b'/path'

        >>> extract_path(b'http://example.com:8080/path')
        b'/path'

        >>> extract_path(b'http://example.com')
        b'/'

        >>> extract_path(b'')
        b'/'

    Args:
        target (bytes): The request target.

    Returns:
        bytes: The path, including any query string. This is never empty.
    """

    path = target

    for prefix in _ABSOLUTE_FORM_PREFIXES:
        if target.startswith(prefix):
            rest = target[len(prefix) :]
            pos = rest.find(b'/')
            path = rest[pos:] if pos != -1 else b''

            if _logger.isEnabledFor(logging.DEBUG):
                _logger.debug(
                    'Discarded authority %r from request target %r',
                    rest[:pos] if pos != -1 else rest,
                    target,
                )
            break

    return path or b'/'
