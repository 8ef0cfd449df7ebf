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

"""Query string utilities.

Query strings generally have the following form::

    key1=value1&key2=value2

which is represented as the following :class:`~uricodec.Query`::

    [(b'key1', b'value1'), (b'key2', b'value2')]

A key with no ``=`` following it has a value of ``None``, which is distinct
from an empty value. For example, ``key1&key2=`` parses to::

    [(b'key1', None), (b'key2', b'')]

This module also provides helpers for queries whose keys and values are
``str`` (:class:`~uricodec.QueryText`), and for queries that do not allow
keys without values (:class:`~uricodec.SimpleQuery`).
"""

from __future__ import annotations

from typing import Iterable, Optional

from uricodec._typing import Query
from uricodec._typing import QueryItem
from uricodec._typing import QueryText
from uricodec._typing import SimpleQuery
from uricodec.percent import decode
from uricodec.percent import encode_query

__all__ = (
    'parse_query',
    'parse_query_text',
    'parse_simple_query',
    'query_text_to_query',
    'query_to_query_text',
    'query_to_simple_query',
    'render_query',
    'render_query_text',
    'render_simple_query',
    'simple_query_to_query',
)


def _encode_text(text: str) -> bytes:
    # NOTE: Lone surrogates (e.g., from os.fsdecode) cannot be encoded as
    #   strict UTF-8; pass them through rather than raising.
    return text.encode('utf-8', 'surrogatepass')


def _split_fields(query_string: bytes) -> list:
    if query_string[:1] == b'?':
        query_string = query_string[1:]

    if not query_string:
        return []

    # NOTE: Both '&' and ';' are accepted as separators. Normalizing on one
    #   of them first lets us stick to a plain split() below.
    if b';' in query_string:
        query_string = query_string.replace(b';', b'&')

    # PERF(kgriffs): This was found to be faster than using a regex, for
    # both short and long query strings.
    fields = query_string.split(b'&')

    # NOTE: A single trailing separator does not introduce an empty field,
    #   e.g., 'a=1&' yields one item, while '&' on its own still yields one.
    if not fields[-1]:
        fields.pop()

    return fields


def parse_query(query_string: bytes, unquote_plus: bool = True) -> Query:
    """Split a query string into a list of keys and values.

    A few important points:

    * The result is still bytes, since no character decoding is performed
      here. Use :func:`parse_query_text` for a UTF-8 view.
    * A leading ``'?'`` is ignored.
    * Fields may be separated by either ``'&'`` or ``';'``.
    * Only the first ``'='`` in a field separates the key from the value.
    * Percent-decoding errors are ignored; ``'%Q'`` is returned as-is.

    Args:
        query_string (bytes): The query string to parse.

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to retain any plus ('+')
            characters rather than converting them to spaces
            (default ``True``).

    Returns:
        list: A list of (*key*, *value*) tuples in the order they appear in
        `query_string`. *value* is ``None`` when the field has no ``'='``.
    """

    query = []

    for field in _split_fields(query_string):
        k, sep, v = field.partition(b'=')
        value: Optional[bytes] = decode(v, unquote_plus) if sep else None
        query.append((decode(k, unquote_plus), value))

    return query


def _render_query_into(buf: bytearray, query: Iterable[QueryItem], prefix: bool):
    sep = b'?' if prefix else b''

    for k, v in query:
        buf += sep
        buf += encode_query(k)
        if v is not None:
            buf += b'='
            buf += encode_query(v)

        sep = b'&'


def render_query(query: Iterable[QueryItem], prefix: bool = True) -> bytes:
    """Convert a :class:`~uricodec.Query` to a query string.

    Args:
        query (list): A list of (*key*, *value*) tuples. Items whose *value*
            is ``None`` are rendered without an ``'='``.

    Keyword Arguments:
        prefix (bool): Set to ``False`` to exclude the ``'?'`` prefix
            in the result (default ``True``).

    Returns:
        bytes: The rendered query string, or ``b''`` if `query` is empty
        (regardless of `prefix`).
    """

    buf = bytearray()
    _render_query_into(buf, query, prefix)
    return bytes(buf)


def query_to_query_text(query: Iterable[QueryItem]) -> QueryText:
    """Convert a :class:`~uricodec.Query` to :class:`~uricodec.QueryText`.

    Keys and values are decoded as UTF-8; invalid sequences are replaced
    with U+FFFD rather than raising an error.
    """

    return [
        (
            k.decode('utf-8', 'replace'),
            None if v is None else v.decode('utf-8', 'replace'),
        )
        for k, v in query
    ]


def query_text_to_query(query_text: QueryText) -> Query:
    """Convert :class:`~uricodec.QueryText` to a :class:`~uricodec.Query`.

    Keys and values are encoded as UTF-8; lone surrogates are passed
    through rather than raising an error.
    """

    return [
        (_encode_text(k), None if v is None else _encode_text(v))
        for k, v in query_text
    ]


def parse_query_text(query_string: bytes) -> QueryText:
    """Parse a query string into :class:`~uricodec.QueryText`.

    See also :func:`parse_query`.
    """

    return query_to_query_text(parse_query(query_string))


def render_query_text(query_text: QueryText, prefix: bool = True) -> bytes:
    """Render :class:`~uricodec.QueryText` as a UTF-8 query string."""

    return render_query(query_text_to_query(query_text), prefix)


def simple_query_to_query(simple_query: SimpleQuery) -> Query:
    """Convert a :class:`~uricodec.SimpleQuery` to a :class:`~uricodec.Query`."""

    return [(k, v) for k, v in simple_query]


def query_to_simple_query(query: Iterable[QueryItem]) -> SimpleQuery:
    """Convert a :class:`~uricodec.Query` to a :class:`~uricodec.SimpleQuery`.

    Missing values are replaced with ``b''``.
    """

    return [(k, b'' if v is None else v) for k, v in query]


def parse_simple_query(query_string: bytes) -> SimpleQuery:
    """Parse a query string into a :class:`~uricodec.SimpleQuery`.

    This uses :func:`parse_query` under the hood, and transforms any
    missing values into ``b''``.
    """

    return query_to_simple_query(parse_query(query_string))


def render_simple_query(simple_query: SimpleQuery, prefix: bool = True) -> bytes:
    return render_query(simple_query, prefix)
