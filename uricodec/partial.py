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

"""Partially-escaped query strings.

Some consumers expect certain characters to reach them unescaped, even
though they are not unreserved in a query string. A search API might accept
``q=a+language:python+created:2009-01-01..2009-02-01``, where both ``'+'``
and ``':'`` are significant, while a literal plus still has to be sent as
``%2B``::

    from uricodec.partial import Escaped, Literal

    render_query_partial_escape(
        [(b'q', [Escaped(b'+'), Literal(b'+language:python')])]
    )  # b'?q=%2B+language:python'

There is intentionally no parser for this format, since which chunks were
escaped is a decision of the caller that cannot be recovered from the wire.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable

from uricodec._typing import PartialEscapeQueryItem
from uricodec.percent import encode_query

__all__ = (
    'EscapeItem',
    'Escaped',
    'Literal',
    'render_query_partial_escape',
)


class EscapeItem:
    """Base class for the chunks of a partially-escaped query value."""

    __slots__ = ()

    data: bytes


@dataclasses.dataclass(frozen=True)
class Escaped(EscapeItem):
    """A chunk that will be percent-encoded when rendered."""

    data: bytes

    __slots__ = ('data',)


@dataclasses.dataclass(frozen=True)
class Literal(EscapeItem):
    """A chunk that will be copied verbatim when rendered.

    The caller is responsible for making sure `data` is safe to put on the
    wire as-is.
    """

    data: bytes

    __slots__ = ('data',)


def _render_chunk(item: EscapeItem) -> bytes:
    if isinstance(item, Escaped):
        return encode_query(item.data)
    if isinstance(item, Literal):
        return item.data

    raise TypeError(
        'Expected an Escaped or Literal item, got {!r}'.format(type(item).__name__)
    )


def render_query_partial_escape(
    query: Iterable[PartialEscapeQueryItem], prefix: bool = True
) -> bytes:
    """Render a partially-escaped query.

    Keys are always percent-encoded. A value is given as a sequence of
    :class:`Escaped` and :class:`Literal` chunks that are rendered
    independently and concatenated in order. An empty sequence means the
    key is rendered without an ``'='``.

    Args:
        query (list): A list of (*key*, *chunks*) tuples.

    Keyword Arguments:
        prefix (bool): Set to ``False`` to exclude the ``'?'`` prefix
            in the result (default ``True``).

    Returns:
        bytes: The rendered query string, or ``b''`` if `query` is empty.

    Raises:
        TypeError: A chunk was neither :class:`Escaped` nor :class:`Literal`.
    """

    buf = bytearray()
    sep = b'?' if prefix else b''

    for k, chunks in query:
        # NOTE: Materialize first, since an exhausted iterator is still truthy.
        chunks = tuple(chunks)

        buf += sep
        buf += encode_query(k)
        if chunks:
            buf += b'='
            for item in chunks:
                buf += _render_chunk(item)

        sep = b'&'

    return bytes(buf)
