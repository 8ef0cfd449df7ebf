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

"""Primary package for uricodec, a codec for URI paths and query strings.

The `uricodec` package can be used to directly access the codec functions
and types::

    import uricodec

    segments, query = uricodec.decode_path(b'/a%20b/c?x=1&flag')
    # (['a b', 'c'], [(b'x', b'1'), (b'flag', None)])

The lower-level percent-encoding helpers live in the `percent` module,
which must be imported explicitly::

    from uricodec import percent

    percent.encode(b'\\xff')  # b'%FF'
"""

import logging as _logging

__all__ = (
    # Percent-encoding
    'url_decode',
    'url_encode',
    # Query strings
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
    # Partially-escaped query strings
    'EscapeItem',
    'Escaped',
    'Literal',
    'render_query_partial_escape',
    # Paths
    'decode_path',
    'decode_path_segments',
    'encode_path',
    'encode_path_segments',
    'encode_path_segments_relative',
    'extract_path',
    # Constants
    'PATH_UNRESERVED',
    'QUERY_UNRESERVED',
    # Types
    'PartialEscapeQuery',
    'PartialEscapeQueryItem',
    'Query',
    'QueryItem',
    'QueryText',
    'QueryTextItem',
    'SimpleQuery',
    'SimpleQueryItem',
)

from uricodec._typing import PartialEscapeQuery
from uricodec._typing import PartialEscapeQueryItem
from uricodec._typing import Query
from uricodec._typing import QueryItem
from uricodec._typing import QueryText
from uricodec._typing import QueryTextItem
from uricodec._typing import SimpleQuery
from uricodec._typing import SimpleQueryItem
from uricodec.constants import PATH_UNRESERVED
from uricodec.constants import QUERY_UNRESERVED
from uricodec.partial import EscapeItem
from uricodec.partial import Escaped
from uricodec.partial import Literal
from uricodec.partial import render_query_partial_escape
from uricodec.path import decode_path
from uricodec.path import decode_path_segments
from uricodec.path import encode_path
from uricodec.path import encode_path_segments
from uricodec.path import encode_path_segments_relative
from uricodec.path import extract_path
from uricodec.percent import url_decode
from uricodec.percent import url_encode
from uricodec.query import parse_query
from uricodec.query import parse_query_text
from uricodec.query import parse_simple_query
from uricodec.query import query_text_to_query
from uricodec.query import query_to_query_text
from uricodec.query import query_to_simple_query
from uricodec.query import render_query
from uricodec.query import render_query_text
from uricodec.query import render_simple_query
from uricodec.query import simple_query_to_query

# Package version
from uricodec.version import __version__  # NOQA: F401

# NOTE: Library code never configures logging; applications opt in by
#   attaching their own handlers to the 'uricodec' logger.
_logger = _logging.getLogger('uricodec')
_logger.addHandler(_logging.NullHandler())
