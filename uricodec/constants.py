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

import string
import sys

__all__ = (
    'ALPHANUMERIC',
    'HEX_DIGITS',
    'PATH_UNRESERVED',
    'PYPY',
    'PYTHON_VERSION',
    'QUERY_UNRESERVED',
)

PYPY = sys.implementation.name == 'pypy'
"""Evaluates to ``True`` when the current Python implementation is PyPy."""

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

if PYTHON_VERSION < (3, 8, 0):  # pragma: nocover
    raise ImportError('uricodec requires Python 3.8+.')

ALPHANUMERIC = (string.ascii_letters + string.digits).encode()
"""ASCII letters and digits; never percent-encoded in any context."""

QUERY_UNRESERVED = b'-_.~'
"""Extra bytes left unescaped in query string keys and values."""

# NOTE: Path segments additionally keep sub-delimiters that carry no
#   meaning inside a single segment, except for '/' itself.
PATH_UNRESERVED = b'-_.~:@&=+$,'
"""Extra bytes left unescaped in path segments."""

HEX_DIGITS = b'0123456789ABCDEFabcdef'
