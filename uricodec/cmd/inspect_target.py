#!/usr/bin/env python
# Copyright 2013 by Rackspace Hosting, Inc.
#
# Licensed under the Apache License, Version 2.0 (the 'License');
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an 'AS IS' BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Script that prints out the decoded path segments and query of a request target.
"""
import argparse
import os

from uricodec.path import decode_path
from uricodec.path import extract_path
from uricodec.query import query_to_query_text


def make_parser():
    """Create the parser for the script."""
    parser = argparse.ArgumentParser(
        description='Example: uricodec-inspect-target "http://example.com/a%20b?x=1"'
    )
    parser.add_argument(
        '-t',
        '--text',
        action='store_true',
        help='Print query keys and values as UTF-8 text rather than bytes',
    )
    parser.add_argument(
        '-r',
        '--raw',
        action='store_true',
        help='Do not strip the scheme and authority from absolute targets',
    )
    parser.add_argument(
        'target',
        help='The request target to decode. Example: /search?q=uri+codec',
    )
    return parser


def _format_item(key, value):
    if value is None:
        return 'query: {}'.format(key)
    return 'query: {}={}'.format(key, value)


def inspect_target(target, text=False, raw=False):
    """Return the lines describing the decoded `target`."""
    if not raw:
        target = extract_path(target)

    segments, query = decode_path(target)
    lines = ['segment: {!r}'.format(segment) for segment in segments]

    if text:
        lines.extend(_format_item(k, v) for k, v in query_to_query_text(query))
    else:
        lines.extend(
            _format_item(repr(k), None if v is None else repr(v)) for k, v in query
        )

    return lines


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)
    target = os.fsencode(args.target)

    for line in inspect_target(target, text=args.text, raw=args.raw):
        print(line)


if __name__ == '__main__':  # pragma: no cover
    main()
