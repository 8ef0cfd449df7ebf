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
"""Type aliases shared by the codec modules."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from uricodec.partial import EscapeItem

QueryItem = Tuple[bytes, Optional[bytes]]
Query = List[QueryItem]

QueryTextItem = Tuple[str, Optional[str]]
QueryText = List[QueryTextItem]

SimpleQueryItem = Tuple[bytes, bytes]
SimpleQuery = List[SimpleQueryItem]

PartialEscapeQueryItem = Tuple[bytes, Sequence['EscapeItem']]
PartialEscapeQuery = List[PartialEscapeQueryItem]

Segments = List[str]
