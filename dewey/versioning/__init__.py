# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Version parsing and comparison for dewey.

Modules:
    segments
        SegmentKind, Segment and ParsedVersion value types.
    tokenizer
        Splits any string into typed segments; never fails.
    comparator
        Partial-order comparison of two parsed versions.
    version
        Version value type with rich comparison operators.

Ordering Rules:

1. **Numbers** compare by magnitude, text by Unicode code point.
2. **Suffixes** rank alpha < beta < pre < rc < release < pl.
3. **Revisions** (``_N``) only order against another revision; a revision
   with no counterpart is newer than nothing.
4. **Conflicting schemes**: text on one side where the other has a version
   marker gives Ordering.INCOMPARABLE.

Example:
    Basic version comparison:
        ```python
        from dewey.versioning import Ordering, compare_versions, is_newer

        compare_versions("1.0pre1", "1.0")  # Ordering.LESS
        compare_versions("1.0.1", "1.0")    # Ordering.GREATER
        is_newer("2.4_1", "2.4")            # True
        ```

    Working with parses:
        ```python
        from dewey.versioning import compare, tokenize

        a = tokenize("7.3.2")
        b = tokenize("7.3ce.1")
        compare(a, b)  # Ordering.INCOMPARABLE
        ```

Note:
    Parsing and comparison are pure: no I/O and no exceptions.
"""

from .comparator import Ordering, compare, compare_versions, is_newer
from .segments import MAX_MAGNITUDE, ParsedVersion, Segment, SegmentKind
from .tokenizer import tokenize
from .version import Version

__all__ = [
    "MAX_MAGNITUDE",
    "Ordering",
    "ParsedVersion",
    "Segment",
    "SegmentKind",
    "Version",
    "compare",
    "compare_versions",
    "is_newer",
    "tokenize",
]
