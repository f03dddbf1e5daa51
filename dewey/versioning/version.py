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

"""Version value type with rich comparison operators.

Version wraps a raw string and exposes the partial order through Python's
comparison operators. Because the order is partial, ``a < b`` and
``a > b`` can both be False while ``a != b``; use is_comparable() or
compare() when that distinction matters.

Example:
    ```python
    from dewey.versioning import Version

    Version("1.0pre1") < Version("1.0") < Version("1.0pl1")  # True
    Version("1c") < Version("1.0")                           # False
    Version("1c").is_comparable(Version("1.0"))              # False
    ```
"""

from __future__ import annotations

from functools import cached_property

from dewey.config import TokenizerOptions

from .comparator import Ordering, compare
from .segments import ParsedVersion
from .tokenizer import tokenize


class Version:
    """A version string ordered by the dewey partial order."""

    def __init__(self, raw: str, options: TokenizerOptions | None = None) -> None:
        self.raw = raw
        self.options = options

    @cached_property
    def parsed(self) -> ParsedVersion:
        """Segments of the raw string, tokenized on first access."""
        return tokenize(self.raw, self.options)

    def compare(self, other: Version) -> Ordering:
        return compare(self.parsed, other.parsed)

    def is_comparable(self, other: Version) -> bool:
        return self.compare(other) is not Ordering.INCOMPARABLE

    def __repr__(self) -> str:
        return f"Version({self.raw!r})"

    def __str__(self) -> str:
        return self.raw

    def __hash__(self) -> int:
        return hash(self.parsed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) in (Ordering.GREATER, Ordering.EQUAL)
