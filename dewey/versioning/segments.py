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

"""Typed segments produced by the tokenizer.

A parsed version is an ordered tuple of Segments. Each Segment's kind is
fixed by the separator or keyword that introduced it; anything that is not
a recognised marker becomes TEXT, so every input string has a parse.

Example:
    Inspecting a parse:
        ```python
        from dewey.versioning import tokenize

        parsed = tokenize("1.0rc2")
        [s.kind.name for s in parsed]  # ['NUMBER', 'DOT', 'NUMBER', 'RC']
        parsed[-1].value               # 2
        ```
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

# Largest magnitude a segment can carry; longer digit runs saturate here.
MAX_MAGNITUDE = 2**64 - 1


class SegmentKind(Enum):
    """Closed set of segment kinds."""

    NUMBER = "number"
    DOT = "dot"
    REVISION = "revision"
    ALPHA = "alpha"
    BETA = "beta"
    PRE = "pre"
    RC = "rc"
    PATCH_LEVEL = "pl"
    TEXT = "text"

    @property
    def carries_magnitude(self) -> bool:
        """True for kinds whose value is an integer magnitude."""
        return self not in (SegmentKind.DOT, SegmentKind.TEXT)

    @property
    def is_prerelease(self) -> bool:
        """True for the suffixes that rank below a bare release."""
        return self in _PRERELEASE_KINDS


_PRERELEASE_KINDS = frozenset(
    {SegmentKind.ALPHA, SegmentKind.BETA, SegmentKind.PRE, SegmentKind.RC}
)

# Suffix keywords in match order, mapped to the kind they introduce.
KEYWORDS: tuple[tuple[str, SegmentKind], ...] = (
    ("alpha", SegmentKind.ALPHA),
    ("beta", SegmentKind.BETA),
    ("pre", SegmentKind.PRE),
    ("rc", SegmentKind.RC),
    ("pl", SegmentKind.PATCH_LEVEL),
)


@dataclass(frozen=True)
class Segment:
    """One typed unit of a parsed version.

    Attributes:
        kind: What introduced the segment.
        value: Integer magnitude for numeric and suffix kinds, the raw
            codepoints for TEXT, None for DOT.

    """

    kind: SegmentKind
    value: int | str | None = None

    def __repr__(self) -> str:
        if self.kind is SegmentKind.DOT:
            return "Segment(DOT)"
        return f"Segment({self.kind.name}, {self.value!r})"


@dataclass(frozen=True)
class ParsedVersion:
    """Immutable, order-significant sequence of Segments.

    Equality and hashing look at the segments only; ``raw`` is kept for
    messages and is ignored when comparing two parses.

    Attributes:
        segments: Segments in left-to-right order of the source string.
        raw: The string the segments were read from.

    """

    segments: tuple[Segment, ...] = ()
    raw: str = field(default="", compare=False)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def kinds(self) -> tuple[SegmentKind, ...]:
        """Kinds of all segments, in order."""
        return tuple(s.kind for s in self.segments)
