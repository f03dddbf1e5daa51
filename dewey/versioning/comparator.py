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

"""Partial-order comparison of parsed versions.

Two ParsedVersions are walked segment by segment. The first index where
they differ decides the result:

- same kind: magnitudes compare numerically, TEXT compares by code point,
  two DOTs are equal
- TEXT against any structured kind: the strings use different version
  schemes and the result is INCOMPARABLE
- REVISION against a non-revision: the revision side has reached the end
  of its upstream version, so the other side's remainder decides
- NUMBER against DOT: INCOMPARABLE
- otherwise the fixed rank ALPHA < BETA < PRE < RC < release < PATCH_LEVEL

When one side runs out, the first leftover segment of the longer side that
is not a separator decides: a pre-release suffix makes it older, anything
else makes it newer. "1.0-rc1" is older than "1.0".

INCOMPARABLE is an ordinary result. Nothing in this module raises.

Example:
    ```python
    from dewey.versioning import Ordering, compare, tokenize

    compare(tokenize("1.0pre1"), tokenize("1.0"))  # Ordering.LESS
    compare(tokenize("1.0pl1"), tokenize("1.0"))   # Ordering.GREATER
    compare(tokenize("1c"), tokenize("1.0"))       # Ordering.INCOMPARABLE
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from dewey.config import TokenizerOptions
from dewey.logging import Logger, get_global_logger

from .segments import ParsedVersion, Segment, SegmentKind
from .tokenizer import tokenize


class Ordering(Enum):
    """Result of comparing two versions."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    INCOMPARABLE = "incomparable"

    def reverse(self) -> Ordering:
        """Swap LESS and GREATER; EQUAL and INCOMPARABLE are unchanged."""
        if self is Ordering.LESS:
            return Ordering.GREATER
        if self is Ordering.GREATER:
            return Ordering.LESS
        return self

    def to_int(self) -> int | None:
        """Map to -1/0/1; None when incomparable."""
        return _AS_INT[self]


_AS_INT: dict[Ordering, int | None] = {
    Ordering.LESS: -1,
    Ordering.EQUAL: 0,
    Ordering.GREATER: 1,
    Ordering.INCOMPARABLE: None,
}

# Rank of kinds that order against each other when they differ.
# NUMBER and DOT share the "release" rank.
_RANK: dict[SegmentKind, int] = {
    SegmentKind.ALPHA: 0,
    SegmentKind.BETA: 1,
    SegmentKind.PRE: 2,
    SegmentKind.RC: 3,
    SegmentKind.NUMBER: 4,
    SegmentKind.DOT: 4,
    SegmentKind.PATCH_LEVEL: 5,
}


def _order(left: Any, right: Any) -> Ordering:
    """Three-way comparison of two magnitudes, two texts or two ranks."""
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def _leftover_kind(longer: ParsedVersion, index: int) -> SegmentKind:
    """Kind of the first non-DOT segment from 'index', or DOT if there is none.

    Separators carry nothing, so "1.0-rc1" is judged by its RC and not by
    the dash in front of it.
    """
    for segment in longer.segments[index:]:
        if segment.kind is not SegmentKind.DOT:
            return segment.kind
    return SegmentKind.DOT


def _remainder(longer: ParsedVersion, index: int) -> Ordering:
    """Order the longer side against a side that ended at 'index'.

    A pre-release suffix makes the longer side older. Anything else,
    including a remainder of bare separators, makes it newer.
    """
    if _leftover_kind(longer, index).is_prerelease:
        return Ordering.LESS
    return Ordering.GREATER


def _compare_at(
    a: ParsedVersion, b: ParsedVersion, index: int
) -> tuple[Ordering, str]:
    """Compare the segments at 'index' of both sides.

    Returns:
        The ordering and a short reason for debug output.
    """
    x: Segment = a[index]
    y: Segment = b[index]

    if x.kind is y.kind:
        if x.kind is SegmentKind.DOT:
            return Ordering.EQUAL, "separators"
        return _order(x.value, y.value), f"{x.kind.name} values"

    if x.kind is SegmentKind.TEXT or y.kind is SegmentKind.TEXT:
        return Ordering.INCOMPARABLE, f"{x.kind.name} against {y.kind.name}"

    if x.kind is SegmentKind.REVISION:
        return _remainder(b, index).reverse(), f"revision against {y.kind.name}"
    if y.kind is SegmentKind.REVISION:
        return _remainder(a, index), f"{x.kind.name} against revision"

    if _RANK[x.kind] == _RANK[y.kind]:
        # NUMBER against DOT: same rank, different structure
        return Ordering.INCOMPARABLE, f"{x.kind.name} against {y.kind.name}"
    return (
        _order(_RANK[x.kind], _RANK[y.kind]),
        f"{x.kind.name} against {y.kind.name}",
    )


def compare(
    a: ParsedVersion,
    b: ParsedVersion,
    *,
    logger: Logger | None = None,
) -> Ordering:
    """Compare two parsed versions under the partial order.

    Args:
        a: Left-hand version.
        b: Right-hand version.
        logger: Logger for debug output. Defaults to the global logger.

    Returns:
        How 'a' relates to 'b'. Ordering.INCOMPARABLE when the two versions
            disagree on whether a position is free text or a version marker.

    """
    if logger is None:
        logger = get_global_logger()

    for index in range(max(len(a), len(b))):
        if index >= len(a):
            result = _remainder(b, index).reverse()
            leftover = _leftover_kind(b, index).name
            reason = f"{a.raw!r} ended, {leftover} follows in {b.raw!r}"
        elif index >= len(b):
            result = _remainder(a, index)
            leftover = _leftover_kind(a, index).name
            reason = f"{b.raw!r} ended, {leftover} follows in {a.raw!r}"
        else:
            result, reason = _compare_at(a, b, index)
            if result is Ordering.EQUAL:
                continue
        logger.debug("COMPARE", f"index {index}: {reason} -> {result.name}")
        return result

    logger.debug("COMPARE", f"{a.raw!r} and {b.raw!r} are equal")
    return Ordering.EQUAL


def compare_versions(
    a: str,
    b: str,
    *,
    options: TokenizerOptions | None = None,
    logger: Logger | None = None,
) -> Ordering:
    """Tokenize two strings and compare them.

    Args:
        a: Left-hand version string.
        b: Right-hand version string.
        options: Tokenizer options applied to both strings.
        logger: Logger for debug output. Defaults to the global logger.

    Returns:
        How 'a' relates to 'b'.

    Example:
        ```python
        compare_versions("7.3.2", "7.3ce.1")  # Ordering.INCOMPARABLE
        ```
    """
    return compare(
        tokenize(a, options, logger=logger),
        tokenize(b, options, logger=logger),
        logger=logger,
    )


def is_newer(
    remote: str,
    current: str | None,
    *,
    options: TokenizerOptions | None = None,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' supersedes 'current'.

    Returns True iff there is no current version or remote compares
    strictly GREATER. An incomparable pair is never considered newer.
    """
    if logger is None:
        logger = get_global_logger()

    if current is None:
        logger.verbose("COMPARE", f"No current version. Treat {remote!r} as newer")
        return True

    result = compare_versions(remote, current, options=options, logger=logger)
    if result is Ordering.GREATER:
        logger.verbose("COMPARE", f"Remote {remote!r} is newer than {current!r}")
    elif result is Ordering.EQUAL:
        logger.verbose("COMPARE", f"Remote {remote!r} is the same as {current!r}")
    elif result is Ordering.LESS:
        logger.verbose("COMPARE", f"Remote {remote!r} is older than {current!r}")
    else:
        logger.verbose(
            "COMPARE",
            f"Remote {remote!r} and current {current!r} use different schemes",
        )
    return result is Ordering.GREATER
