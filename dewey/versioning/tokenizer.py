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

"""Version string tokenizer.

Turns any string into a ParsedVersion. The scan is left to right and at
each position the first matching rule wins:

1. ``_`` followed by digits -> REVISION
2. ``.`` (and ``-`` unless disabled) -> DOT
3. ``alpha``, ``beta``, ``pre``, ``rc``, ``pl`` with optional digits -> the
   matching suffix kind (magnitude 0 when no digits follow)
4. a run of ASCII digits -> NUMBER
5. anything else -> TEXT, extended up to the next position where one of
   the rules above would match

Tokenizing never fails. Malformed input simply produces TEXT and NUMBER
segments, and digit runs too large for 64 bits saturate at MAX_MAGNITUDE.

Example:
    ```python
    from dewey.versioning import tokenize

    tokenize("2.4.1_3").kinds
    # (NUMBER, DOT, NUMBER, DOT, NUMBER, REVISION)
    tokenize("7.3ce.1").kinds
    # (NUMBER, DOT, NUMBER, TEXT, DOT, NUMBER)
    ```
"""

from __future__ import annotations

from dewey.config import TokenizerOptions
from dewey.logging import Logger, get_global_logger

from .segments import KEYWORDS, MAX_MAGNITUDE, ParsedVersion, Segment, SegmentKind

_DIGITS = frozenset("0123456789")
_MAX_MAGNITUDE_DIGITS = len(str(MAX_MAGNITUDE))

_DEFAULT_OPTIONS = TokenizerOptions()


def _scan_digits(text: str, start: int) -> int:
    """Return the index just past the ASCII digit run starting at 'start'."""
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def _magnitude(digits: str) -> int:
    """Convert a digit run to an int, saturating at MAX_MAGNITUDE.

    Never hands an oversized run to int(), which would trip the interpreter's
    int/str conversion limit on pathological input.
    """
    significant = digits.lstrip("0")
    if not significant:
        return 0
    if len(significant) > _MAX_MAGNITUDE_DIGITS:
        return MAX_MAGNITUDE
    return min(int(significant), MAX_MAGNITUDE)


def _is_separator(ch: str, options: TokenizerOptions) -> bool:
    return ch == "." or (options.dash_is_separator and ch == "-")


def _match_keyword(text: str, pos: int) -> tuple[str, SegmentKind] | None:
    for keyword, kind in KEYWORDS:
        if text.startswith(keyword, pos):
            return keyword, kind
    return None


def _starts_marker(text: str, pos: int, options: TokenizerOptions) -> bool:
    """True if a non-TEXT rule would match at 'pos'."""
    ch = text[pos]
    if ch in _DIGITS or _is_separator(ch, options):
        return True
    if ch == "_" and pos + 1 < len(text) and text[pos + 1] in _DIGITS:
        return True
    return _match_keyword(text, pos) is not None


def _fold_ascii(run: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in run)


def _next_segment(
    text: str, pos: int, options: TokenizerOptions
) -> tuple[Segment, int]:
    """Read one segment at 'pos' and return it with the new cursor."""
    ch = text[pos]

    if ch == "_" and pos + 1 < len(text) and text[pos + 1] in _DIGITS:
        end = _scan_digits(text, pos + 1)
        return Segment(SegmentKind.REVISION, _magnitude(text[pos + 1 : end])), end

    if _is_separator(ch, options):
        return Segment(SegmentKind.DOT), pos + 1

    matched = _match_keyword(text, pos)
    if matched is not None:
        keyword, kind = matched
        start = pos + len(keyword)
        end = _scan_digits(text, start)
        return Segment(kind, _magnitude(text[start:end])), end

    if ch in _DIGITS:
        end = _scan_digits(text, pos)
        return Segment(SegmentKind.NUMBER, _magnitude(text[pos:end])), end

    end = pos + 1
    while end < len(text) and not _starts_marker(text, end, options):
        end += 1
    run = text[pos:end]
    if options.fold_ascii_case:
        run = _fold_ascii(run)
    return Segment(SegmentKind.TEXT, run), end


def tokenize(
    text: str,
    options: TokenizerOptions | None = None,
    *,
    logger: Logger | None = None,
) -> ParsedVersion:
    """Parse a version string into typed segments.

    Args:
        text: Any string, including the empty string.
        options: Tokenizer options. Defaults to TokenizerOptions().
        logger: Logger for debug output. Defaults to the global logger.

    Returns:
        The ParsedVersion for 'text'. The same string and options always
            produce an equal result.

    Example:
        ```python
        tokenize("1.0pl")[-1]  # Segment(PATCH_LEVEL, 0)
        tokenize("")           # ParsedVersion(segments=(), raw='')
        ```
    """
    if options is None:
        options = _DEFAULT_OPTIONS
    if logger is None:
        logger = get_global_logger()

    segments: list[Segment] = []
    pos = 0
    while pos < len(text):
        segment, pos = _next_segment(text, pos, options)
        segments.append(segment)

    logger.debug("TOKENIZE", f"{text!r} -> {len(segments)} segment(s)")
    return ParsedVersion(tuple(segments), text)
