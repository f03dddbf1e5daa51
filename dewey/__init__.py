"""
dewey - BSD-style package version comparison

A small library that parses package version strings into typed segments
and compares them the way BSD package managers do.

dewey provides:
  - A total tokenizer: every string parses, malformed input degrades to
    text and number segments
  - Suffix-aware ordering: alpha < beta < pre < rc < release < pl
  - Package revisions (``_N``)
  - Detection of conflicting version schemes (Ordering.INCOMPARABLE)
  - Optional YAML-configured tokenizer options

Package Structure
-----------------
versioning : package
    Tokenizer, comparator and the Version value type.
config : package
    Tokenizer options and YAML loading.
logging : module
    Pluggable logger used for verbose and debug output.
exceptions : module
    Exception hierarchy (configuration errors only).

Public API
----------
    from dewey.versioning import tokenize, compare, compare_versions
    from dewey.versioning import Version, Ordering, is_newer
    from dewey.config import load_options

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__description__ = "BSD-style package version parsing and partial-order comparison"

from dewey.config import TokenizerOptions, load_options
from dewey.versioning import (
    Ordering,
    ParsedVersion,
    Segment,
    SegmentKind,
    Version,
    compare,
    compare_versions,
    is_newer,
    tokenize,
)

__all__ = [
    "__version__",
    "__description__",
    "Ordering",
    "ParsedVersion",
    "Segment",
    "SegmentKind",
    "TokenizerOptions",
    "Version",
    "compare",
    "compare_versions",
    "is_newer",
    "load_options",
    "tokenize",
]
