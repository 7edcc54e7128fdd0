"""Null-safe text matching and comparison.

Pure functions that classify, search, compare and trim character sequences
under a three-level emptiness taxonomy: null, empty and blank.

Progressive API Disclosure:
- Level 1: Sequence functions - is_blank(), index_of(), strip(), compare()
- Level 2: Preconditions - assertions.not_blank(), assertions.not_empty()
- Level 3: Configuration and command line - TextConfig, cli.main()
"""

__version__ = "0.1.0"
__author__ = "Null Safe Text Team"

from . import assertions
from .sequence import (
    EMPTY,
    INDEX_NOT_FOUND,
    compare,
    compare_ignore_case,
    equals,
    equals_any,
    equals_ignore_case,
    index_of,
    is_blank,
    is_empty,
    last_index_of,
    ordinal_index_of,
    region_matches,
    strip,
    trim,
    truncate,
)
from .shared.config import TextConfig
from .shared.objects import NULL

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Most used sequence functions
    "EMPTY",
    "INDEX_NOT_FOUND",
    "is_empty",
    "is_blank",
    "index_of",
    "last_index_of",
    "ordinal_index_of",
    "region_matches",
    "equals",
    "equals_ignore_case",
    "equals_any",
    "trim",
    "strip",
    "truncate",
    "compare",
    "compare_ignore_case",

    # Level 2: Preconditions
    "assertions",

    # Level 3: Configuration and markers
    "TextConfig",
    "NULL",
]
