"""Character sequence layer: classification, matching, transformation, ordering.

All functions are pure and total; None, empty and out-of-range input give a
documented result instead of an exception.
"""

from .classifier import (
    CharSequence,
    contain_blank,
    contain_empty,
    contain_non_blank,
    contain_non_empty,
    first_non_blank,
    first_non_empty,
    is_all_blank,
    is_all_empty,
    is_all_non_blank,
    is_all_non_empty,
    is_blank,
    is_empty,
    is_not_blank,
    is_not_empty,
    is_whitespace,
    length,
    to_lower_char,
    to_upper_char,
)
from .comparator import (
    compare,
    compare_ignore_case,
    compare_values,
    max_of,
    min_of,
)
from .matcher import (
    INDEX_NOT_FOUND,
    equals,
    equals_any,
    equals_any_ignore_case,
    equals_ignore_case,
    index_of,
    index_of_char,
    last_index_of,
    ordinal_index_of,
    ordinal_last_index_of,
    region_matches,
)
from .transformer import (
    EMPTY,
    strip,
    strip_end,
    strip_start,
    trim,
    trim_to_empty,
    trim_to_null,
    trims,
    trims_to_empty,
    trims_to_null,
    truncate,
)

__all__ = [
    # Modules
    "classifier",
    "matcher",
    "transformer",
    "comparator",
    # Classification
    "CharSequence",
    "is_whitespace",
    "to_lower_char",
    "to_upper_char",
    "length",
    "is_empty",
    "is_not_empty",
    "is_blank",
    "is_not_blank",
    "first_non_empty",
    "first_non_blank",
    "contain_empty",
    "contain_non_empty",
    "is_all_empty",
    "is_all_non_empty",
    "contain_blank",
    "contain_non_blank",
    "is_all_blank",
    "is_all_non_blank",
    # Matching
    "INDEX_NOT_FOUND",
    "index_of_char",
    "index_of",
    "last_index_of",
    "region_matches",
    "equals",
    "equals_ignore_case",
    "equals_any",
    "equals_any_ignore_case",
    "ordinal_index_of",
    "ordinal_last_index_of",
    # Transformation
    "EMPTY",
    "trim",
    "trim_to_null",
    "trim_to_empty",
    "trims",
    "trims_to_null",
    "trims_to_empty",
    "strip_start",
    "strip_end",
    "strip",
    "truncate",
    # Ordering
    "compare",
    "compare_ignore_case",
    "compare_values",
    "min_of",
    "max_of",
]
