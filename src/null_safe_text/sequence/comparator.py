"""Null-aware ordering of text and of arbitrary comparable values."""

from typing import Any, Callable, Optional, TypeVar

from .classifier import to_lower_char, to_upper_char
from .matcher import equals

T = TypeVar("T")


def _fold_case(ch: str) -> str:
    return to_lower_char(to_upper_char(ch))


def _lexicographic(text1: str, text2: str, key: Callable[[str], str]) -> int:
    for c1, c2 in zip(text1, text2):
        if c1 != c2:
            k1, k2 = key(c1), key(c2)
            if k1 != k2:
                return ord(k1) - ord(k2)
    return len(text1) - len(text2)


def _compare(
    text1: Optional[str],
    text2: Optional[str],
    null_is_less: bool,
    key: Callable[[str], str]
) -> int:
    if equals(text1, text2):
        return 0
    if text1 is None:
        return -1 if null_is_less else 1
    if text2 is None:
        return 1 if null_is_less else -1
    return _lexicographic(text1, text2, key)


def compare(text1: Optional[str], text2: Optional[str], null_is_less: bool = True) -> int:
    """Order two texts by code point.

    Args:
        text1: First text, may be None
        text2: Second text, may be None
        null_is_less: Whether None sorts before any text

    Returns:
        0 when equal (two Nones included), the code point difference of the
        first differing characters, else the length difference. A single
        None gives -1 or 1 depending on ``null_is_less``.

    >>> compare("a", "B") > 0, compare(None, "a") < 0, compare(None, "a", False) > 0
    (True, True, True)
    """
    return _compare(text1, text2, null_is_less, lambda ch: ch)


def compare_ignore_case(
    text1: Optional[str],
    text2: Optional[str],
    null_is_less: bool = True
) -> int:
    """:func:`compare` on case-folded characters.

    >>> compare_ignore_case("abc", "ABC"), compare_ignore_case("a", "B") < 0
    (0, True)
    """
    return _compare(text1, text2, null_is_less, _fold_case)


def compare_values(a: Any, b: Any, null_greater: bool = False) -> int:
    """Compare two values of a mutually ordered type, tolerating None.

    Identical values compare equal before any ordering is consulted.
    """
    if a is b:
        return 0
    if a is None:
        return 1 if null_greater else -1
    if b is None:
        return -1 if null_greater else 1
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def min_of(*values: Optional[T]) -> Optional[T]:
    """Smallest non-None value; the first one wins among equals.

    None only when there are no values or all of them are None.
    """
    result = None
    for value in values:
        if compare_values(value, result, True) < 0:
            result = value
    return result


def max_of(*values: Optional[T]) -> Optional[T]:
    """Largest non-None value; the first one wins among equals."""
    result = None
    for value in values:
        if compare_values(value, result, False) > 0:
            result = value
    return result
