"""Null / empty / blank classification of character sequences.

The three states nest: every null sequence is empty and every empty sequence
is blank. Functions taking several sequences treat a call with no arguments as
an absent array.
"""

import unicodedata
from typing import Optional, Protocol, TypeVar

from ..shared.objects import array_length, is_empty_array, is_not_empty_array

# Characters str.isspace() accepts that are not whitespace for this package:
# the non-breaking spaces and NEXT LINE.
NON_BREAKING_WHITESPACE = frozenset("\u00a0\u2007\u202f\u0085")


class CharSequence(Protocol):
    """Read-only view over characters: a length and indexed access."""

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> str:
        ...


S = TypeVar("S", bound=CharSequence)


def is_whitespace(ch: str) -> bool:
    """Whitespace predicate used for blank checks, trimming and stripping."""
    return ch.isspace() and ch not in NON_BREAKING_WHITESPACE


def to_upper_char(ch: str) -> str:
    """Single-character uppercase of ``ch``.

    Expanding mappings such as "\u00df" -> "SS" leave ``ch`` unchanged.
    """
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def to_lower_char(ch: str) -> str:
    """Single-character lowercase of ``ch``.

    A mapping to a base letter followed by combining marks keeps the base
    letter, so "\u0130" lowers to "i". Other expansions leave ``ch`` unchanged.
    """
    lower = ch.lower()
    if len(lower) == 1:
        return lower
    if all(unicodedata.combining(mark) for mark in lower[1:]):
        return lower[0]
    return ch


def length(sequence: Optional[CharSequence]) -> int:
    """Length of ``sequence``, or 0 when it is None."""
    return array_length(sequence)


def to_text(sequence: Optional[CharSequence]) -> Optional[str]:
    """Materialize a sequence view as ``str``; None stays None."""
    if sequence is None or isinstance(sequence, str):
        return sequence
    return "".join(sequence[i] for i in range(len(sequence)))


def is_empty(sequence: Optional[CharSequence]) -> bool:
    """True if ``sequence`` is None or has length 0.

    >>> is_empty(None), is_empty(""), is_empty(" ")
    (True, True, False)
    """
    return sequence is None or len(sequence) == 0


def is_not_empty(sequence: Optional[CharSequence]) -> bool:
    return not is_empty(sequence)


def is_blank(sequence: Optional[CharSequence]) -> bool:
    """True if ``sequence`` is empty or made only of whitespace.

    >>> is_blank(None), is_blank(""), is_blank(" \\t\\n"), is_blank(" a ")
    (True, True, True, False)
    """
    if is_empty(sequence):
        return True
    for i in range(len(sequence)):
        if not is_whitespace(sequence[i]):
            return False
    return True


def is_not_blank(sequence: Optional[CharSequence]) -> bool:
    return not is_blank(sequence)


def first_non_empty(*sequences: Optional[S]) -> Optional[S]:
    """First sequence that is not empty, in argument order, else None."""
    if is_not_empty_array(sequences):
        for sequence in sequences:
            if is_not_empty(sequence):
                return sequence
    return None


def first_non_blank(*sequences: Optional[S]) -> Optional[S]:
    """First sequence that is not blank, in argument order, else None."""
    if is_not_empty_array(sequences):
        for sequence in sequences:
            if is_not_blank(sequence):
                return sequence
    return None


def contain_empty(*sequences: Optional[CharSequence]) -> bool:
    """True if any sequence is empty.

    A call without arguments is True: an absent array counts as containing
    emptiness.
    """
    if is_empty_array(sequences):
        return True
    for sequence in sequences:
        if is_empty(sequence):
            return True
    return False


def contain_non_empty(*sequences: Optional[CharSequence]) -> bool:
    return first_non_empty(*sequences) is not None


def is_all_empty(*sequences: Optional[CharSequence]) -> bool:
    return first_non_empty(*sequences) is None


def is_all_non_empty(*sequences: Optional[CharSequence]) -> bool:
    return not contain_empty(*sequences)


def contain_blank(*sequences: Optional[CharSequence]) -> bool:
    """True if any sequence is blank; a call without arguments is True."""
    if is_empty_array(sequences):
        return True
    for sequence in sequences:
        if is_blank(sequence):
            return True
    return False


def contain_non_blank(*sequences: Optional[CharSequence]) -> bool:
    return first_non_blank(*sequences) is not None


def is_all_blank(*sequences: Optional[CharSequence]) -> bool:
    return first_non_blank(*sequences) is None


def is_all_non_blank(*sequences: Optional[CharSequence]) -> bool:
    return not contain_blank(*sequences)
