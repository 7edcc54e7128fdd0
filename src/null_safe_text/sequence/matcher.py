"""Searching and region comparison over character sequences.

Every function here is total: None, empty and out-of-range arguments produce
``INDEX_NOT_FOUND`` or False instead of raising.
"""

from typing import Optional, Union

from .classifier import (
    CharSequence,
    is_empty,
    length,
    to_lower_char,
    to_text,
    to_upper_char,
)

INDEX_NOT_FOUND = -1


def index_of_char(
    sequence: Optional[CharSequence],
    ch: Union[str, int],
    from_index: int = 0
) -> int:
    """Index of the first ``ch`` at or after ``from_index``.

    Args:
        sequence: Sequence to scan, may be None
        ch: A single character or its code point
        from_index: Start position; negative values start at 0

    Returns:
        Index of the first match, or -1
    """
    if is_empty(sequence):
        return INDEX_NOT_FOUND
    if isinstance(ch, int):
        ch = chr(ch)
    for i in range(max(from_index, 0), len(sequence)):
        if sequence[i] == ch:
            return i
    return INDEX_NOT_FOUND


def index_of(
    sequence: Optional[CharSequence],
    sub_sequence: Optional[CharSequence],
    from_index: int = 0
) -> int:
    """Index of the first occurrence of ``sub_sequence`` at or after ``from_index``.

    An empty ``sub_sequence`` matches at ``from_index`` clamped to
    ``[0, len(sequence)]``.

    >>> index_of("aabaabaa", "ab")
    1
    >>> index_of("abc", "", 9)
    3
    """
    if sequence is None or sub_sequence is None:
        return INDEX_NOT_FOUND
    text = to_text(sequence)
    sub = to_text(sub_sequence)
    start = min(max(from_index, 0), len(text))
    if not sub:
        return start
    return text.find(sub, start)


def last_index_of(
    sequence: Optional[CharSequence],
    sub_sequence: Optional[CharSequence],
    from_index: Optional[int] = None
) -> int:
    """Index of the last occurrence of ``sub_sequence`` starting at or before ``from_index``.

    ``from_index`` defaults to the end of ``sequence``. A negative start
    finds nothing, even for an empty ``sub_sequence``.
    """
    if sequence is None or sub_sequence is None:
        return INDEX_NOT_FOUND
    text = to_text(sequence)
    sub = to_text(sub_sequence)
    start = len(text) if from_index is None else from_index
    start = min(start, len(text) - len(sub))
    if start < 0:
        return INDEX_NOT_FOUND
    if not sub:
        return start
    return text.rfind(sub, 0, start + len(sub))


def _chars_equal_ignore_case(c1: str, c2: str) -> bool:
    # A pair matches under either fold.
    if to_upper_char(c1) == to_upper_char(c2):
        return True
    return to_lower_char(c1) == to_lower_char(c2)


def region_matches(
    ignore_case: bool,
    sequence1: Optional[CharSequence],
    offset1: int,
    sequence2: Optional[CharSequence],
    offset2: int,
    length: int
) -> bool:
    """Compare ``length`` characters of two sequences from independent offsets.

    Args:
        ignore_case: Whether characters differing only in case match
        sequence1: First sequence
        offset1: Start of the window in ``sequence1``
        sequence2: Second sequence
        offset2: Start of the window in ``sequence2``
        length: Number of characters to compare

    Returns:
        False for negative arguments or a window running past either
        sequence, otherwise whether every character pair matches
    """
    if sequence1 is None or sequence2 is None:
        return False
    if offset1 < 0 or offset2 < 0 or length < 0:
        return False
    if len(sequence1) - offset1 < length or len(sequence2) - offset2 < length:
        return False
    for i in range(length):
        c1 = sequence1[offset1 + i]
        c2 = sequence2[offset2 + i]
        if c1 == c2:
            continue
        if not ignore_case or not _chars_equal_ignore_case(c1, c2):
            return False
    return True


def equals(
    sequence1: Optional[CharSequence],
    sequence2: Optional[CharSequence]
) -> bool:
    """Null-safe, case-sensitive equality of two sequences."""
    if sequence1 is sequence2:
        return True
    if sequence1 is None or sequence2 is None:
        return False
    if len(sequence1) != len(sequence2):
        return False
    return region_matches(False, sequence1, 0, sequence2, 0, len(sequence1))


def equals_ignore_case(
    sequence1: Optional[CharSequence],
    sequence2: Optional[CharSequence]
) -> bool:
    """Null-safe equality of two sequences ignoring case."""
    if sequence1 is sequence2:
        return True
    if sequence1 is None or sequence2 is None:
        return False
    if len(sequence1) != len(sequence2):
        return False
    return region_matches(True, sequence1, 0, sequence2, 0, len(sequence1))


def equals_any(
    sequence: Optional[CharSequence],
    *candidates: Optional[CharSequence]
) -> bool:
    """True if ``sequence`` equals any candidate.

    With no candidates at all the answer is False, even for None, while a
    None candidate does match a None ``sequence``:

    >>> equals_any(None), equals_any(None, None)
    (False, True)
    """
    if candidates:
        for candidate in candidates:
            if equals(sequence, candidate):
                return True
    return False


def equals_any_ignore_case(
    sequence: Optional[CharSequence],
    *candidates: Optional[CharSequence]
) -> bool:
    """Case-insensitive :func:`equals_any`."""
    if candidates:
        for candidate in candidates:
            if equals_ignore_case(sequence, candidate):
                return True
    return False


def ordinal_index_of(
    sequence: Optional[CharSequence],
    sub_sequence: Optional[CharSequence],
    ordinal: int,
    from_end: bool = False
) -> int:
    """Index of the ``ordinal``-th non-overlapping occurrence of ``sub_sequence``.

    Args:
        sequence: Sequence to search, may be None
        sub_sequence: Sequence to look for, may be None
        ordinal: 1-based occurrence number
        from_end: Count occurrences from the end instead of the start

    Returns:
        Index of the requested occurrence, or -1 if there are fewer
        occurrences, an argument is None or ``ordinal`` is not positive.
        An empty ``sub_sequence`` gives ``len(sequence)`` from the end and
        0 from the start.
    """
    if sequence is None or sub_sequence is None or ordinal <= 0:
        return INDEX_NOT_FOUND
    step = length(sub_sequence)
    if step == 0:
        return len(sequence) if from_end else 0

    found = 0
    index = INDEX_NOT_FOUND
    position = len(sequence) if from_end else 0
    while found < ordinal:
        if from_end:
            index = last_index_of(sequence, sub_sequence, position)
            position = index - step
        else:
            index = index_of(sequence, sub_sequence, position)
            position = index + step
        if index < 0:
            return INDEX_NOT_FOUND
        found += 1
    return index


def ordinal_last_index_of(
    sequence: Optional[CharSequence],
    sub_sequence: Optional[CharSequence],
    ordinal: int
) -> int:
    """:func:`ordinal_index_of` counting from the end."""
    return ordinal_index_of(sequence, sub_sequence, ordinal, from_end=True)
