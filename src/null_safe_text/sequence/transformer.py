"""Trimming, stripping and truncation of text.

None input gives None output unless a function's name says otherwise
(``*_to_empty``). Sequence views are materialized with
:func:`classifier.to_text`, so results are always ``str``. Whitespace is
decided by :func:`classifier.is_whitespace`.
"""

from typing import Optional

from .classifier import CharSequence, is_empty, is_whitespace, length, to_text

EMPTY = ""


def trim(text: Optional[CharSequence]) -> Optional[str]:
    """Remove leading and trailing whitespace.

    >>> trim(None) is None, trim("    abc    ")
    (True, 'abc')
    """
    return strip(text, None)


def trim_to_null(text: Optional[CharSequence]) -> Optional[str]:
    """:func:`trim`, mapping an empty result to None."""
    trimmed = trim(text)
    return None if is_empty(trimmed) else trimmed


def trim_to_empty(text: Optional[CharSequence]) -> str:
    """:func:`trim`, mapping None to ``EMPTY``."""
    return EMPTY if text is None else trim(text)


def trims(text: Optional[CharSequence]) -> Optional[str]:
    """Remove every whitespace character, not only the outer ones."""
    if text is None:
        return None
    return "".join(ch for ch in to_text(text) if not is_whitespace(ch))


def trims_to_null(text: Optional[CharSequence]) -> Optional[str]:
    removed = trims(text)
    return None if is_empty(removed) else removed


def trims_to_empty(text: Optional[CharSequence]) -> str:
    return EMPTY if text is None else trims(text)


def _is_stripped(ch: str, strip_chars: Optional[str]) -> bool:
    if strip_chars is None:
        return is_whitespace(ch)
    return ch in strip_chars


def strip_start(text: Optional[CharSequence], strip_chars: Optional[str] = None) -> Optional[str]:
    """Remove leading characters found in ``strip_chars``.

    A None ``strip_chars`` strips whitespace; an empty one strips nothing.

    >>> strip_start("yxabc  ", "xyz")
    'abc  '
    """
    text = to_text(text)
    text_length = length(text)
    if text_length == 0 or strip_chars == EMPTY:
        return text
    start = 0
    while start < text_length and _is_stripped(text[start], strip_chars):
        start += 1
    return text[start:]


def strip_end(text: Optional[CharSequence], strip_chars: Optional[str] = None) -> Optional[str]:
    """Remove trailing characters found in ``strip_chars``.

    >>> strip_end("120.00", ".0")
    '12'
    """
    text = to_text(text)
    end = length(text)
    if end == 0 or strip_chars == EMPTY:
        return text
    while end > 0 and _is_stripped(text[end - 1], strip_chars):
        end -= 1
    return text[:end]


def strip(text: Optional[CharSequence], strip_chars: Optional[str] = None) -> Optional[str]:
    """Remove characters in ``strip_chars`` from both ends."""
    text = to_text(text)
    if is_empty(text):
        return text
    return strip_end(strip_start(text, strip_chars), strip_chars)


def truncate(text: Optional[CharSequence], offset: int, max_length: Optional[int] = None) -> Optional[str]:
    """Cut at most ``max_length`` characters of ``text`` starting at ``offset``.

    Called with two values, ``truncate(text, max_length)`` starts at 0.

    Args:
        text: Text to cut, may be None
        offset: Start position; negative values start at 0
        max_length: Maximum number of characters kept

    Returns:
        None when ``text`` is None or ``max_length`` is negative, ``EMPTY``
        when ``offset`` is past the end, otherwise the cut text

    >>> truncate("abcdefghijklmno", 5, 3)
    'fgh'
    >>> truncate("abcdefghij", 3, -1) is None
    True
    """
    if max_length is None:
        offset, max_length = 0, offset
    if text is None or max_length < 0:
        return None
    text = to_text(text)
    offset = max(offset, 0)
    if offset > len(text):
        return EMPTY
    return text[offset:offset + max_length]
