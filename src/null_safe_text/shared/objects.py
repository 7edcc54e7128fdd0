"""Null-aware helpers for arbitrary values.

These are the small object-level building blocks the sequence layer relies on:
length-or-zero for argument arrays, first-non-null lookup, and a marker value
for "present, but null".
"""

from typing import Any, Optional, Sized, TypeVar

T = TypeVar("T")


class _NullMarker:
    """Type of the :data:`NULL` marker. Only one instance ever exists."""

    _instance: Optional["_NullMarker"] = None

    def __new__(cls) -> "_NullMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NULL"

    def __copy__(self) -> "_NullMarker":
        return self

    def __deepcopy__(self, memo: Any) -> "_NullMarker":
        return self


# Stands in for a meaningful None where None already means "missing", e.g. a
# mapping value that was explicitly set to null. Compare with ``is``.
NULL = _NullMarker()


def array_length(values: Optional[Sized]) -> int:
    """Length of ``values``, or 0 when it is None."""
    return 0 if values is None else len(values)


def is_empty_array(values: Optional[Sized]) -> bool:
    return array_length(values) == 0


def is_not_empty_array(values: Optional[Sized]) -> bool:
    return array_length(values) != 0


def is_null(value: Any) -> bool:
    return value is None


def is_not_null(value: Any) -> bool:
    return value is not None


def first_non_null(*values: Optional[T]) -> Optional[T]:
    """Return the first value that is not None.

    >>> first_non_null(None, "", "zz")
    ''
    >>> first_non_null() is None
    True
    """
    if is_not_empty_array(values):
        for value in values:
            if value is not None:
                return value
    return None


def contain_null(*values: Any) -> bool:
    """True if at least one value is None. A call without values is False."""
    if is_not_empty_array(values):
        for value in values:
            if value is None:
                return True
    return False


def contain_non_null(*values: Any) -> bool:
    return first_non_null(*values) is not None


def is_all_null(*values: Any) -> bool:
    return first_non_null(*values) is None


def is_all_non_null(*values: Any) -> bool:
    return not contain_null(*values)


def default_if_null(value: Optional[T], default: T) -> T:
    """Return ``value`` unless it is None. The NULL marker is a real value."""
    return value if value is not None else default


def all_equals(*values: Any) -> bool:
    """True if every value equals its neighbour; fewer than two values is True."""
    if array_length(values) <= 1:
        return True
    for current, following in zip(values, values[1:]):
        if current != following:
            return False
    return True


def identity_string(value: Any) -> Optional[str]:
    """Default identity text of ``value``: ``module.QualName@hexid``."""
    if value is None:
        return None
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}@{id(value):x}"
