"""Precondition checks built on the sequence classifier.

This is the only layer that raises for bad input: ``NullSubjectError`` when a
required value is None and ``InvalidArgumentError`` when a value is present
but unacceptable. Messages take ``%``-style arguments.
"""

from typing import Any, Iterable, Optional, Sized, TypeVar

from .sequence.classifier import CharSequence, is_blank, is_empty
from .shared.logging import get_logger

T = TypeVar("T")
SizedT = TypeVar("SizedT", bound=Sized)
SequenceT = TypeVar("SequenceT", bound=CharSequence)
IterableT = TypeVar("IterableT", bound=Iterable[Any])

logger = get_logger(__name__, component="assertions")


class AssertionFailure(Exception):
    """Base exception for failed preconditions."""


class InvalidArgumentError(AssertionFailure, ValueError):
    """A value is present but does not satisfy the precondition."""


class NullSubjectError(AssertionFailure, TypeError):
    """A required value is None."""


def _format(message: str, message_args: tuple) -> str:
    return message % message_args if message_args else message


def _invalid_argument(message: str, *message_args: Any) -> InvalidArgumentError:
    text = _format(message, message_args)
    logger.debug("Precondition failed", extra={"failure": "invalid_argument", "reason": text})
    return InvalidArgumentError(text)


def _null_subject(message: str, *message_args: Any) -> NullSubjectError:
    text = _format(message, message_args)
    logger.debug("Precondition failed", extra={"failure": "null_subject", "reason": text})
    return NullSubjectError(text)


def is_true(expression: bool, message: str = "The expression is false.", *message_args: Any) -> None:
    if not expression:
        raise _invalid_argument(message, *message_args)


def is_false(expression: bool, message: str = "The expression is true.", *message_args: Any) -> None:
    if expression:
        raise _invalid_argument(message, *message_args)


def not_null(value: Optional[T], message: str = "The object is null.", *message_args: Any) -> T:
    """Return ``value``, raising NullSubjectError if it is None."""
    if value is None:
        raise _null_subject(message, *message_args)
    return value


def not_empty(value: Optional[SizedT], message: Optional[str] = None, *message_args: Any) -> SizedT:
    """Return ``value`` if it is a non-empty sequence, collection or mapping.

    Raises:
        NullSubjectError: If ``value`` is None
        InvalidArgumentError: If ``value`` has length 0
    """
    if message is None:
        message = _default_empty_message(value)
    if value is None:
        raise _null_subject(message, *message_args)
    if is_empty(value):
        raise _invalid_argument(message, *message_args)
    return value


def _default_empty_message(value: Any) -> str:
    if value is None or isinstance(value, str):
        return "The character sequence is empty."
    if isinstance(value, dict):
        return "The map is empty."
    return "The collection is empty."


def not_blank(
    chars: Optional[SequenceT],
    message: str = "The character sequence is blank.",
    *message_args: Any
) -> SequenceT:
    """Return ``chars`` if it holds at least one non-whitespace character.

    Raises:
        NullSubjectError: If ``chars`` is None
        InvalidArgumentError: If ``chars`` is empty or only whitespace
    """
    if chars is None:
        raise _null_subject(message, *message_args)
    if is_blank(chars):
        raise _invalid_argument(message, *message_args)
    return chars


def no_null(values: Optional[IterableT], message: Optional[str] = None, *message_args: Any) -> IterableT:
    """Return ``values`` if none of its elements is None.

    Without a message the failure names the offending index.
    """
    not_null(values)
    for index, element in enumerate(values):
        if element is None:
            if message is None:
                raise _invalid_argument("The collection contains null element at index: %d", index)
            raise _invalid_argument(message, *message_args)
    return values
