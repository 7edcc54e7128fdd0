"""Tests for the precondition layer."""

import logging
from unittest.mock import patch

import pytest

from null_safe_text.assertions import (
    AssertionFailure,
    InvalidArgumentError,
    NullSubjectError,
    is_false,
    is_true,
    no_null,
    not_blank,
    not_empty,
    not_null,
)


class TestErrorTaxonomy:
    """Tests for the exception hierarchy."""

    def test_builtin_bases(self):
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(NullSubjectError, TypeError)
        assert issubclass(InvalidArgumentError, AssertionFailure)
        assert issubclass(NullSubjectError, AssertionFailure)


class TestExpressions:
    """Tests for is_true / is_false."""

    def test_is_true(self):
        is_true(True)
        with pytest.raises(InvalidArgumentError, match="The expression is false."):
            is_true(False)

    def test_is_false(self):
        is_false(False)
        with pytest.raises(InvalidArgumentError, match="The expression is true."):
            is_false(True)

    def test_message_arguments(self):
        with pytest.raises(InvalidArgumentError, match="value 3 is out of range 0..2"):
            is_true(False, "value %d is out of range %d..%d", 3, 0, 2)

    def test_message_without_arguments_is_literal(self):
        with pytest.raises(InvalidArgumentError, match="100%"):
            is_true(False, "must be 100%")


class TestNotNull:
    """Tests for not_null."""

    def test_returns_value(self):
        assert not_null("") == ""
        assert not_null(0) == 0

    def test_none_raises(self):
        with pytest.raises(NullSubjectError, match="The object is null."):
            not_null(None)


class TestNotEmpty:
    """Tests for not_empty over sequences, collections and mappings."""

    @pytest.mark.parametrize("value", ["a", [1], (None,), {"k": None}, {1}])
    def test_returns_value(self, value):
        assert not_empty(value) is value

    def test_none_raises_null_subject(self):
        with pytest.raises(NullSubjectError):
            not_empty(None)

    @pytest.mark.parametrize("value,message", [
        ("", "The character sequence is empty."),
        ([], "The collection is empty."),
        ({}, "The map is empty."),
    ])
    def test_empty_raises_invalid_argument(self, value, message):
        with pytest.raises(InvalidArgumentError) as exc_info:
            not_empty(value)
        assert str(exc_info.value) == message

    def test_custom_message(self):
        with pytest.raises(InvalidArgumentError, match="names required"):
            not_empty([], "%s required", "names")

    def test_emptiness_decided_by_classifier(self):
        with patch("null_safe_text.assertions.is_empty", return_value=True) as mock_is_empty:
            with pytest.raises(InvalidArgumentError):
                not_empty(["a"])

        mock_is_empty.assert_called_once_with(["a"])


class TestNotBlank:
    """Tests for not_blank."""

    def test_returns_value(self):
        assert not_blank(" a ") == " a "

    def test_none_raises_null_subject(self):
        with pytest.raises(NullSubjectError, match="The character sequence is blank."):
            not_blank(None)

    @pytest.mark.parametrize("value", ["", " ", "\t\n"])
    def test_blank_raises_invalid_argument(self, value):
        with pytest.raises(InvalidArgumentError):
            not_blank(value)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="null_safe_text.assertions"):
            with pytest.raises(InvalidArgumentError):
                not_blank("  ", "name is blank")

        record = caplog.records[-1]
        assert record.component == "assertions"
        assert record.failure == "invalid_argument"
        assert record.reason == "name is blank"


class TestNoNull:
    """Tests for no_null."""

    def test_returns_value(self):
        values = ["a", ""]
        assert no_null(values) is values

    def test_none_collection(self):
        with pytest.raises(NullSubjectError):
            no_null(None)

    def test_default_message_names_index(self):
        with pytest.raises(InvalidArgumentError, match="null element at index: 2"):
            no_null(["a", "b", None])

    def test_custom_message(self):
        with pytest.raises(InvalidArgumentError, match="no gaps allowed"):
            no_null((None,), "no gaps allowed")

    def test_accepts_iterables(self):
        with pytest.raises(InvalidArgumentError):
            no_null(iter([1, None]))
