"""Tests for operation result objects."""

import pytest

from null_safe_text.shared.result import OperationResult


class TestOperationResult:
    """Tests for OperationResult."""

    def test_to_dict(self):
        result = OperationResult("trim", {"text": " a "}, "a", 0.5)

        assert result.to_dict() == {
            "operation": "trim",
            "arguments": {"text": " a "},
            "value": "a",
            "processing_time_ms": 0.5,
        }
        assert result.timestamp > 0

    def test_empty_operation_rejected(self):
        with pytest.raises(ValueError):
            OperationResult("")

    def test_negative_time_rejected(self):
        with pytest.raises(ValueError):
            OperationResult("trim", processing_time_ms=-1.0)
