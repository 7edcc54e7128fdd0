"""Tests for correlation-aware logging."""

import logging

from null_safe_text.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Tests for CorrelationLogger."""

    def test_component_defaults_to_last_name_part(self):
        logger = get_logger("null_safe_text.sequence.matcher")
        assert logger.component == "matcher"
        assert logger.correlation_id is None

    def test_records_carry_correlation_info(self, caplog):
        logger = get_logger("null_safe_text.test", "req-1", "tester")

        with caplog.at_level(logging.DEBUG, logger="null_safe_text.test"):
            logger.debug("hello", extra={"operation": "trim"})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.component == "tester"
        assert record.correlation_id == "req-1"
        assert record.operation == "trim"

    def test_bind_replaces_correlation_id(self):
        logger = CorrelationLogger("null_safe_text.test", "a", "tester")
        bound = logger.bind("b")

        assert bound.correlation_id == "b"
        assert bound.component == "tester"
        assert bound.logger is logger.logger

    def test_log_at_explicit_level(self, caplog):
        logger = get_logger("null_safe_text.test")

        with caplog.at_level(logging.WARNING, logger="null_safe_text.test"):
            logger.log(logging.WARNING, "careful", extra={"reason": "x"})
            logger.debug("hidden")

        assert [r.getMessage() for r in caplog.records] == ["careful"]
        assert caplog.records[0].component == "test"
        assert caplog.records[0].reason == "x"
