"""Tests for the unified logging format.

Target format: 2026-01-06T14:05:52Z [source] LEVEL message
"""

from __future__ import annotations

import io
import logging
import re
from datetime import datetime

from fieldcheck.logging_config import TRACE, ISO8601Formatter, configure_logging, get_logger
from fieldcheck.settings import get_settings


def make_record(msg: str, level: int = logging.INFO, args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="fieldcheck.test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestISO8601Formatter:
    """Test the ISO8601 formatter produces correct output."""

    def test_format_matches_expected_layout(self):
        """Verify output matches: 2026-01-06T14:05:52Z [source] LEVEL message"""
        output = ISO8601Formatter(source="test").format(make_record("Test message"))

        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z \[test\] INFO Test message$"
        assert re.match(pattern, output), f"Output '{output}' doesn't match expected format"

    def test_timestamp_is_utc(self):
        """Verify timestamp is in UTC (ends with Z)."""
        output = ISO8601Formatter(source="forms").format(make_record("Test"))
        timestamp_str = output.split(" ")[0]

        assert timestamp_str.endswith("Z"), f"Timestamp '{timestamp_str}' should end with Z"
        assert datetime.fromisoformat(timestamp_str.replace("Z", "+00:00")) is not None

    def test_different_log_levels(self):
        """Verify all log levels are formatted correctly, including TRACE."""
        formatter = ISO8601Formatter(source="test")

        for level, level_name in [
            (TRACE, "TRACE"),
            (logging.DEBUG, "DEBUG"),
            (logging.INFO, "INFO"),
            (logging.WARNING, "WARNING"),
            (logging.ERROR, "ERROR"),
        ]:
            output = formatter.format(make_record("Message", level=level))
            assert f"] {level_name} " in output, f"Level {level_name} not found in output"

    def test_message_formatting_with_args(self):
        output = ISO8601Formatter(source="test").format(make_record("Type: %s not recognized", args=("isPhone",)))

        assert "Type: isPhone not recognized" in output


class TestTraceLevel:
    """The TRACE level is registered without patching the Logger class."""

    def test_trace_level_name_is_registered(self):
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_logger_class_is_not_patched(self):
        assert not hasattr(logging.Logger, "trace")


class TestConfigureLogging:
    """Test the configure_logging function."""

    def test_returns_package_logger(self):
        logger = configure_logging(source="test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "fieldcheck"

    def test_debug_flag_sets_debug_level(self):
        assert configure_logging(source="test", debug=True).level == logging.DEBUG

    def test_default_level_is_info(self):
        assert configure_logging(source="test", debug=False).level == logging.INFO

    def test_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("FIELDCHECK_LOG_LEVEL", "TRACE")
        get_settings.cache_clear()

        assert configure_logging().level == TRACE

    def test_does_not_touch_root_logger(self):
        root_handlers = list(logging.getLogger().handlers)

        configure_logging(source="test")

        assert logging.getLogger().handlers == root_handlers

    def test_repeated_calls_do_not_duplicate_handlers(self):
        configure_logging(source="test")
        logger = configure_logging(source="test")

        assert len(logger.handlers) == 1

    def test_get_logger_returns_named_logger(self):
        assert get_logger("fieldcheck.rules").name == "fieldcheck.rules"


class TestIntegration:
    """Integration tests for the logging system."""

    def test_validation_diagnostics_use_unified_format(self):
        from fieldcheck import validate

        logger = configure_logging(source="integration_test")
        stream = io.StringIO()
        handler = logger.handlers[0]
        handler.setStream(stream)  # type: ignore[attr-defined]

        validate("x", {"isPhoneNumber": True})

        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z \[integration_test\] WARNING Type: isPhoneNumber not recognized\n$"
        assert re.match(pattern, stream.getvalue()), f"Output '{stream.getvalue()}' doesn't match expected format"
