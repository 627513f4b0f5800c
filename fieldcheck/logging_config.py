"""
Logging configuration for fieldcheck.

Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    FIELDCHECK_LOG_LEVEL: "TRACE", "DEBUG", "INFO" (default), "WARNING" or "ERROR"
               - WARNING: unknown rules, type mismatches, missing confirmation fields
               - DEBUG: option parsing and overall results
               - TRACE: every individual rule evaluation

Usage:
    from fieldcheck.logging_config import configure_logging, get_logger

    configure_logging(source="forms")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime

from fieldcheck.settings import get_settings

# Custom TRACE level for per-rule diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 timestamps in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "fieldcheck"):
        """Initialize formatter with a source identifier.

        Args:
            source: Identifier shown in brackets (e.g., "forms", "signup")
        """
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with ISO8601 UTC timestamp."""
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            exception_text = self.formatException(record.exc_info)
            message = f"{message}\n{exception_text}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def _level_from_name(name: str) -> int:
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    source: str | None = None,
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure the fieldcheck logger hierarchy.

    Only the "fieldcheck" logger is touched, so host applications keep
    control of the root logger.

    Args:
        source: Source identifier for log messages (defaults to settings.log_source)
        level: Logging level (defaults to settings.log_level)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        The configured "fieldcheck" logger
    """
    settings = get_settings()

    if level is None:
        level = logging.DEBUG if debug else _level_from_name(settings.log_level)

    package_logger = logging.getLogger("fieldcheck")
    package_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source or settings.log_source))

    package_logger.addHandler(handler)
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
