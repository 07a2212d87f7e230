"""Structured logging infrastructure for slicewise.

Log entries are emitted as single-line JSON objects with common fields
(`ts`, `level`, `logger`, `message`) plus any keyword fields passed by the
caller.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["LogSettings", "StructuredFormatter", "StructuredLogger", "get_logger"]


class LogSettings(BaseSettings):
    """Logging settings read from SLICEWISE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SLICEWISE_",
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Level name for slicewise loggers")


# LogRecord attributes that are not caller-supplied fields
_RESERVED_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs JSON-structured log entries."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_entry = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update({key: value for key, value in record.__dict__.items() if key not in _RESERVED_FIELDS})

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class StructuredLogger:
    """Wrapper around standard logger with keyword field support."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        self._logger.log(level, msg, extra=dict(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance.

    The first call for a name attaches a JSON stream handler; the level comes
    from the SLICEWISE_LOG_LEVEL environment variable (default INFO).

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured StructuredLogger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        log_level = LogSettings().log_level.upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

    return StructuredLogger(logger)
