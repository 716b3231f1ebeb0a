"""
Logging — Structured logging tagged with the enumeration being built.

Provides consistent logging across enumreflect components. Records emitted
while a table is under construction carry the enum type name.
"""

import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any


# Context variable for the enum type under construction
_enum_type: ContextVar[str | None] = ContextVar("enum_type", default=None)


def set_enum_type(type_name: str | None) -> None:
    """Set the enum type name for current context."""
    _enum_type.set(type_name or None)


def get_enum_type() -> str | None:
    """Get the enum type name from current context."""
    return _enum_type.get()


class EnumTypeFilter(logging.Filter):
    """Adds enum_type to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.enum_type = get_enum_type() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "enum_type": getattr(record, "enum_type", None),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """

    def format(self, record: logging.LogRecord) -> str:
        enum_type = getattr(record, "enum_type", "-")

        base = f"{record.levelname:<7} [{enum_type}] {record.name}: {record.getMessage()}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure enumreflect logging.

    Args:
        level: Logging level
        json_format: Use JSON format
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(EnumTypeFilter())

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())

    package_logger = logging.getLogger("enumreflect")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an enumreflect component."""
    return logging.getLogger(f"enumreflect.{name}")


class LogContext:
    """
    Context manager tagging log records with an enum type name.

    Usage:
        with LogContext("Color"):
            logger.info("Building...")  # Includes enum_type=Color
    """

    def __init__(self, type_name: str | None):
        self.type_name = type_name
        self._token = None

    def __enter__(self):
        self._token = _enum_type.set(self.type_name or None)
        return self

    def __exit__(self, *args):
        if self._token is not None:
            _enum_type.reset(self._token)
