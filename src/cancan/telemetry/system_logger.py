"""System logger for operational events.

This module provides a singleton system logger for events that are not
authorization decisions (entity config registration, registry resets,
settings changes).

Logging strategy:
- Console (stderr): WARNING and above by default, level set by LoggingConfig
- File (optional JSONL): Added via configure_system_logger_file()

Messages are dicts with an "event" field, e.g.:
    logger.debug({"event": "entity_config_registered", "entity_type": "User"})
"""

from __future__ import annotations

__all__ = [
    "ConsoleFormatter",
    "configure_system_logger_file",
    "get_system_logger",
    "set_system_log_level",
]

import logging
import sys
from pathlib import Path

from cancan.constants import SYSTEM_LOGGER_NAME
from cancan.utils.file_helpers import ensure_log_directory
from cancan.utils.logging.iso_formatter import ISO8601Formatter


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Extracts 'message' or 'event' field from dict messages for cleaner stderr output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for human-readable console output.

        Args:
            record: The log record to format.

        Returns:
            str: Formatted log message with level prefix.
        """
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
            return f"{record.levelname}: {msg}"
        return f"{record.levelname}: {record.getMessage()}"


# Module-level singleton logger - created on first use
_system_logger: logging.Logger | None = None
_file_handler: logging.FileHandler | None = None


def get_system_logger() -> logging.Logger:
    """Get the singleton system logger instance.

    Creates the logger on first call with a stderr handler only.

    Returns:
        logging.Logger: Configured system logger instance.
    """
    global _system_logger

    if _system_logger is not None:
        return _system_logger

    _system_logger = logging.getLogger(SYSTEM_LOGGER_NAME)
    _system_logger.setLevel(logging.WARNING)
    _system_logger.propagate = False  # Don't propagate to root logger

    for handler in _system_logger.handlers:
        handler.close()
    _system_logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(ConsoleFormatter())
    _system_logger.addHandler(stderr_handler)

    return _system_logger


def set_system_log_level(level: str | int) -> None:
    """Set the system logger's level (e.g. "DEBUG", logging.INFO)."""
    get_system_logger().setLevel(level)


def configure_system_logger_file(log_path: Path | None) -> None:
    """Send system log events to a JSONL file as well as stderr.

    Replaces any file handler added by an earlier call. None removes it.

    Args:
        log_path: Path to the system log file, or None to stop file logging.

    Raises:
        OSError: If the log directory or file cannot be created.
    """
    global _file_handler

    logger = get_system_logger()

    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    if log_path is None:
        return

    ensure_log_directory(log_path)
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(ISO8601Formatter())
    logger.addHandler(file_handler)
    _file_handler = file_handler
