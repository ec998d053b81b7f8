"""Decision logging for authorization checks.

One DecisionEvent is logged per can()/cannot()/authorize() call that
completes evaluation. Checks whose predicate raised are not logged here;
the exception reaches the caller instead.

Output goes to the "cancan.audit.decisions" logger. It has no handlers of its
own until configure_decision_log_file() is called, so events propagate to the
application's logging setup.
"""

from __future__ import annotations

__all__ = [
    "configure_decision_log_file",
    "decisions_enabled",
    "get_decision_logger",
    "log_decision",
    "set_decisions_enabled",
]

import logging
from pathlib import Path

from cancan.constants import DECISION_LOGGER_NAME
from cancan.telemetry.models import DecisionEvent
from cancan.utils.file_helpers import ensure_log_directory
from cancan.utils.logging.iso_formatter import ISO8601Formatter

_decisions_enabled: bool = True
_file_handler: logging.FileHandler | None = None


def get_decision_logger() -> logging.Logger:
    """Get the decision logger."""
    return logging.getLogger(DECISION_LOGGER_NAME)


def set_decisions_enabled(enabled: bool) -> None:
    """Turn decision logging on or off process-wide."""
    global _decisions_enabled
    _decisions_enabled = enabled


def configure_decision_log_file(log_path: Path | None) -> None:
    """Write decision events to a JSONL file.

    Replaces any file handler added by an earlier call. Passing None only
    removes the existing handler.

    Args:
        log_path: Path to the decisions file, or None.

    Raises:
        OSError: If the log directory or file cannot be created.
    """
    global _file_handler

    logger = get_decision_logger()

    if _file_handler is not None:
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
        # Drop the INFO level set alongside the handler
        logger.setLevel(logging.NOTSET)

    if log_path is None:
        return

    ensure_log_directory(log_path)
    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setFormatter(ISO8601Formatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    _file_handler = handler


def decisions_enabled() -> bool:
    """True if decision events would currently be emitted.

    Lets callers skip building a DecisionEvent when nothing would log it.
    """
    return _decisions_enabled and get_decision_logger().isEnabledFor(logging.INFO)


def log_decision(event: DecisionEvent) -> None:
    """Log one decision event at INFO.

    Args:
        event: The decision to log.
    """
    if not _decisions_enabled:
        return

    logger = get_decision_logger()
    if logger.isEnabledFor(logging.INFO):
        logger.info(event.model_dump(exclude={"time"}, exclude_none=True))
