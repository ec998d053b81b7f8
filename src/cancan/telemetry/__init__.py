"""Telemetry for cancan: system events and authorization decisions.

Structure:
    system_logger.py    - Singleton "cancan.system" logger (stderr + optional JSONL)
    decision_logger.py  - "cancan.audit.decisions" logger, one event per check
    models.py           - DecisionEvent model
"""

from cancan.telemetry.decision_logger import (
    configure_decision_log_file,
    decisions_enabled,
    get_decision_logger,
    log_decision,
    set_decisions_enabled,
)
from cancan.telemetry.models import DecisionEvent
from cancan.telemetry.system_logger import (
    configure_system_logger_file,
    get_system_logger,
    set_system_log_level,
)

__all__ = [
    "DecisionEvent",
    "configure_decision_log_file",
    "configure_system_logger_file",
    "decisions_enabled",
    "get_decision_logger",
    "get_system_logger",
    "log_decision",
    "set_decisions_enabled",
    "set_system_log_level",
]
