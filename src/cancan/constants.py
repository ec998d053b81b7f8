"""Application-wide constants for cancan.

Constants that define engine behavior.
For user-configurable settings, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    # Rule wildcards
    "MANAGE_ACTION",
    "ALL_TARGETS",
    # Authorization failures
    "UNAUTHORIZED_CLASSIFICATION",
    "UNAUTHORIZED_STATUS_CODE",
    # Logging
    "SYSTEM_LOGGER_NAME",
    "DECISION_LOGGER_NAME",
    "LOG_LEVELS",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "cancan"

# =============================================================================
# Rule wildcards
# =============================================================================

# Rule action that matches every requested action (checked at evaluation time)
MANAGE_ACTION = "manage"

# Rule target that matches every target type
ALL_TARGETS = "all"

# =============================================================================
# Authorization failures
# =============================================================================

UNAUTHORIZED_CLASSIFICATION = "unauthorized"
UNAUTHORIZED_STATUS_CODE = 401

# =============================================================================
# Logging
# =============================================================================

SYSTEM_LOGGER_NAME = f"{APP_NAME}.system"
DECISION_LOGGER_NAME = f"{APP_NAME}.audit.decisions"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")
