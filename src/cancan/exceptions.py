"""Custom exceptions for cancan.

This module contains all custom exceptions used throughout the package.
Exceptions are organized into two categories:

Misconfiguration (raised while registering rules or loading settings):
    - ConfigurationError: Invalid entity config, rule declaration or settings file

Authorization outcomes (raised by authorize()):
    - AuthorizationError: Check did not resolve to exactly True

Exceptions raised inside user-supplied attribute predicates are never caught
or wrapped. They reach the caller of can()/cannot()/authorize() unchanged.

Usage:
    from cancan.exceptions import AuthorizationError, ConfigurationError
"""

from __future__ import annotations

__all__ = [
    "AuthorizationError",
    "CancanError",
    "ConfigurationError",
]

from typing import Any

from cancan.constants import UNAUTHORIZED_CLASSIFICATION, UNAUTHORIZED_STATUS_CODE


class CancanError(Exception):
    """Base exception for all errors raised by cancan itself."""


# =============================================================================
# Misconfiguration
# =============================================================================


class ConfigurationError(CancanError):
    """Configuration is invalid.

    Raised when:
    - configure() receives a config callback that is not callable
    - configure() receives an entity type that is not a class
    - Ability.can() declares a rule with an unusable action, target or attrs
    - A settings file is missing, is not valid JSON or fails validation

    Fatal to the offending call only; the registry is left unchanged.
    """


# =============================================================================
# Authorization outcomes
# =============================================================================


class AuthorizationError(CancanError):
    """Raised by authorize() when access is not granted.

    This is the expected "normal" failure path. Transport layers can turn it
    into a user-facing response using status and error_data.

    Attributes:
        status: HTTP-style status code (401).
        classification: Fixed denial classification ("unauthorized").
        message: Human-readable denial reason.
        result: Exactly what can() resolved to for the same arguments.
        action: The requested action name.
        target_type: Name of the target's class.
        applicable_rules: Number of rules whose action and target matched.
            Zero means no rule applied at all, otherwise the applicable
            rules were evaluated and none granted.
    """

    status: int = UNAUTHORIZED_STATUS_CODE
    classification: str = UNAUTHORIZED_CLASSIFICATION

    def __init__(
        self,
        message: str = "Not authorized",
        *,
        result: Any = False,
        action: str | None = None,
        target_type: str | None = None,
        applicable_rules: int = 0,
    ) -> None:
        """Initialize AuthorizationError.

        Args:
            message: Human-readable denial reason.
            result: The result can() produced.
            action: The requested action name.
            target_type: Name of the target's class.
            applicable_rules: Number of rules that applied to the request.
        """
        super().__init__(message)
        self.message = message
        self.result = result
        self.action = action
        self.target_type = target_type
        self.applicable_rules = applicable_rules

    @property
    def error_data(self) -> dict[str, Any]:
        """Structured diagnostics, without the status and message."""
        data: dict[str, Any] = {
            "classification": self.classification,
            "result": self.result,
            "applicable_rules": self.applicable_rules,
        }
        if self.action is not None:
            data["action"] = self.action
        if self.target_type is not None:
            data["target_type"] = self.target_type
        return data

    def to_dict(self) -> dict[str, Any]:
        """Convert to a response-ready error object."""
        return {
            "status": self.status,
            "message": self.message,
            "data": self.error_data,
        }

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        parts = [f"AuthorizationError({self.message!r}, result={self.result!r}"]
        if self.action is not None:
            parts.append(f", action={self.action!r}")
        if self.target_type is not None:
            parts.append(f", target_type={self.target_type!r}")
        parts.append(f", applicable_rules={self.applicable_rules!r})")
        return "".join(parts)

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return self.message
