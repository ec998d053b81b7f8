"""Pydantic models for decision logs.

The 'time' field is None when an event is created. ISO8601Formatter adds
the timestamp during serialization, so every logged event has exactly one
timestamp source.
"""

from __future__ import annotations

__all__ = [
    "DecisionEvent",
]

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DecisionEvent(BaseModel):
    """One authorization decision (logger "cancan.audit.decisions").

    Note: 'time' is None when created, populated by ISO8601Formatter during logging.
    """

    time: str | None = Field(
        None,
        description="ISO 8601 timestamp, added by formatter during serialization",
    )

    event: Literal["authorization_decision"] = "authorization_decision"
    decision: Literal["allow", "deny", "no_match"]

    # --- request ---
    call: Literal["can", "cannot", "authorize"]
    actor_type: str
    action: str
    target_type: str

    # --- evaluation ---
    rule_count: int = 0  # rules declared for this actor
    applicable_rules: int = 0  # rules whose action and target matched
    granting_rule: str | None = None  # Rule.describe() of the granting rule

    duration_ms: float | None = None

    model_config = ConfigDict(extra="forbid")
