"""Decision enum for authorization outcomes.

These values describe the outcome of one check in decision logs.
The public API itself always returns plain booleans.
"""

from __future__ import annotations

__all__ = ["Decision"]

from enum import Enum


class Decision(str, Enum):
    """Authorization decision outcome.

    Inherits from str for easy serialization and comparison.

    Attributes:
        ALLOW: An applicable rule granted the action.
        DENY: Applicable rules were evaluated and none granted.
        NO_MATCH: No rule applied to the requested action and target.
    """

    ALLOW = "allow"
    DENY = "deny"
    NO_MATCH = "no_match"
