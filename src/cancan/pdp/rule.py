"""Rule model for ability evaluation.

A rule is one permission entry declared inside an entity config callback:

    Rule
    ├── action: Action name, or "manage" for every action
    ├── target: Target class, or "all" for every target type
    └── attrs: Optional attribute constraint
        ├── None: unconditional for the action/target pair
        ├── Mapping: property name -> expected value (deep equality)
        └── Callable: predicate(target, *extra) -> bool | Awaitable[bool]

Rules are immutable and owned by the Ability that created them. One call to
Ability.can() produces the cross product of its actions and targets, all
sharing the same attrs object.
"""

from __future__ import annotations

__all__ = [
    "AttributeConstraint",
    "AttributeObject",
    "AttributePredicate",
    "Rule",
    "TargetType",
]

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Union

from cancan.constants import ALL_TARGETS, MANAGE_ACTION

# Target class or the "all" wildcard
TargetType = Union[type, Literal["all"]]

# Property name -> expected value
AttributeObject = Mapping[str, Any]

# Called with (target, *extra); may return a value or an awaitable
AttributePredicate = Callable[..., Union[Any, Awaitable[Any]]]

AttributeConstraint = Union[AttributeObject, AttributePredicate, None]


@dataclass(frozen=True, slots=True)
class Rule:
    """A single permission entry.

    Attributes:
        action: Action name ("manage" matches every action).
        target: Target class ("all" matches every target type).
        attrs: Attribute constraint narrowing the rule to specific targets.
    """

    action: str
    target: TargetType
    attrs: AttributeConstraint = None

    @property
    def is_conditional(self) -> bool:
        """True if the rule carries an attribute constraint."""
        return self.attrs is not None

    @property
    def target_name(self) -> str:
        """Readable name of the rule's target for logs."""
        if self.target == ALL_TARGETS:
            return ALL_TARGETS
        return getattr(self.target, "__qualname__", repr(self.target))

    def describe(self) -> str:
        """Short identifier used in logs and errors, e.g. "read:Product"."""
        suffix = ""
        if callable(self.attrs):
            suffix = "[predicate]"
        elif self.attrs is not None:
            suffix = "[" + ",".join(sorted(str(key) for key in self.attrs)) + "]"
        return f"{self.action}:{self.target_name}{suffix}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        wildcard = " (manage)" if self.action == MANAGE_ACTION else ""
        return f"Rule({self.describe()!r}{wildcard})"
