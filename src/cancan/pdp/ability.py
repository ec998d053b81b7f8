"""Ability - per-check rule container and evaluator.

An Ability is built fresh for every top-level check. Entity config callbacks
declare rules on it with can(); evaluate()/test() then scan those rules.

Evaluation flow:
1. Scan rules in declaration order
2. Skip rules whose action or target does not match
3. Await the attribute constraint of each applicable rule
4. First True result → grant immediately (later rules are not consulted)
5. False results are retained and the scan continues
6. No grant → last retained result, or False if no rule applied

Design principles:
1. Implicit OR: any applicable rule whose attributes match grants
2. Declaration order is priority: an earlier grant cannot be overridden
3. Predicates are awaited one at a time, never concurrently
4. Evaluation never adds rules; the rule list is complete beforehand
"""

from __future__ import annotations

__all__ = [
    "Ability",
    "Evaluation",
]

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from cancan.constants import ALL_TARGETS
from cancan.exceptions import ConfigurationError
from cancan.pdp.matcher import action_matches, attrs_match, target_matches
from cancan.pdp.rule import AttributeConstraint, Rule, TargetType


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of scanning an Ability for one action/target pair.

    Attributes:
        granted: Final result of the scan.
        applicable_rules: Number of rules whose action and target matched
            and whose attributes were evaluated.
        granting_rule: The rule that granted, if any.
    """

    granted: bool
    applicable_rules: int = 0
    granting_rule: Rule | None = None


def _as_list(value: Any, kind: str) -> list[Any]:
    """Accept a single item or a sequence of items (strings are single items)."""
    if isinstance(value, (str, type)):
        return [value]
    if isinstance(value, Sequence):
        items = list(value)
        if not items:
            raise ConfigurationError(f"Rule {kind} list cannot be empty")
        return items
    return [value]


def _validate_action(action: Any) -> str:
    if not isinstance(action, str) or not action.strip():
        raise ConfigurationError(f"Rule action must be a non-empty string, got {action!r}")
    return action


def _validate_target(target: Any) -> TargetType:
    if target == ALL_TARGETS or isinstance(target, type):
        return target
    raise ConfigurationError(f"Rule target must be a class or {ALL_TARGETS!r}, got {target!r}")


def _validate_attrs(attrs: Any) -> AttributeConstraint:
    if attrs is None or callable(attrs) or isinstance(attrs, Mapping):
        return attrs
    raise ConfigurationError(
        f"Rule attrs must be a mapping or a callable, got {type(attrs).__name__}"
    )


class Ability:
    """Ordered collection of rules built for one authorization check.

    Never shared between checks: config callbacks may branch on the actor's
    state, so rules from one check must not leak into another.

    Attributes:
        rules: Declared rules in declaration order (read-only view).
    """

    def __init__(self) -> None:
        """Initialize an empty ability."""
        self._rules: list[Rule] = []

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Declared rules, in declaration order."""
        return tuple(self._rules)

    @property
    def rule_count(self) -> int:
        """Get the number of declared rules."""
        return len(self._rules)

    def add_rule(
        self,
        actions: str | Sequence[str],
        targets: TargetType | Sequence[TargetType],
        attrs: AttributeConstraint = None,
    ) -> None:
        """Declare rules for every (action, target) pair.

        Actions form the outer loop and targets the inner loop, so
        ``can(["read", "update"], [Post, Comment])`` appends read:Post,
        read:Comment, update:Post, update:Comment. All generated rules share
        the same attrs object.

        Args:
            actions: Action name or sequence of names ("manage" = every action).
            targets: Target class, "all", or a sequence of those.
            attrs: Optional mapping of expected properties or a predicate.

        Raises:
            ConfigurationError: If an action, target or attrs value is unusable.
        """
        action_list = [_validate_action(a) for a in _as_list(actions, "action")]
        target_list = [_validate_target(t) for t in _as_list(targets, "target")]
        attrs = _validate_attrs(attrs)

        for action in action_list:
            for target in target_list:
                self._rules.append(Rule(action=action, target=target, attrs=attrs))

    # Builder alias used inside config callbacks: ability.can("read", Post)
    can = add_rule

    def relevant_rules(self, action: str, target: Any) -> list[Rule]:
        """Get the rules whose action and target match, in declaration order.

        Attribute constraints are not evaluated.

        Args:
            action: Requested action name.
            target: Target object.

        Returns:
            Applicable rules (empty list if none).
        """
        return [rule for rule in self._rules if action_matches(action, rule) and target_matches(target, rule)]

    async def evaluate(self, action: str, target: Any, *extra: Any) -> Evaluation:
        """Scan the rules and report how the decision was reached.

        Args:
            action: Requested action name.
            target: Target object.
            *extra: Extra arguments forwarded to attribute predicates.

        Returns:
            Evaluation with the final result and the rules involved.
        """
        result = False
        applicable = 0

        for rule in self._rules:
            if not action_matches(action, rule):
                continue
            if not target_matches(target, rule):
                continue

            applicable += 1
            result = await attrs_match(rule, target, *extra)

            if result is True:
                return Evaluation(granted=True, applicable_rules=applicable, granting_rule=rule)

        return Evaluation(granted=result, applicable_rules=applicable)

    async def test(self, action: str, target: Any, *extra: Any) -> bool:
        """Decide whether the action on the target is granted.

        Args:
            action: Requested action name.
            target: Target object.
            *extra: Extra arguments forwarded to attribute predicates.

        Returns:
            True if any applicable rule granted, False otherwise.
        """
        evaluation = await self.evaluate(action, target, *extra)
        return evaluation.granted

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"Ability(rules={[rule.describe() for rule in self._rules]!r})"
