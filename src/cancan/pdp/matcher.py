"""Matching functions for ability rules.

This module provides the matching steps used by Ability.evaluate():
- Actions: Exact match, or the "manage" wildcard on the rule side
- Targets: Exact class match (no inheritance), or the "all" wildcard
- Attribute objects: Deep structural equality per property
- Attribute predicates: Sync or async callables, awaited when needed

Property lookup goes through get_property(), which prefers a target's own
``get(name)`` method (ORM/ODM records, mappings) over attribute access.

Design note: Attribute results are coerced with bool() at this boundary, so
the evaluator only ever aggregates real booleans.
"""

from __future__ import annotations

__all__ = [
    "action_matches",
    "attrs_match",
    "deep_equals",
    "get_property",
    "matches_attributes",
    "target_matches",
]

import inspect
import math
from collections.abc import Mapping, Set
from typing import Any

from cancan.constants import ALL_TARGETS, MANAGE_ACTION
from cancan.pdp.protocol import KeyedAccessor
from cancan.pdp.rule import AttributeObject, Rule

# Sequence types compared element by element (str/bytes compare as scalars)
_SEQUENCE_TYPES = (list, tuple)


# =============================================================================
# Applicability
# =============================================================================


def action_matches(action: str, rule: Rule) -> bool:
    """Check if a requested action is covered by a rule.

    Args:
        action: Requested action name.
        rule: Rule to check.

    Returns:
        True if the names are equal or the rule action is "manage".
    """
    return action == rule.action or rule.action == MANAGE_ACTION


def target_matches(target: Any, rule: Rule) -> bool:
    """Check if a target object is covered by a rule.

    The target's exact class is compared by identity. Instances of a
    subclass do not match a rule declared for the parent class.

    Args:
        target: Target object of the check.
        rule: Rule to check.

    Returns:
        True if the target's class is the rule target or the rule target is "all".
    """
    if isinstance(rule.target, str):
        return rule.target == ALL_TARGETS
    return type(target) is rule.target


# =============================================================================
# Property access
# =============================================================================


def get_property(obj: Any, name: str) -> Any:
    """Read a named property from a target object.

    Keyed accessor objects (anything with a callable ``get``) are asked via
    ``obj.get(name)``; plain objects are read with getattr(). Classes are
    always read with getattr(), since their ``get`` is an unbound method.
    Absent properties resolve to None. No caching.

    Args:
        obj: Target object.
        name: Property name.

    Returns:
        The property value, or None if absent.
    """
    if not isinstance(obj, type) and isinstance(obj, KeyedAccessor) and callable(obj.get):
        return obj.get(name)
    return getattr(obj, name, None)


# =============================================================================
# Attribute matching
# =============================================================================


def deep_equals(actual: Any, expected: Any) -> bool:
    """Compare two values by structure rather than identity.

    Rules:
    - Booleans only equal booleans (True does not equal 1)
    - Mappings are equal if they have the same keys and equal values
    - Lists/tuples are equal if they have the same type, length and items
    - Sets compare by membership
    - NaN equals NaN
    - Everything else falls back to ==

    Args:
        actual: Value read from the target.
        expected: Value declared in the rule.

    Returns:
        True if both values are structurally equal.
    """
    if actual is expected:
        return True

    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected

    if isinstance(actual, Mapping) or isinstance(expected, Mapping):
        if not (isinstance(actual, Mapping) and isinstance(expected, Mapping)):
            return False
        if set(actual.keys()) != set(expected.keys()):
            return False
        return all(deep_equals(actual[key], expected[key]) for key in expected)

    if isinstance(actual, _SEQUENCE_TYPES) or isinstance(expected, _SEQUENCE_TYPES):
        if type(actual) is not type(expected) or len(actual) != len(expected):
            return False
        return all(deep_equals(a, e) for a, e in zip(actual, expected))

    if isinstance(actual, Set) and isinstance(expected, Set):
        return actual == expected

    if isinstance(actual, float) and isinstance(expected, float):
        if math.isnan(actual) and math.isnan(expected):
            return True

    return bool(actual == expected)


def matches_attributes(target: Any, attrs: AttributeObject) -> bool:
    """Check that every expected property deep-equals the target's value.

    Args:
        target: Target object.
        attrs: Property name -> expected value.

    Returns:
        True if all properties match (vacuously True for an empty mapping).
    """
    return all(deep_equals(get_property(target, key), expected) for key, expected in attrs.items())


async def attrs_match(rule: Rule, target: Any, *extra: Any) -> bool:
    """Resolve a rule's attribute constraint against a target.

    - Callable attrs are invoked as ``attrs(target, *extra)``. Awaitable
      results (coroutines, futures) are awaited before coercion.
    - Mapping attrs are checked with matches_attributes().
    - No attrs always match.

    Exceptions raised by predicates propagate unchanged.

    Args:
        rule: Applicable rule (action and target already matched).
        target: Target object.
        *extra: Extra arguments passed through from can()/cannot()/authorize().

    Returns:
        The constraint result coerced to bool.
    """
    attrs = rule.attrs

    if attrs is None:
        return True

    if callable(attrs):
        result = attrs(target, *extra)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    return matches_attributes(target, attrs)
