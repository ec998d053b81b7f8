"""Policy Decision Point (PDP) - rule storage and evaluation.

This module holds the rules declared by entity config callbacks and
evaluates them for one action/target pair:

- registry.py: Maps actor classes to config callbacks
- pdp/ (this module): Builds and evaluates rules
- api.py: can/cannot/authorize, composing the two

The PDP performs no I/O of its own. The only suspension point is an
asynchronous attribute predicate supplied by the caller.

Structure:
    decision.py       - Decision enum (ALLOW/DENY/NO_MATCH) for logs
    rule.py           - Rule model and attribute constraint types
    protocol.py       - KeyedAccessor protocol for property lookup
    matcher.py        - Action/target/attribute matching
    ability.py        - Ability builder and evaluator
"""

from cancan.pdp.ability import Ability, Evaluation
from cancan.pdp.decision import Decision
from cancan.pdp.protocol import KeyedAccessor
from cancan.pdp.rule import (
    AttributeConstraint,
    AttributeObject,
    AttributePredicate,
    Rule,
    TargetType,
)

__all__ = [
    # Decision
    "Decision",
    # Ability
    "Ability",
    "Evaluation",
    # Rule models
    "AttributeConstraint",
    "AttributeObject",
    "AttributePredicate",
    "Rule",
    "TargetType",
    # Protocols
    "KeyedAccessor",
]
