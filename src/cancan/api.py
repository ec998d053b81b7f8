"""Public API - configure rules and check permissions.

Usage:
    import cancan

    class User: ...
    class Post: ...

    def user_abilities(ability, user):
        ability.can("read", Post)
        ability.can("update", Post, {"author_id": user.id})

    cancan.configure(User, user_abilities)

    await cancan.can(user, "read", post)        # True / False
    await cancan.cannot(user, "update", post)   # not can(...)
    await cancan.authorize(user, "update", post)  # True, or AuthorizationError

Each check builds one fresh Ability: every config registered for the actor's
exact class runs against it (in registration order) before evaluation starts.
Extra positional arguments after the target are forwarded to attribute
predicates unchanged.
"""

from __future__ import annotations

__all__ = [
    "authorize",
    "build_ability",
    "can",
    "cannot",
    "configure",
    "reset",
]

import time
from typing import Any, Literal

from cancan.exceptions import AuthorizationError
from cancan.pdp.ability import Ability, Evaluation
from cancan.pdp.decision import Decision
from cancan.registry import ConfigureFn, EntityConfig, EntityConfigRegistry, get_registry
from cancan.telemetry.decision_logger import decisions_enabled, log_decision
from cancan.telemetry.models import DecisionEvent


def configure(entity_type: type, configure_fn: ConfigureFn) -> EntityConfig:
    """Register permission rules for every instance of an actor class.

    Args:
        entity_type: Actor class.
        configure_fn: Callback declaring rules, called as
            configure_fn(ability, actor) on every check.

    Returns:
        The registered entry.

    Raises:
        ConfigurationError: If configure_fn is not callable.
    """
    return get_registry().configure(entity_type, configure_fn)


def reset() -> None:
    """Remove every registered config."""
    get_registry().reset()


def build_ability(actor: Any, registry: EntityConfigRegistry | None = None) -> Ability:
    """Build the Ability for one check.

    Args:
        actor: Actor instance.
        registry: Registry to read from (defaults to the process-wide one).

    Returns:
        A new Ability populated by every config for the actor's class.
    """
    if registry is None:
        registry = get_registry()

    ability = Ability()
    for entry in registry.configs_for(actor):
        entry.configure(ability, actor)
    return ability


def _type_name(obj: Any) -> str:
    return type(obj).__qualname__


async def _check(
    call: Literal["can", "cannot", "authorize"],
    actor: Any,
    action: str,
    target: Any,
    *extra: Any,
) -> Evaluation:
    """Build the ability, evaluate it and log the decision."""
    started = time.perf_counter()

    ability = build_ability(actor)
    evaluation = await ability.evaluate(action, target, *extra)

    if evaluation.granted:
        decision = Decision.ALLOW
    elif evaluation.applicable_rules:
        decision = Decision.DENY
    else:
        decision = Decision.NO_MATCH

    # Only build the event when it would be written
    if decisions_enabled():
        log_decision(
            DecisionEvent(
                decision=decision.value,
                call=call,
                actor_type=_type_name(actor),
                action=str(action),
                target_type=_type_name(target),
                rule_count=ability.rule_count,
                applicable_rules=evaluation.applicable_rules,
                granting_rule=(
                    evaluation.granting_rule.describe() if evaluation.granting_rule else None
                ),
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            )
        )
    return evaluation


async def can(actor: Any, action: str, target: Any, *extra: Any) -> bool:
    """Check whether the actor may perform the action on the target.

    Args:
        actor: Actor instance.
        action: Action name.
        target: Target object.
        *extra: Extra arguments forwarded to attribute predicates.

    Returns:
        True if granted, False otherwise.

    Raises:
        Exception: Whatever an attribute predicate raises, unchanged.
    """
    evaluation = await _check("can", actor, action, target, *extra)
    return evaluation.granted


async def cannot(actor: Any, action: str, target: Any, *extra: Any) -> bool:
    """Negation of can() for the same arguments."""
    evaluation = await _check("cannot", actor, action, target, *extra)
    return not evaluation.granted


async def authorize(actor: Any, action: str, target: Any, *extra: Any) -> bool:
    """Like can(), but raise if access is not granted.

    Args:
        actor: Actor instance.
        action: Action name.
        target: Target object.
        *extra: Extra arguments forwarded to attribute predicates.

    Returns:
        True (the granted result).

    Raises:
        AuthorizationError: If the check did not resolve to exactly True.
            Carries status 401, classification "unauthorized" and the result.
        Exception: Whatever an attribute predicate raises, unchanged.
    """
    evaluation = await _check("authorize", actor, action, target, *extra)
    if evaluation.granted is not True:
        raise AuthorizationError(
            "Not authorized",
            result=evaluation.granted,
            action=action,
            target_type=_type_name(target),
            applicable_rules=evaluation.applicable_rules,
        )
    return evaluation.granted
