"""Entity config registry - actor class to config callbacks.

The registry is process-wide and append-only between resets:

- configure() appends (entity_type, callback). Registering the same class
  again adds another callback; nothing is replaced.
- configs_for() returns every entry for the actor's exact class, in
  registration order. Subclass instances do not pick up a parent's entries.
- reset() empties the registry (test isolation, reconfiguration).

Thread-safety:
The registry is not locked. Populate it at startup and treat it as read-only
while checks are in flight. Calling configure() or reset() concurrently with
can()/cannot()/authorize() is the caller's responsibility.
"""

from __future__ import annotations

__all__ = [
    "ConfigureFn",
    "EntityConfig",
    "EntityConfigRegistry",
    "get_registry",
]

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cancan.exceptions import ConfigurationError
from cancan.telemetry.system_logger import get_system_logger

if TYPE_CHECKING:
    from cancan.pdp.ability import Ability

# Called as configure_fn(ability, actor) to declare rules for one check
ConfigureFn = Callable[["Ability", Any], None]


@dataclass(frozen=True, slots=True)
class EntityConfig:
    """A registered config callback for one actor class.

    Attributes:
        entity_type: Actor class the callback applies to (exact match).
        configure: Callback declaring rules, called as configure(ability, actor).
    """

    entity_type: type
    configure: ConfigureFn


class EntityConfigRegistry:
    """Ordered, append-only collection of EntityConfig entries."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._configs: list[EntityConfig] = []

    def configure(self, entity_type: type, configure_fn: ConfigureFn) -> EntityConfig:
        """Register a config callback for an actor class.

        Args:
            entity_type: Actor class.
            configure_fn: Callback declaring rules, called as
                configure_fn(ability, actor).

        Returns:
            The registered entry.

        Raises:
            ConfigurationError: If configure_fn is not callable or
                entity_type is not a class.
        """
        if not callable(configure_fn):
            raise ConfigurationError(
                f"Config must be a callable, got {type(configure_fn).__name__}"
            )
        if not isinstance(entity_type, type):
            raise ConfigurationError(f"Entity type must be a class, got {entity_type!r}")

        entry = EntityConfig(entity_type=entity_type, configure=configure_fn)
        self._configs.append(entry)

        get_system_logger().debug(
            {
                "event": "entity_config_registered",
                "message": f"Registered config for {entity_type.__qualname__}",
                "entity_type": entity_type.__qualname__,
                "config_count": len(self._configs),
            }
        )
        return entry

    def reset(self) -> None:
        """Remove every registered config."""
        removed = len(self._configs)
        self._configs = []

        get_system_logger().debug(
            {
                "event": "entity_configs_reset",
                "message": f"Registry reset ({removed} configs removed)",
                "removed": removed,
            }
        )

    def configs_for(self, actor: Any) -> list[EntityConfig]:
        """Get the entries registered for the actor's exact class.

        Args:
            actor: Actor instance.

        Returns:
            Matching entries in registration order.
        """
        actor_type = type(actor)
        return [entry for entry in self._configs if entry.entity_type is actor_type]

    @property
    def entity_types(self) -> list[type]:
        """Registered classes, in first-registration order, without duplicates."""
        return list(dict.fromkeys(entry.entity_type for entry in self._configs))

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        names = [t.__qualname__ for t in self.entity_types]
        return f"EntityConfigRegistry(configs={len(self._configs)}, entity_types={names!r})"


# Process-wide registry used by the public API
_registry = EntityConfigRegistry()


def get_registry() -> EntityConfigRegistry:
    """Get the process-wide registry used by can()/cannot()/authorize()."""
    return _registry
