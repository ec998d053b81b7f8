"""Protocol definitions for objects the engine reads properties from.

Targets are arbitrary user objects. Two kinds are supported without any
adapter code:

- Keyed accessor objects: expose a callable ``get(name)`` (ORM/ODM records,
  mappings, custom models). Matched structurally via KeyedAccessor.
- Plain field containers: everything else. Properties are read as attributes.

The check is structural: targets never inherit from anything in cancan.
"""

from __future__ import annotations

__all__ = [
    "KeyedAccessor",
]

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyedAccessor(Protocol):
    """Object that resolves named properties through a ``get`` method.

    Note: runtime_checkable only verifies that ``get`` exists. Callers must
    still confirm it is callable before invoking it.
    """

    def get(self, name: str) -> Any:
        """Return the value of the named property (None if absent)."""
        ...
