"""cancan - declarative, in-process authorization.

Register rules per actor class, then ask whether an actor may perform an
action on a target:

    import cancan

    cancan.configure(User, lambda ability, user: ability.can("read", Post))
    await cancan.can(user, "read", post)

Structure:
    api.py          - configure/reset/can/cannot/authorize
    registry.py     - Actor class -> config callbacks
    pdp/            - Ability, rules and matching
    exceptions.py   - ConfigurationError, AuthorizationError
    config.py       - Logging settings
    telemetry/      - System and decision loggers
"""

from cancan.api import authorize, build_ability, can, cannot, configure, reset
from cancan.config import EngineConfig, LoggingConfig, apply_config
from cancan.exceptions import AuthorizationError, CancanError, ConfigurationError
from cancan.pdp import Ability, Rule

__all__ = [
    # Public API
    "authorize",
    "build_ability",
    "can",
    "cannot",
    "configure",
    "reset",
    # Models
    "Ability",
    "Rule",
    # Settings
    "EngineConfig",
    "LoggingConfig",
    "apply_config",
    # Errors
    "AuthorizationError",
    "CancanError",
    "ConfigurationError",
]
