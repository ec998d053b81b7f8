"""Engine settings for cancan.

Settings only cover logging. Rules are never read from files: they are
declared in code through configure().

Example usage:
    # Load from a settings file and apply
    config = EngineConfig.load_from_file(Path("cancan.json"))
    apply_config(config)

    # Or build in code
    apply_config(EngineConfig(logging=LoggingConfig(log_level="DEBUG")))

Settings file format:
    {
        "logging": {
            "log_level": "INFO",
            "log_decisions": true,
            "decision_log_file": "/var/log/app/decisions.jsonl",
            "system_log_file": null
        }
    }
"""

from __future__ import annotations

__all__ = [
    "EngineConfig",
    "LoggingConfig",
    "apply_config",
]

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from cancan.telemetry.decision_logger import configure_decision_log_file, set_decisions_enabled
from cancan.telemetry.system_logger import (
    configure_system_logger_file,
    get_system_logger,
    set_system_log_level,
)
from cancan.utils.file_helpers import load_validated_json


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        log_level: Level of the system logger.
        log_decisions: Emit one event per authorization decision.
        decision_log_file: Optional JSONL file for decision events.
        system_log_file: Optional JSONL file for system events.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_decisions: bool = True
    decision_log_file: Path | None = None
    system_log_file: Path | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class EngineConfig(BaseModel):
    """Complete engine settings.

    Attributes:
        logging: Logging configuration.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def load_from_file(cls, config_path: Path) -> EngineConfig:
        """Load settings from a JSON file.

        Args:
            config_path: Path to the settings file.

        Returns:
            Validated EngineConfig.

        Raises:
            ConfigurationError: If the file is missing, not JSON, or invalid.
        """
        return load_validated_json(Path(config_path).expanduser(), cls, file_type="settings")


def apply_config(config: EngineConfig) -> None:
    """Apply settings to the process-wide loggers.

    Args:
        config: Settings to apply.

    Raises:
        OSError: If a configured log file cannot be created.
    """
    log_config = config.logging

    set_system_log_level(log_config.log_level)
    set_decisions_enabled(log_config.log_decisions)

    configure_system_logger_file(
        log_config.system_log_file.expanduser() if log_config.system_log_file else None
    )
    configure_decision_log_file(
        log_config.decision_log_file.expanduser() if log_config.decision_log_file else None
    )

    get_system_logger().debug(
        {
            "event": "settings_applied",
            "message": f"Settings applied (log_level={log_config.log_level})",
            "log_decisions": log_config.log_decisions,
        }
    )
