"""Shared file utilities for cancan.

Provides:
- ensure_log_directory: Create a log file's parent directory
- load_validated_json: Read a JSON file into a Pydantic model
"""

from __future__ import annotations

__all__ = [
    "ensure_log_directory",
    "load_validated_json",
]

import json
import sys
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from cancan.exceptions import ConfigurationError

# Type variable for Pydantic models
T = TypeVar("T", bound=BaseModel)


def ensure_log_directory(log_file: Path) -> None:
    """Create log directory with owner-only permissions.

    Args:
        log_file: Path to the log file (parent directory will be created).

    Raises:
        OSError: If directory creation fails.
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    if sys.platform != "win32":
        try:
            log_file.parent.chmod(0o700)
        except OSError:
            pass  # Directory may be owned by someone else (e.g. /tmp)


def load_validated_json(
    file_path: Path,
    model_class: type[T],
    file_type: str = "file",
    encoding: str | None = "utf-8",
) -> T:
    """Load JSON file and validate against Pydantic model.

    Args:
        file_path: Path to JSON file.
        model_class: Pydantic model class to validate against.
        file_type: Description for error messages (e.g., "settings").
        encoding: File encoding.

    Returns:
        Validated Pydantic model instance.

    Raises:
        ConfigurationError: If the file is missing, the JSON is invalid or
            validation fails.
    """
    if not file_path.exists():
        raise ConfigurationError(f"{file_type.capitalize()} file not found at {file_path}.")

    try:
        with open(file_path, "r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {file_type} file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read {file_type} file {file_path}: {e}") from e

    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"  - {loc}: {error['msg']}")
        details = "\n".join(errors)
        raise ConfigurationError(f"Invalid {file_type} file {file_path}:\n{details}") from e
