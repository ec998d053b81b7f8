"""Shared utilities for cancan.

Import directly from submodules:
    from cancan.utils.file_helpers import load_validated_json
    from cancan.utils.logging.iso_formatter import ISO8601Formatter
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
