"""Shared fixtures for cancan tests."""

import logging

import pytest

import cancan
from cancan.telemetry import (
    configure_decision_log_file,
    configure_system_logger_file,
    set_decisions_enabled,
    set_system_log_level,
)


@pytest.fixture(autouse=True)
def isolated_engine():
    """Give every test an empty registry and default logging state."""
    cancan.reset()
    yield
    cancan.reset()
    configure_decision_log_file(None)
    configure_system_logger_file(None)
    set_decisions_enabled(True)
    set_system_log_level(logging.WARNING)
