"""Tests for the system logger and log formatters."""

import json
import logging

from cancan.telemetry import configure_system_logger_file, get_system_logger
from cancan.telemetry.system_logger import ConsoleFormatter
from cancan.utils.logging.iso_formatter import ISO8601Formatter


def _record(msg):
    return logging.LogRecord("cancan.system", logging.WARNING, __file__, 1, msg, None, None)


class TestFormatters:
    """Tests for ConsoleFormatter and ISO8601Formatter."""

    def test_console_formatter_uses_message_field(self):
        record = _record({"event": "x", "message": "Registry reset"})

        assert ConsoleFormatter().format(record) == "WARNING: Registry reset"

    def test_console_formatter_falls_back_to_event(self):
        assert ConsoleFormatter().format(_record({"event": "x"})) == "WARNING: x"

    def test_iso_formatter_dict_message(self):
        """Given a dict message, fields are kept and time is prepended."""
        entry = json.loads(ISO8601Formatter().format(_record({"event": "x", "count": 2})))

        assert list(entry)[0] == "time"
        assert entry["event"] == "x"
        assert entry["count"] == 2
        assert entry["level"] == "WARNING"

    def test_iso_formatter_plain_message(self):
        entry = json.loads(ISO8601Formatter().format(_record("plain text")))

        assert entry["message"] == "plain text"

    def test_iso_formatter_serializes_arbitrary_values(self):
        """Given a non-JSON value, falls back to repr()."""
        entry = json.loads(ISO8601Formatter().format(_record({"value": object})))

        assert entry["value"] == repr(object)


class TestSystemLogger:
    """Tests for the singleton system logger."""

    def test_singleton(self):
        assert get_system_logger() is get_system_logger()

    def test_does_not_propagate(self):
        assert get_system_logger().propagate is False

    def test_file_handler(self, tmp_path):
        """Given a log file, warnings are written as JSONL."""
        log_path = tmp_path / "system.jsonl"
        logger = get_system_logger()
        configure_system_logger_file(log_path)

        try:
            logger.warning({"event": "test_event", "message": "hello"})
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    logger.removeHandler(handler)

        entry = json.loads(log_path.read_text(encoding="utf-8").splitlines()[0])
        assert entry["event"] == "test_event"
