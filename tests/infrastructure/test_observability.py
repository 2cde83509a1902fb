"""Observability tests — JSON log formatting and setup.

Tests cover:
    - JSONFormatter emits the base fields
    - Calendar extras surface only when present
    - setup_logging installs the requested formatter
    - Omitted level/format fall back to CHERRY_TIME_LOG_LEVEL / CHERRY_TIME_LOG_FORMAT
"""

import json
import logging

import pytest

from cherry_time.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "cherry_time.test", logging.INFO, __file__, 1, "week %s", ("12",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "cherry_time.test"
    assert payload["message"] == "week 12"
    assert "timestamp" in payload
    assert "week" not in payload


def test_json_formatter_surfaces_calendar_extras():
    payload = json.loads(JSONFormatter().format(_record(week=12, year=2024, zone="UTC")))
    assert payload["week"] == 12
    assert payload["year"] == 2024
    assert payload["zone"] == "UTC"


@pytest.fixture
def restore_root_logger():
    handlers, level = list(logging.root.handlers), logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


@pytest.mark.parametrize("fmt,formatter_type", [("json", JSONFormatter), ("text", logging.Formatter)])
def test_setup_logging_installs_formatter(restore_root_logger, fmt, formatter_type):
    handler = setup_logging("debug", fmt)
    assert handler in logging.root.handlers
    assert type(handler.formatter) is formatter_type
    assert logging.root.level == logging.DEBUG


def test_setup_logging_replaces_its_own_handler(restore_root_logger):
    first = setup_logging("info", "json")
    second = setup_logging("info", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert sum(1 for h in logging.root.handlers if h.get_name() == "cherry_time") == 1


def test_setup_logging_defaults_come_from_settings(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CHERRY_TIME_LOG_LEVEL", "warning")
    monkeypatch.setenv("CHERRY_TIME_LOG_FORMAT", "text")
    handler = setup_logging()
    assert type(handler.formatter) is logging.Formatter
    assert logging.root.level == logging.WARNING


def test_explicit_arguments_override_settings(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CHERRY_TIME_LOG_FORMAT", "text")
    handler = setup_logging(fmt="json")
    assert type(handler.formatter) is JSONFormatter
