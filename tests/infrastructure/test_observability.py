"""Structured Logging: tests for the JSON formatter and logging setup.

Tests cover:
    - JSONFormatter emits timestamp/level/logger/message
    - Known extra fields are surfaced, unknown ones dropped
    - Exceptions rendered into the "exception" field
    - setup_logging installs a handler and level from arguments or settings
    - Repeated setup_logging calls replace the handler instead of stacking
"""

import json
import logging
import sys

import pytest

from tazkiyatech_utils.config import Settings
from tazkiyatech_utils.core.errors import NoValuePresentError
from tazkiyatech_utils.core.optional import Optional
from tazkiyatech_utils.infrastructure.observability import (
    JSONFormatter,
    setup_logging,
    setup_logging_from_settings,
)


def _record(msg="hello", exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "tazkiyatech_utils.test", logging.INFO, __file__, 1, msg, None, exc_info,
    )
    record.__dict__.update(extra)
    return record


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tazkiyatech_utils.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras():
    payload = json.loads(JSONFormatter().format(
        _record(operation="px_to_dp", density=2.0, unrelated="x"),
    ))
    assert payload["operation"] == "px_to_dp"
    assert payload["density"] == 2.0
    assert "unrelated" not in payload


def test_json_formatter_renders_exception():
    try:
        Optional.empty().get()
    except NoValuePresentError:
        exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(
        _record(exc_info=exc_info, error_code="NO_VALUE_PRESENT"),
    ))
    assert payload["error_code"] == "NO_VALUE_PRESENT"
    assert "NoValuePresentError" in payload["exception"]


def test_setup_logging_json(restore_root_logger):
    handler = setup_logging("debug", "json")
    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG


def test_setup_logging_text(restore_root_logger):
    handler = setup_logging("WARNING", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


def test_setup_logging_unknown_level_defaults_to_info(restore_root_logger):
    setup_logging("verbose")
    assert logging.root.level == logging.INFO


def test_setup_logging_from_settings(restore_root_logger):
    handler = setup_logging_from_settings(Settings(log_level="ERROR", log_format="text"))
    assert logging.root.level == logging.ERROR
    assert not isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("TAZKIYATECH_LOG_LEVEL", "WARNING")
    handler = setup_logging_from_settings()
    assert logging.root.level == logging.WARNING
    assert isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_twice_keeps_a_single_library_handler(restore_root_logger):
    first = setup_logging("INFO", "json")
    second = setup_logging("DEBUG", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert logging.root.level == logging.DEBUG


def test_setup_logging_leaves_host_handlers_alone(restore_root_logger):
    host_handler = logging.NullHandler()
    logging.root.addHandler(host_handler)
    setup_logging()
    setup_logging()
    assert host_handler in logging.root.handlers
