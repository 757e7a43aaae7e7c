from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from referee.core import logging_setup


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_includes_extra_fields() -> None:
    formatter = logging_setup.JsonFormatter(service="referee")
    record = _record()
    record.category = "api"
    payload = json.loads(formatter.format(record))

    assert payload["message"] == "hello"
    assert payload["category"] == "api"
    assert payload["service"] == "referee"
    assert payload["timestamp"].endswith("Z")
    assert "lineno" not in payload


def test_extra_fields_skip_standard_attributes() -> None:
    record = _record()
    record.workflow = "compare_candidates"
    record._private = "hidden"

    assert logging_setup.extra_fields(record) == {"workflow": "compare_candidates"}


@pytest.fixture()
def fresh_logging(monkeypatch: pytest.MonkeyPatch):
    stream = StringIO()

    class StubStreamHandler(logging.StreamHandler):
        def __init__(self) -> None:
            super().__init__(stream=stream)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    monkeypatch.setattr(root_logger, "handlers", list(root_logger.handlers))
    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)
    monkeypatch.setattr(logging, "StreamHandler", StubStreamHandler)
    yield stream
    root_logger.setLevel(original_level)


def test_configure_logging_emits_json(fresh_logging: StringIO) -> None:
    logging_setup.configure_logging({"level": "DEBUG", "service": "referee"})

    logging.getLogger("sample").debug("comparison_completed", extra={"candidates": 3})

    payload = json.loads(fresh_logging.getvalue().strip())
    assert payload["candidates"] == 3
    assert payload["service"] == "referee"
    assert logging_setup._handler is not None


def test_configure_logging_plain_format(fresh_logging: StringIO) -> None:
    logging_setup.configure_logging({"level": "INFO", "format": "plain"})

    logging.getLogger("sample").info("plain message")

    output = fresh_logging.getvalue()
    assert "INFO sample: plain message" in output


def test_configure_logging_runs_once(fresh_logging: StringIO) -> None:
    logging_setup.configure_logging({"level": "ERROR"})
    first_handler = logging_setup._handler

    logging_setup.configure_logging({"level": "DEBUG"})

    assert logging_setup._handler is first_handler
    assert logging.getLogger().level == logging.ERROR


def test_set_runtime_level_updates_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    handler = logging.StreamHandler(stream=StringIO())
    root_logger = logging.getLogger()

    original_level = root_logger.level
    monkeypatch.setattr(logging_setup, "_handler", handler, raising=False)

    try:
        logging_setup.set_runtime_level("warning")
        assert handler.level == logging.WARNING
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.setLevel(original_level)

    with pytest.raises(ValueError):
        logging_setup.set_runtime_level("not-a-level")
