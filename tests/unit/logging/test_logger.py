"""Tests for the structured formatter and logger."""

from __future__ import annotations

import json
import logging

import pytest

from swaggerize.logging import (
    LoggingError,
    LoggingSettings,
    LogLevel,
    StructuredFormatter,
    SwaggerizeLogger,
    get_logger,
)


def make_record(msg="msg", context=None):
    record = logging.LogRecord(
        name="swaggerize.test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    if context is not None:
        record.swaggerize_context = context
    return record


def test_structured_formatter_json():
    fmt = StructuredFormatter(json_format=True, include_timestamp=False, include_level=True)
    formatted = fmt.format(make_record(context={"definition": "User"}))
    data = json.loads(formatted)
    assert data["message"] == "msg"
    assert data["level"] == "INFO"
    assert data["definition"] == "User"
    assert "timestamp" not in data


def test_structured_formatter_plain():
    fmt = StructuredFormatter(json_format=False, include_timestamp=False, include_level=True)
    formatted = fmt.format(make_record("plain", {"definition": "User", "reason": "no factory"}))
    assert formatted == 'plain [INFO] definition=User reason="no factory"'


def test_level_conversion():
    assert LogLevel.from_string("debug") is LogLevel.DEBUG
    assert LogLevel.WARNING.to_stdlib_level() == logging.WARNING
    assert LogLevel.from_string(" warning ") is LogLevel.WARNING
    assert LogLevel.from_string(LogLevel.ERROR) is LogLevel.ERROR
    with pytest.raises(ValueError):
        LogLevel.from_string("loud")


class TestSwaggerizeLogger:
    @pytest.fixture
    def settings(self):
        return LoggingSettings(console_enabled=False, level="DEBUG")

    def test_context_reaches_records(self, settings) -> None:
        logger = SwaggerizeLogger("swaggerize.tests.context", settings=settings)
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        logger._logger.addHandler(handler)

        bound = logger.bind(route="/posts")
        bound._logger.addHandler(handler)
        with bound.context(definition="Post"):
            bound.debug("Generated definition", properties=3)

        assert records[-1].getMessage() == "Generated definition"
        assert records[-1].swaggerize_context == {
            "route": "/posts",
            "definition": "Post",
            "properties": 3,
        }

    def test_level_filters_records(self, settings) -> None:
        logger = SwaggerizeLogger("swaggerize.tests.level", settings=settings)
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        logger._logger.addHandler(handler)

        logger.set_level(LogLevel.WARNING)
        logger.info("hidden")
        logger.warning("shown")
        assert [r.getMessage() for r in records] == ["shown"]

    def test_file_logging_requires_path(self) -> None:
        settings = LoggingSettings(console_enabled=False, file_enabled=True)
        with pytest.raises(LoggingError):
            SwaggerizeLogger("swaggerize.tests.file", settings=settings)

    def test_file_logging(self, tmp_path) -> None:
        path = tmp_path / "swaggerize.log"
        settings = LoggingSettings(
            console_enabled=False,
            file_enabled=True,
            file_path=str(path),
            include_timestamp=False,
        )
        logger = SwaggerizeLogger("swaggerize.tests.file_ok", settings=settings)
        logger.info("Skipping definitions for route", uri="/posts")
        for handler in list(logger._logger.handlers):
            handler.close()
            logger._logger.removeHandler(handler)
        assert "Skipping definitions for route [INFO] uri=/posts" in path.read_text()


def test_get_logger_uses_environment(monkeypatch):
    monkeypatch.setenv("SWAGGERIZE_LOGGING_LEVEL", "ERROR")
    logger = get_logger("swaggerize.tests.env")
    assert logger._logger.level == logging.ERROR
