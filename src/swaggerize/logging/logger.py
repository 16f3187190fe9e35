# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Logger implementation for swaggerize.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
Generation is synchronous, so every logging call is synchronous as well.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from swaggerize.logging.config import LoggingSettings
from swaggerize.logging.errors import LOGGING_CONFIGURATION, LoggingError
from swaggerize.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

# Attribute used to carry structured context on a LogRecord
CONTEXT_ATTR = "swaggerize_context"


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTR, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        """Format a log record as JSON."""
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **extra,
        }

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, cls=SwaggerizeJsonEncoder)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        """Format a log record as plain text, appending key=value context."""
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, BaseException):
            return str(value)
        try:
            return json.dumps(value, cls=SwaggerizeJsonEncoder)
        except (TypeError, ValueError):
            return str(value)


class SwaggerizeJsonEncoder(json.JSONEncoder):
    """JSON encoder that falls back to strings for unserializable objects."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if hasattr(obj, "model_dump"):
            return obj.model_dump()
        return str(obj)


class SwaggerizeLogger:
    """Default logger for swaggerize.

    Wraps a standard library logger and attaches bound and scoped context to
    every record it emits.
    """

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            level: Log level override (defaults to the settings level)
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._configure(level or self._settings.level)

        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

    def _configure(self, level: str | LogLevel) -> None:
        """Configure handlers and level of the underlying logger.

        Raises:
            LoggingError: If file logging is enabled without a file path
        """
        self._logger.setLevel(LogLevel.from_string(level).to_stdlib_level())

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stderr)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled:
            if not self._settings.file_path:
                raise LoggingError(
                    "File logging is enabled but no file path is configured",
                    code=LOGGING_CONFIGURATION,
                    logger_name=self.name,
                )
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        """Log a message with the given level and merged context."""
        if not self._logger.isEnabledFor(level):
            return

        exc_info = kwargs.pop("exc_info", None)
        combined_context = {**self._bound_context, **self._context, **kwargs}
        self._logger.log(
            level, msg, exc_info=exc_info, extra={CONTEXT_ATTR: combined_context}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log(logging.CRITICAL, message, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logger's level."""
        self._logger.setLevel(level.to_stdlib_level())

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None, None, None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> SwaggerizeLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        logger = SwaggerizeLogger(
            self.name,
            level=logging.getLevelName(self._logger.level),
            settings=self._settings,
        )
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger


def get_logger(name: str, level: LogLevel | None = None) -> SwaggerizeLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    settings = LoggingSettings.load()
    logger = SwaggerizeLogger(name, settings=settings)

    if level is not None:
        logger.set_level(level)

    return logger
