# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""Generator settings loading and caching.

Settings are read from environment variables with the ``SWAGGERIZE_`` prefix.
List values are given as JSON, e.g. ``SWAGGERIZE_DEFINITION_METHODS='["get"]'``.
"""

from __future__ import annotations

import threading
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SETTINGS_CACHE: dict[type, Any] = {}
_SETTINGS_CACHE_LOCK = threading.Lock()


class GeneratorSettings(BaseSettings):
    """Settings shared by the definition and body parameter generators."""

    model_config = SettingsConfigDict(
        env_prefix="SWAGGERIZE_",
        extra="ignore",
        case_sensitive=False,
    )

    definition_methods: list[str] = Field(
        default_factory=lambda: ["get", "post"],
        description="HTTP methods a route may use for definitions to be generated",
    )
    ignored_methods: list[str] = Field(
        default_factory=lambda: ["head"],
        description="Implicit HTTP methods ignored by the definition gate",
    )
    definitions_prefix: str = Field(
        default="#/definitions/", description="Prefix of every definition $ref"
    )
    body_param_name: str = Field(default="body", description="Body parameter name")
    body_param_description: str = Field(
        default="", description="Body parameter description"
    )
    generate_examples: bool = Field(
        default=True, description="Attach example values from fake instances"
    )

    @field_validator("definition_methods", "ignored_methods")
    @classmethod
    def lower_methods(cls, v: list[str]) -> list[str]:
        """HTTP methods are compared lower-cased."""
        return [method.lower() for method in v]


def get_settings(settings_class: type[GeneratorSettings] = GeneratorSettings) -> GeneratorSettings:
    """Get settings for the generators (with global cache).

    Args:
        settings_class: The settings class to load

    Returns:
        The cached settings instance
    """
    if settings_class in _SETTINGS_CACHE:
        return _SETTINGS_CACHE[settings_class]

    with _SETTINGS_CACHE_LOCK:
        if settings_class not in _SETTINGS_CACHE:
            _SETTINGS_CACHE[settings_class] = settings_class()
        return _SETTINGS_CACHE[settings_class]


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    This function is primarily used for testing and should not normally
    be needed in application code.
    """
    _SETTINGS_CACHE.clear()
