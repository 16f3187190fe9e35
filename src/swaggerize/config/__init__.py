# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""Configuration management for swaggerize."""

from swaggerize.config.settings import (
    GeneratorSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "GeneratorSettings",
    "clear_settings_cache",
    "get_settings",
]
