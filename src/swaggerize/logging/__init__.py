# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize

"""
Public API for the swaggerize logging system.
"""

from __future__ import annotations

from swaggerize.logging.config import LoggingSettings
from swaggerize.logging.errors import LoggingError
from swaggerize.logging.level import LogLevel
from swaggerize.logging.logger import (
    StructuredFormatter,
    SwaggerizeLogger,
    get_logger,
)

__all__ = [
    "LogLevel",
    # Implementation
    "StructuredFormatter",
    "SwaggerizeLogger",
    "LoggingError",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
