# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""Unified error registry implementation for swaggerize."""

import threading
from typing import Any


class ErrorRegistry:
    """Singleton registry for all error codes and categories in swaggerize."""

    _instance = None
    _lock = threading.RLock()

    def __new__(cls) -> "ErrorRegistry":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def register_category(self, name: str, parent: Any = None) -> Any:
        """Register a category in the registry.

        Args:
            name: The category name
            parent: Optional parent category

        Returns:
            The registered ErrorCategory
        """
        with self._lock:
            if name in self._categories:
                return self._categories[name]

            from swaggerize.errors.base import ErrorCategory

            category = ErrorCategory(name, parent)
            self._categories[name] = category
            return category

    def register_code(self, code: str, category_name: str) -> Any:
        """Register a code under a category, creating the category if needed.

        Args:
            code: The error code
            category_name: The category name

        Returns:
            The registered ErrorCode
        """
        with self._lock:
            if code in self._codes:
                return self._codes[code]

            category = self.get_category(category_name)

            from swaggerize.errors.base import ErrorCode

            error_code = ErrorCode(code, category)
            self._codes[code] = error_code
            return error_code

    def get_category(self, name: str, parent: Any = None) -> Any:
        """Get or create a category."""
        with self._lock:
            if name in self._categories:
                return self._categories[name]
            return self.register_category(name, parent)

    def get_code(self, code: str, category_name: str = "INTERNAL") -> Any:
        """Get or create an error code."""
        with self._lock:
            if code in self._codes:
                return self._codes[code]
            return self.register_code(code, category_name)

    def lookup_code(self, code: str) -> Any:
        """Look up an error code without creating it if missing.

        Returns:
            The ErrorCode or None if not found
        """
        return self._codes.get(code)

    def lookup_category(self, name: str) -> Any:
        """Look up a category without creating it if missing."""
        return self._categories.get(name)

    def get_all_codes(self) -> list[Any]:
        """Return every registered error code."""
        return list(self._codes.values())

    def get_all_categories(self) -> list[Any]:
        """Return every registered category."""
        return list(self._categories.values())


# Create a single instance for use throughout the package
registry = ErrorRegistry()
