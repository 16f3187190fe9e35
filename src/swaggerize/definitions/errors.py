# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Errors raised while generating definitions.

Everything here is fatal for the generation call except
``ProviderUnavailable``, which only suppresses example values.
"""

from __future__ import annotations

from typing import Any, Final

from swaggerize.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, SwaggerizeError

DEFINITIONS = ErrorCategory.get_or_create("DEFINITIONS")
DEFINITIONS_ERROR: Final = ErrorCode.get_or_create("DEFINITIONS_ERROR", DEFINITIONS)
DEFINITIONS_CONFIGURATION_ERROR: Final = ErrorCode.get_or_create(
    "DEFINITIONS_CONFIGURATION_ERROR", DEFINITIONS
)
DEFINITIONS_TYPE_MISMATCH: Final = ErrorCode.get_or_create(
    "DEFINITIONS_TYPE_MISMATCH", DEFINITIONS
)
DEFINITIONS_PROVIDER_UNAVAILABLE: Final = ErrorCode.get_or_create(
    "DEFINITIONS_PROVIDER_UNAVAILABLE", DEFINITIONS
)
DEFINITIONS_ACCESSOR_INVOCATION_ERROR: Final = ErrorCode.get_or_create(
    "DEFINITIONS_ACCESSOR_INVOCATION_ERROR", DEFINITIONS
)


class DefinitionError(SwaggerizeError):
    """Base class for all definition generation errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = DEFINITIONS_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class ConfigurationError(DefinitionError):
    """Raised when a collaborator returns a malformed result."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        code: ErrorCode = DEFINITIONS_CONFIGURATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if model:
            kwargs["model"] = model
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class TypeMismatchError(DefinitionError):
    """Raised when a resolved model reference is not a model class."""

    def __init__(
        self,
        reference: str,
        expected: str,
        message: str | None = None,
        code: ErrorCode = DEFINITIONS_TYPE_MISMATCH,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        message = message or f"The @model {reference} must be a subclass of [{expected}]"
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            reference=reference,
            expected=expected,
            **kwargs,
        )


class ProviderUnavailable(DefinitionError):
    """Raised when no fake instance can be produced for a model."""

    def __init__(
        self,
        model: str,
        reason: str | None = None,
        message: str | None = None,
        code: ErrorCode = DEFINITIONS_PROVIDER_UNAVAILABLE,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        message = message or f"No fake instance available for {model}"
        if reason:
            message = f"{message}: {reason}"
            kwargs["reason"] = reason
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            model=model,
            **kwargs,
        )


class AccessorInvocationError(DefinitionError):
    """Raised when calling a candidate relation accessor fails."""

    def __init__(
        self,
        model: str,
        accessor: str,
        message: str | None = None,
        code: ErrorCode = DEFINITIONS_ACCESSOR_INVOCATION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        message = message or f"Calling {model}.{accessor}() failed"
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            model=model,
            accessor=accessor,
            **kwargs,
        )
