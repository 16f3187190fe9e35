# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Schema introspection for models.

The definition builder never reads a model directly; it asks a
``SchemaIntrospector`` for columns, casts and serialization hints. The
default implementation reads SQLAlchemy mapper metadata plus the
``__hidden__``, ``__appends__``, ``__casts__`` and ``__dates__`` class
attributes of ``swaggerize.models.Model``.
"""

from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import types as sa_types
from sqlalchemy.exc import NoInspectionAvailable

from swaggerize.definitions.errors import ConfigurationError

# Checked in order; Boolean before Integer, Float before Numeric
_CAST_TYPES: list[tuple[type[sa_types.TypeEngine[Any]], str]] = [
    (sa_types.Boolean, "boolean"),
    (sa_types.Integer, "int"),
    (sa_types.Float, "float"),
    (sa_types.Numeric, "float"),
    (sa_types.JSON, "array"),
    (sa_types.String, "string"),
]

_DATE_TYPES = (sa_types.DateTime, sa_types.Date)


class SchemaIntrospector(Protocol):
    """
    Protocol for reading the documented shape of a model.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def list_columns(self, model: Any) -> list[str]:
        ...

    def list_hidden(self, model: Any) -> set[str]:
        ...

    def list_computed(self, model: Any) -> list[str]:
        ...

    def list_date_columns(self, model: Any) -> set[str]:
        ...

    def list_casts(self, model: Any) -> dict[str, str]:
        ...

    def display_name(self, model: Any) -> str:
        ...


def model_class(model: Any) -> type:
    return model if isinstance(model, type) else type(model)


class SQLAlchemyIntrospector:
    """Introspector backed by SQLAlchemy mapper metadata."""

    def _column_attrs(self, model: Any) -> list[Any]:
        cls = model_class(model)
        try:
            mapper = sa_inspect(cls)
        except NoInspectionAvailable as exc:
            raise ConfigurationError(
                f"{cls.__name__} is not a mapped SQLAlchemy model",
                model=cls.__name__,
            ) from exc
        return list(mapper.column_attrs)

    def list_columns(self, model: Any) -> list[str]:
        return [attr.key for attr in self._column_attrs(model)]

    def list_hidden(self, model: Any) -> set[str]:
        return set(getattr(model_class(model), "__hidden__", ()) or ())

    def list_computed(self, model: Any) -> list[str]:
        """Return the appended field names.

        Raises:
            ConfigurationError: If ``__appends__`` is not a list or tuple
        """
        cls = model_class(model)
        appends = getattr(cls, "__appends__", ())
        if not isinstance(appends, (list, tuple)):
            raise ConfigurationError(
                f"{cls.__name__}.__appends__ must be a list, "
                f"got {type(appends).__name__}",
                model=cls.__name__,
            )
        return list(appends)

    def list_date_columns(self, model: Any) -> set[str]:
        dates = set(getattr(model_class(model), "__dates__", ()) or ())
        for attr in self._column_attrs(model):
            if isinstance(attr.columns[0].type, _DATE_TYPES):
                dates.add(attr.key)
        return dates

    def list_casts(self, model: Any) -> dict[str, str]:
        """Return column -> cast name, explicit ``__casts__`` taking precedence."""
        casts: dict[str, str] = {}
        for attr in self._column_attrs(model):
            column_type = attr.columns[0].type
            for type_class, cast in _CAST_TYPES:
                if isinstance(column_type, type_class):
                    casts[attr.key] = cast
                    break
        casts.update(getattr(model_class(model), "__casts__", None) or {})
        return casts

    def display_name(self, model: Any) -> str:
        return model_class(model).__name__
