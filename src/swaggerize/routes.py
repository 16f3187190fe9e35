# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Routes and the model documented by them.

A route handler names the model it returns with an ``@model`` line in its
docstring, or in the docstring of the class it belongs to::

    class PostController:
        \"\"\"
        @model blog.models.Post
        \"\"\"

        def show(self, post_id: int):
            \"\"\"Show one post.\"\"\"

Handlers are given as callables or as ``"package.module:Class.method"``
strings.
"""

from __future__ import annotations

import importlib
import inspect
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swaggerize.config import GeneratorSettings, get_settings
from swaggerize.definitions.errors import ConfigurationError, TypeMismatchError
from swaggerize.models.base import Model

MODEL_ANNOTATION: Final = "@model"


class Route(BaseModel):
    """An HTTP route as seen by the generators."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    uri: str
    methods: list[str] = Field(default_factory=lambda: ["get"])
    action: Any = None

    @field_validator("methods")
    @classmethod
    def lower_methods(cls, v: list[str]) -> list[str]:
        return [method.lower() for method in v]


def allows_definitions(route: Route, settings: GeneratorSettings | None = None) -> bool:
    """Whether definitions may be generated for ``route``.

    Every method of the route, ignoring the implicit ones such as ``head``,
    must be one of the configured definition methods.
    """
    settings = settings or get_settings()
    return all(
        method in settings.definition_methods
        for method in route.methods
        if method not in settings.ignored_methods
    )


def get_annotation(annotation: str, docstring: str | None) -> str | None:
    """Return the value of the first ``annotation`` line of a docstring."""
    for line in (docstring or "").splitlines():
        line = line.strip()
        if line.startswith(annotation):
            value = line[len(annotation):].strip()
            return value or None
    return None


def import_object(path: str) -> Any:
    """Import ``package.module:Attr.attr`` or ``package.module.Attr``.

    Raises:
        ConfigurationError: If the path cannot be imported
    """
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")

    if not module_name or not attr_path:
        raise ConfigurationError(f"Invalid import path: {path!r}", path=path)

    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError) as exc:
        raise ConfigurationError(
            f"Cannot import {path!r}: {exc}", path=path
        ) from exc
    return target


class ModelResolver:
    """Resolves the model class documented by a route's handler."""

    def resolve(self, route: Route) -> type[Model] | None:
        """Return the route's model class, or None if none is annotated.

        Raises:
            ConfigurationError: If the annotated path cannot be imported
            TypeMismatchError: If the annotated object is not a Model subclass
        """
        if route.action is None:
            return None

        handler, owner = self.resolve_action(route.action)
        reference = get_annotation(MODEL_ANNOTATION, inspect.getdoc(handler))
        if reference is None and owner is not None:
            reference = get_annotation(MODEL_ANNOTATION, inspect.getdoc(owner))
        if reference is None:
            return None

        model = import_object(reference)
        if not (isinstance(model, type) and issubclass(model, Model)):
            raise TypeMismatchError(
                reference, f"{Model.__module__}.{Model.__qualname__}"
            )
        return model

    def resolve_action(self, action: Any) -> tuple[Any, type | None]:
        """Return the handler callable and the class it is defined on."""
        if isinstance(action, str):
            module_name, _, attr_path = action.partition(":")
            handler = import_object(action)
            owner_path = attr_path.rpartition(".")[0]
            owner = import_object(f"{module_name}:{owner_path}") if owner_path else None
            return handler, owner if isinstance(owner, type) else None

        bound_to = getattr(action, "__self__", None)
        if bound_to is not None:
            return action, bound_to if isinstance(bound_to, type) else type(bound_to)

        qualname = getattr(action, "__qualname__", "")
        owner_path = qualname.rpartition(".")[0]
        if owner_path and "<locals>" not in owner_path:
            module = inspect.getmodule(action)
            owner: Any = module
            for attr in owner_path.split("."):
                owner = getattr(owner, attr, None)
            if isinstance(owner, type):
                return action, owner
        return action, None
