# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Fake instances used to attach example values to definitions.

Example values are best effort. A provider signals that it cannot build an
instance by raising ``ProviderUnavailable``; the definition builder then
leaves the ``example`` keys out.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from swaggerize.definitions.errors import ProviderUnavailable
from swaggerize.definitions.introspection import model_class


class FakeInstanceProvider(Protocol):
    """
    Protocol for producing a populated instance of a model.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def materialize(self, model: Any) -> Any:
        """
        Return a populated instance of the model's class.

        Raises:
            ProviderUnavailable: If no instance can be produced
        """
        ...


class FactoryRegistry:
    """Provider backed by one registered factory per model class.

    Example:
        factories = FactoryRegistry()
        factories.register(User, lambda: User(id=1, email="ada@example.com"))
    """

    def __init__(self) -> None:
        self._factories: dict[type, Callable[[], Any]] = {}

    def register(self, cls: type, factory: Callable[[], Any]) -> None:
        self._factories[cls] = factory

    def factory(self, cls: type) -> Callable[[Callable[[], Any]], Callable[[], Any]]:
        """Decorator form of ``register``."""

        def decorator(func: Callable[[], Any]) -> Callable[[], Any]:
            self.register(cls, func)
            return func

        return decorator

    def __contains__(self, cls: object) -> bool:
        return cls in self._factories

    def materialize(self, model: Any) -> Any:
        cls = model_class(model)
        factory = self._factories.get(cls)
        if factory is None:
            raise ProviderUnavailable(cls.__name__, reason="no factory registered")
        try:
            return factory()
        except Exception as exc:
            raise ProviderUnavailable(cls.__name__, reason=str(exc)) from exc
