# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Relation objects returned by model relation accessors.

A relation accessor is a plain zero-argument method on a model that returns
one of these objects::

    class Post(Model):
        ...

        def comments(self) -> HasMany:
            return self.has_many(Comment)

The concrete class name carries the relation semantics: ``Has*`` relations
point at children, ``Belongs*`` relations at parents, and any name containing
``Many`` is a to-many relation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RelationLike(Protocol):
    """Capability of anything that can be documented as a relation."""

    @property
    def relation_type(self) -> str:
        ...

    def get_related(self) -> Any:
        ...


class Relation:
    """Base class for all relations between two models."""

    def __init__(
        self,
        parent: Any,
        related: Any,
        foreign_key: str | None = None,
        local_key: str | None = None,
    ) -> None:
        """Initialize a relation.

        Args:
            parent: The model instance owning the accessor
            related: The related model class or instance
            foreign_key: Optional foreign key column name
            local_key: Optional local key column name
        """
        self.parent = parent
        self.related = related
        self.foreign_key = foreign_key
        self.local_key = local_key
        self._related_instance: Any = None

    @property
    def relation_type(self) -> str:
        return type(self).__name__

    def get_parent(self) -> Any:
        return self.parent

    def get_related(self) -> Any:
        """Return an instance of the related model.

        Related classes are instantiated without arguments on first access.
        """
        if self._related_instance is None:
            if isinstance(self.related, type):
                self._related_instance = self.related()
            else:
                self._related_instance = self.related
        return self._related_instance

    def __repr__(self) -> str:
        related = self.related if isinstance(self.related, type) else type(self.related)
        return f"{self.relation_type}({type(self.parent).__name__} -> {related.__name__})"


class HasOne(Relation):
    pass


class HasMany(Relation):
    pass


class HasOneThrough(Relation):
    pass


class HasManyThrough(Relation):
    pass


class BelongsTo(Relation):
    pass


class BelongsToMany(Relation):
    pass


class MorphOne(Relation):
    pass


class MorphMany(Relation):
    pass


class MorphTo(Relation):
    pass
