# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Declarative base for documented models.

Models are ordinary SQLAlchemy 2 mapped classes. Serialization hints live in
class attributes::

    class User(Model):
        __tablename__ = "users"
        __hidden__ = ("password",)
        __appends__ = ["full_name"]
        __casts__ = {"settings": "array"}

        id: Mapped[int] = mapped_column(primary_key=True)
        password: Mapped[str]

        def posts(self) -> HasMany:
            return self.has_many(Post)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from sqlalchemy.orm import DeclarativeBase

from swaggerize.models.relations import (
    BelongsTo,
    BelongsToMany,
    HasMany,
    HasManyThrough,
    HasOne,
    HasOneThrough,
    MorphMany,
    MorphOne,
)


class Model(DeclarativeBase):
    """Base class of every model that can be turned into a definition."""

    __hidden__: ClassVar[Iterable[str]] = ()
    __appends__: ClassVar[Any] = ()
    __casts__: ClassVar[Mapping[str, str]] = {}
    __dates__: ClassVar[Iterable[str]] = ()

    def has_one(self, related: Any, foreign_key: str | None = None) -> HasOne:
        return HasOne(self, related, foreign_key=foreign_key)

    def has_many(self, related: Any, foreign_key: str | None = None) -> HasMany:
        return HasMany(self, related, foreign_key=foreign_key)

    def has_one_through(self, related: Any) -> HasOneThrough:
        return HasOneThrough(self, related)

    def has_many_through(self, related: Any) -> HasManyThrough:
        return HasManyThrough(self, related)

    def belongs_to(self, related: Any, foreign_key: str | None = None) -> BelongsTo:
        return BelongsTo(self, related, foreign_key=foreign_key)

    def belongs_to_many(self, related: Any) -> BelongsToMany:
        return BelongsToMany(self, related)

    def morph_one(self, related: Any) -> MorphOne:
        return MorphOne(self, related)

    def morph_many(self, related: Any) -> MorphMany:
        return MorphMany(self, related)
