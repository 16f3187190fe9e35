# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Model base class and relation objects.
"""

from swaggerize.models.base import Model
from swaggerize.models.relations import (
    BelongsTo,
    BelongsToMany,
    HasMany,
    HasManyThrough,
    HasOne,
    HasOneThrough,
    MorphMany,
    MorphOne,
    MorphTo,
    Relation,
    RelationLike,
)

__all__ = [
    "Model",
    "Relation",
    "RelationLike",
    "HasOne",
    "HasMany",
    "HasOneThrough",
    "HasManyThrough",
    "BelongsTo",
    "BelongsToMany",
    "MorphOne",
    "MorphMany",
    "MorphTo",
]
