# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Relation discovery for models.

Nothing in a relation accessor's signature says it returns a relation, so
discovery probes for it: every zero-argument method declared directly on the
model's class is called once and its result is kept if it satisfies the
``RelationLike`` capability.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from swaggerize.definitions.errors import AccessorInvocationError
from swaggerize.logging import SwaggerizeLogger, get_logger
from swaggerize.models.relations import RelationLike

CHILD_PREFIX: Final = "Has"
PARENT_PREFIX: Final = "Belongs"
MANY_MARKER: Final = "Many"


class Heritage(str, Enum):
    """Which relation families discovery should return."""

    ALL = "all"
    CHILDREN = "children"
    PARENTS = "parents"

    @classmethod
    def coerce(cls, value: Heritage | str) -> Heritage:
        """Coerce a string to a Heritage, unknown values meaning ALL."""
        if isinstance(value, Heritage):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


class RelationKind(str, Enum):
    TO_ONE = "to_one"
    TO_MANY = "to_many"


class RelationFamily(str, Enum):
    PARENT = "parent"
    CHILD = "child"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class RelationEdge:
    """A relation accessor found on a model."""

    name: str
    relation: str
    related_model: Any

    @property
    def kind(self) -> RelationKind:
        if MANY_MARKER in self.relation:
            return RelationKind.TO_MANY
        return RelationKind.TO_ONE

    @property
    def family(self) -> RelationFamily:
        return classify_family(self.relation)


def classify_family(relation_type: str) -> RelationFamily:
    if relation_type.startswith(CHILD_PREFIX):
        return RelationFamily.CHILD
    if relation_type.startswith(PARENT_PREFIX):
        return RelationFamily.PARENT
    return RelationFamily.UNCLASSIFIED


_HERITAGE_FAMILIES: Final = {
    Heritage.CHILDREN: RelationFamily.CHILD,
    Heritage.PARENTS: RelationFamily.PARENT,
}


class RelationDiscoverer:
    """Finds the relation accessors of a model instance."""

    def __init__(self, logger: SwaggerizeLogger | None = None) -> None:
        self.logger = logger or get_logger(__name__)

    def get_all_relations(
        self, model: Any, heritage: Heritage | str = Heritage.ALL
    ) -> list[RelationEdge]:
        """Identify all relations of a model.

        Args:
            model: Model instance to probe
            heritage: Restrict results to child or parent relations

        Returns:
            One edge per accessor returning a relation of the wanted family

        Raises:
            AccessorInvocationError: If a candidate accessor raises
        """
        wanted = _HERITAGE_FAMILIES.get(Heritage.coerce(heritage))
        edges: list[RelationEdge] = []

        for name in self.candidate_accessors(type(model)):
            try:
                # calling is the only way to learn the return type, so only once
                result = getattr(model, name)()
            except Exception as exc:
                raise AccessorInvocationError(
                    type(model).__name__, name, error=str(exc)
                ) from exc

            if not isinstance(result, RelationLike):
                continue

            relation_type = result.relation_type
            if wanted is not None and classify_family(relation_type) is not wanted:
                continue

            edge = RelationEdge(
                name=name,
                relation=relation_type,
                related_model=result.get_related(),
            )
            self.logger.debug(
                "Discovered relation",
                model=type(model).__name__,
                accessor=name,
                relation=relation_type,
            )
            edges.append(edge)

        return edges

    def candidate_accessors(self, cls: type) -> list[str]:
        """Names of the methods on ``cls`` that may be relation accessors.

        A candidate is a public instance method declared in the body of
        ``cls`` and callable without arguments. Methods inherited from bases
        and mixins are not candidates; overrides declared on ``cls`` are.
        """
        names = []
        for name, member in vars(cls).items():
            if name.startswith("_"):
                continue
            if name == "get_all_relations":
                continue
            if isinstance(member, (staticmethod, classmethod)):
                continue
            if not inspect.isfunction(member):
                continue
            if not _takes_no_required_arguments(member):
                continue
            names.append(name)
        return names


def _takes_no_required_arguments(func: Any) -> bool:
    try:
        parameters = list(inspect.signature(func).parameters.values())[1:]
    except (TypeError, ValueError):
        return False
    return all(
        parameter.default is not inspect.Parameter.empty
        or parameter.kind
        in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in parameters
    )
