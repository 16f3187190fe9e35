# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Definition building for models and their relation graph.

``build_graph`` walks the relation graph depth first. Two steps are kept
apart on purpose:

- insert-if-absent: a model's scalar definition is built the first time its
  display name is seen, and the walk only descends into models inserted this
  way, which bounds recursion on cyclic graphs;
- always-link: every relation edge of the model being visited is written to
  its definition, whether or not the related model was already known.

Definitions are keyed by display name, so two different models sharing a
class name end up in one definition.
"""

from __future__ import annotations

from typing import Any, Final

from swaggerize.config import GeneratorSettings, get_settings
from swaggerize.definitions.discovery import (
    Heritage,
    RelationDiscoverer,
    RelationEdge,
    RelationKind,
)
from swaggerize.definitions.errors import ProviderUnavailable
from swaggerize.definitions.examples import FakeInstanceProvider, FactoryRegistry
from swaggerize.definitions.introspection import SchemaIntrospector, SQLAlchemyIntrospector
from swaggerize.definitions.schema import (
    ArrayOfSchema,
    Definition,
    PropertySchema,
    ReferenceSchema,
    ScalarSchema,
)
from swaggerize.logging import SwaggerizeLogger, get_logger

DATE_SCHEMA: Final = ScalarSchema(type="string", format="date-time")
DEFAULT_SCHEMA: Final = ScalarSchema(type="string")

CAST_SCHEMAS: Final[dict[str, ScalarSchema]] = {
    "float": ScalarSchema(type="number", format="float"),
    "int": ScalarSchema(type="integer"),
    "integer": ScalarSchema(type="integer"),
    "boolean": ScalarSchema(type="boolean"),
    "bool": ScalarSchema(type="boolean"),
    "string": DEFAULT_SCHEMA,
}


class DefinitionBuilder:
    """Builds definitions for a model and every model reachable from it."""

    def __init__(
        self,
        introspector: SchemaIntrospector | None = None,
        provider: FakeInstanceProvider | None = None,
        discoverer: RelationDiscoverer | None = None,
        settings: GeneratorSettings | None = None,
        logger: SwaggerizeLogger | None = None,
    ) -> None:
        self.introspector = introspector or SQLAlchemyIntrospector()
        self.provider = provider or FactoryRegistry()
        self.logger = logger or get_logger(__name__)
        self.discoverer = discoverer or RelationDiscoverer(logger=self.logger)
        self.settings = settings or get_settings()

    def build_definition(self, model: Any) -> Definition:
        """Build the scalar definition of one model.

        Columns come first, then appended fields; hidden names are skipped.

        Raises:
            ConfigurationError: If the model's appended fields are malformed
        """
        return Definition(
            name=self.introspector.display_name(model),
            properties=self._scalar_properties(model),
        )

    def build_graph(self, root: Any) -> dict[str, Definition]:
        """Build the definitions of ``root`` and every related model.

        Returns:
            Definitions keyed by display name, the most deeply discovered
            model first

        Raises:
            AccessorInvocationError: If a relation accessor fails
            ConfigurationError: If a model's metadata is malformed
        """
        root = _as_instance(root)
        table: dict[str, dict[str, PropertySchema]] = {}

        self._insert_if_absent(root, table)
        self._link_relations(root, table)

        return {
            name: Definition(name=name, properties=properties)
            for name, properties in reversed(table.items())
        }

    def _insert_if_absent(
        self, model: Any, table: dict[str, dict[str, PropertySchema]]
    ) -> bool:
        name = self.introspector.display_name(model)
        if name in table:
            self.logger.debug("Definition already generated", definition=name)
            return False

        table[name] = self._scalar_properties(model)
        self.logger.debug(
            "Generated definition", definition=name, properties=len(table[name])
        )
        return True

    def _link_relations(
        self, model: Any, table: dict[str, dict[str, PropertySchema]]
    ) -> None:
        name = self.introspector.display_name(model)

        for edge in self.discoverer.get_all_relations(model, Heritage.ALL):
            related = edge.related_model
            table[name][edge.name] = self.relation_property(edge)
            self.logger.debug(
                "Linked relation",
                definition=name,
                property=edge.name,
                related=self.introspector.display_name(related),
            )

            if self._insert_if_absent(related, table):
                self._link_relations(related, table)

    def relation_property(self, edge: RelationEdge) -> PropertySchema:
        """Property schema of a relation: a reference, or an array of them."""
        reference = ReferenceSchema(
            ref=self.introspector.display_name(edge.related_model),
            prefix=self.settings.definitions_prefix,
        )
        if edge.kind is RelationKind.TO_MANY:
            return ArrayOfSchema(items=reference)
        return reference

    def column_schema(
        self, column: str, casts: dict[str, str], dates: set[str]
    ) -> ScalarSchema:
        if column in dates:
            return DATE_SCHEMA
        return CAST_SCHEMAS.get(casts.get(column, "string"), DEFAULT_SCHEMA)

    def _scalar_properties(self, model: Any) -> dict[str, PropertySchema]:
        columns = [
            *self.introspector.list_columns(model),
            *self.introspector.list_computed(model),
        ]
        hidden = self.introspector.list_hidden(model)
        casts = self.introspector.list_casts(model)
        dates = self.introspector.list_date_columns(model)
        fake = self._fake_instance(model)

        properties: dict[str, PropertySchema] = {}
        for column in columns:
            if column in hidden:
                continue

            schema = self.column_schema(column, casts, dates)
            example = _example_value(fake, column)
            if example is not None:
                schema = schema.model_copy(update={"example": example})
            properties[column] = schema

        return properties

    def _fake_instance(self, model: Any) -> Any:
        if not self.settings.generate_examples:
            return None
        try:
            return self.provider.materialize(model)
        except ProviderUnavailable as exc:
            self.logger.debug(
                "Examples omitted",
                definition=self.introspector.display_name(model),
                reason=exc.message,
            )
            return None


def _as_instance(model: Any) -> Any:
    return model() if isinstance(model, type) else model


def _example_value(fake: Any, column: str) -> str | None:
    if fake is None:
        return None
    value = getattr(fake, column, None)
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
