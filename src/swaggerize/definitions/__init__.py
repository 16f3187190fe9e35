# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
OpenAPI definitions generated from models and their relations.
"""

from swaggerize.definitions.builder import DefinitionBuilder
from swaggerize.definitions.discovery import (
    Heritage,
    RelationDiscoverer,
    RelationEdge,
    RelationFamily,
    RelationKind,
)
from swaggerize.definitions.errors import (
    AccessorInvocationError,
    ConfigurationError,
    DefinitionError,
    ProviderUnavailable,
    TypeMismatchError,
)
from swaggerize.definitions.examples import FactoryRegistry, FakeInstanceProvider
from swaggerize.definitions.generator import DefinitionGenerator
from swaggerize.definitions.introspection import SchemaIntrospector, SQLAlchemyIntrospector
from swaggerize.definitions.schema import (
    ArrayOfSchema,
    Definition,
    ObjectOfSchema,
    PropertySchema,
    ReferenceSchema,
    ScalarSchema,
    render_definitions,
)

__all__ = [
    "DefinitionBuilder",
    "DefinitionGenerator",
    # Discovery
    "Heritage",
    "RelationDiscoverer",
    "RelationEdge",
    "RelationFamily",
    "RelationKind",
    # Collaborators
    "FactoryRegistry",
    "FakeInstanceProvider",
    "SchemaIntrospector",
    "SQLAlchemyIntrospector",
    # Schema
    "ArrayOfSchema",
    "Definition",
    "ObjectOfSchema",
    "PropertySchema",
    "ReferenceSchema",
    "ScalarSchema",
    "render_definitions",
    # Errors
    "AccessorInvocationError",
    "ConfigurationError",
    "DefinitionError",
    "ProviderUnavailable",
    "TypeMismatchError",
]
