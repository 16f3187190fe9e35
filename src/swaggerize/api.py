# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Entry points for generating schema fragments.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from swaggerize.config import GeneratorSettings
from swaggerize.definitions.builder import DefinitionBuilder
from swaggerize.definitions.examples import FakeInstanceProvider
from swaggerize.definitions.introspection import SchemaIntrospector
from swaggerize.definitions.schema import render_definitions
from swaggerize.parameters.body import BodyParameterGenerator


def generate_definitions(
    root_model: Any,
    *,
    introspector: SchemaIntrospector | None = None,
    provider: FakeInstanceProvider | None = None,
    settings: GeneratorSettings | None = None,
) -> dict[str, dict[str, Any]]:
    """Generate OpenAPI definitions for a model and every related model.

    Args:
        root_model: Model class or instance to start from
        introspector: Schema introspector (SQLAlchemy metadata by default)
        provider: Fake instance provider used for example values
        settings: Generator settings (environment driven by default)

    Returns:
        Definitions keyed by model name, leaf models first
    """
    builder = DefinitionBuilder(
        introspector=introspector, provider=provider, settings=settings
    )
    return render_definitions(builder.build_graph(root_model))


def generate_body_parameters(
    rule_map: Mapping[str, Any],
    *,
    settings: GeneratorSettings | None = None,
) -> dict[str, Any]:
    """Generate the ``in: body`` parameter described by a validation rule map.

    Args:
        rule_map: Field path -> rule specification, in declaration order
        settings: Generator settings (environment driven by default)

    Returns:
        The body parameter object
    """
    return BodyParameterGenerator(rule_map, settings=settings).get_parameters()[0]
