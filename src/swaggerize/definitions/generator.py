# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Route level definition generation.
"""

from __future__ import annotations

from typing import Any

from swaggerize.config import GeneratorSettings, get_settings
from swaggerize.definitions.builder import DefinitionBuilder
from swaggerize.definitions.schema import render_definitions
from swaggerize.logging import SwaggerizeLogger, get_logger
from swaggerize.routes import ModelResolver, Route, allows_definitions


class DefinitionGenerator:
    """Generates the OpenAPI definitions documented by one route."""

    def __init__(
        self,
        route: Route,
        builder: DefinitionBuilder | None = None,
        resolver: ModelResolver | None = None,
        settings: GeneratorSettings | None = None,
        logger: SwaggerizeLogger | None = None,
    ) -> None:
        self.route = route
        self.settings = settings or get_settings()
        self.logger = logger or get_logger(__name__)
        self.builder = builder or DefinitionBuilder(
            settings=self.settings, logger=self.logger
        )
        self.resolver = resolver or ModelResolver()

    def can_generate(self) -> bool:
        return allows_definitions(self.route, self.settings)

    def generate(self) -> dict[str, dict[str, Any]]:
        """Generate the definitions of the route's model and its relations.

        Returns:
            OpenAPI definitions, empty when the route's methods do not allow
            definitions or no model is annotated
        """
        if not self.can_generate():
            self.logger.info(
                "Skipping definitions for route",
                uri=self.route.uri,
                methods=self.route.methods,
            )
            return {}

        model = self.resolver.resolve(self.route)
        if model is None:
            self.logger.debug("No @model annotation found", uri=self.route.uri)
            return {}

        return render_definitions(self.builder.build_graph(model))
