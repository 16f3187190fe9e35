# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
OpenAPI definitions and request body schemas from models and validation rules.
"""

from swaggerize.api import generate_body_parameters, generate_definitions
from swaggerize.definitions import DefinitionBuilder, DefinitionGenerator
from swaggerize.models import Model
from swaggerize.parameters import BodyParameterGenerator
from swaggerize.routes import Route

__all__ = [
    "generate_body_parameters",
    "generate_definitions",
    "BodyParameterGenerator",
    "DefinitionBuilder",
    "DefinitionGenerator",
    "Model",
    "Route",
]
