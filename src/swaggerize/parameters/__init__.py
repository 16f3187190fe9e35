# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Request body parameter schemas derived from validation rule maps.
"""

from swaggerize.parameters.body import (
    BodyParameterGenerator,
    ParameterGenerator,
    ParameterTreeBuilder,
)
from swaggerize.parameters.inference import (
    TYPE_TABLE,
    extract_enum,
    infer_type,
    is_required,
)
from swaggerize.parameters.tokenizer import In, Rule, render_token, split_rules

__all__ = [
    "BodyParameterGenerator",
    "ParameterGenerator",
    "ParameterTreeBuilder",
    "TYPE_TABLE",
    "extract_enum",
    "infer_type",
    "is_required",
    "In",
    "Rule",
    "render_token",
    "split_rules",
]
