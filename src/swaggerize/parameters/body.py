# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Body parameter generation from validation rule maps.

A rule map associates dotted field paths with rule specifications::

    {
        "name": "required|string",
        "address.city": "string",
        "tags.*": "integer",
        "items.*.sku": ["required", "string"],
    }

Each path is folded into one nested schema tree: a segment followed by ``*``
becomes an array whose ``items`` describe every element, any other segment
followed by more segments becomes an object.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final, Protocol

from swaggerize.config import GeneratorSettings, get_settings
from swaggerize.parameters.inference import extract_enum, infer_type, is_required
from swaggerize.parameters.tokenizer import split_rules

PATH_SEPARATOR: Final = "."
WILDCARD: Final = "*"
INDEX_PLACEHOLDER: Final = "0"


class ParameterGenerator(Protocol):
    """Protocol for generators producing OpenAPI parameter objects."""

    def get_parameters(self) -> list[dict[str, Any]]:
        ...

    def get_param_location(self) -> str:
        ...


class ParameterTreeBuilder:
    """Incrementally builds the ``properties`` tree of a body schema."""

    def __init__(self) -> None:
        self.properties: dict[str, dict[str, Any]] = {}

    def add_field(self, path: str, tokens: Sequence[str] | None) -> None:
        """Fold one declared field into the tree.

        Args:
            path: Dotted field path, ``*`` standing for every array element
            tokens: The field's rule tokens, or None when declared without rules
        """
        segments = path.split(PATH_SEPARATOR) if path else []
        if not segments:
            return

        name, remaining = segments[0], segments[1:]
        if name == WILDCARD:
            name = INDEX_PLACEHOLDER
        self._add_to_slot(self.properties, name, remaining, tokens)

    def _add_to_slot(
        self,
        container: dict[str, Any],
        key: str,
        remaining: list[str],
        tokens: Sequence[str] | None,
    ) -> None:
        schema_type = self._segment_type(remaining, tokens)

        node = container.get(key)
        if not node:
            node = self._new_node(schema_type, tokens)
            container[key] = node
        else:
            # last leaf declaration wins
            node["type"] = schema_type
            if schema_type == "array":
                node.setdefault("items", {})
            elif schema_type == "object":
                node.setdefault("properties", {})

        if not remaining:
            return

        if schema_type == "array":
            # remaining[0] is the wildcard; the items slot stands for it
            self._add_to_slot(node, "items", remaining[1:], tokens)
        else:
            self._add_to_slot(
                node["properties"], remaining[0], remaining[1:], tokens
            )

    @staticmethod
    def _segment_type(remaining: list[str], tokens: Sequence[str] | None) -> str:
        if remaining:
            return "array" if remaining[0] == WILDCARD else "object"
        if tokens is None:
            return "object"
        return infer_type(tokens)

    @staticmethod
    def _new_node(schema_type: str, tokens: Sequence[str] | None) -> dict[str, Any]:
        node: dict[str, Any] = {"type": schema_type}
        if schema_type == "array":
            node["items"] = {}
        elif schema_type == "object":
            node["properties"] = {}
        elif tokens is not None:
            enum = extract_enum(tokens)
            if enum:
                node["enum"] = enum
        return node


class BodyParameterGenerator:
    """Generates the single ``in: body`` parameter for a rule map."""

    def __init__(
        self,
        rules: Mapping[str, Any],
        settings: GeneratorSettings | None = None,
    ) -> None:
        self.rules = rules
        self.settings = settings or get_settings()

    def get_parameters(self) -> list[dict[str, Any]]:
        builder = ParameterTreeBuilder()
        required: list[str] = []

        for param, rule in self.rules.items():
            tokens = split_rules(rule)
            builder.add_field(param, tokens)

            if tokens is not None and is_required(tokens):
                required.append(param)

        schema: dict[str, Any] = {"type": "object"}
        if required:
            schema["required"] = required
        schema["properties"] = builder.properties

        return [
            {
                "in": self.get_param_location(),
                "name": self.settings.body_param_name,
                "description": self.settings.body_param_description,
                "schema": schema,
            }
        ]

    def get_param_location(self) -> str:
        return "body"
