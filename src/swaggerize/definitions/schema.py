# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Schema models for generated definitions.

This module defines the immutable data models produced by the definition
builder and their OpenAPI rendering.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DEFINITIONS_PREFIX = "#/definitions/"


class ScalarSchema(BaseModel):
    """A column or appended field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    type: str = "string"
    format: str | None = None
    enum: list[str] | None = None
    example: str | None = None

    def to_openapi(self) -> dict[str, Any]:
        return self.model_dump(exclude={"kind"}, exclude_none=True)


class ReferenceSchema(BaseModel):
    """Reference to another named definition."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reference"] = "reference"
    ref: str
    prefix: str = DEFAULT_DEFINITIONS_PREFIX

    def to_openapi(self) -> dict[str, Any]:
        return {"$ref": f"{self.prefix}{self.ref}"}


class ArrayOfSchema(BaseModel):
    """Array whose items all share one schema."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    items: PropertySchema

    def to_openapi(self) -> dict[str, Any]:
        return {"type": "array", "items": self.items.to_openapi()}


class ObjectOfSchema(BaseModel):
    """Inline object with its own properties."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    properties: dict[str, PropertySchema] = Field(default_factory=dict)

    def to_openapi(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                name: prop.to_openapi() for name, prop in self.properties.items()
            },
        }


PropertySchema = Annotated[
    Union[ScalarSchema, ReferenceSchema, ArrayOfSchema, ObjectOfSchema],
    Field(discriminator="kind"),
]

ArrayOfSchema.model_rebuild()
ObjectOfSchema.model_rebuild()


class Definition(BaseModel):
    """Named object schema describing one model."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: Literal["object"] = "object"
    properties: dict[str, PropertySchema] = Field(default_factory=dict)

    def to_openapi(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "properties": {
                name: prop.to_openapi() for name, prop in self.properties.items()
            },
        }

    def references(self) -> set[str]:
        """Names of every definition referenced by this one."""
        found: set[str] = set()
        pending: list[Any] = list(self.properties.values())
        while pending:
            prop = pending.pop()
            if isinstance(prop, ReferenceSchema):
                found.add(prop.ref)
            elif isinstance(prop, ArrayOfSchema):
                pending.append(prop.items)
            elif isinstance(prop, ObjectOfSchema):
                pending.extend(prop.properties.values())
        return found


def render_definitions(definitions: dict[str, Definition]) -> dict[str, dict[str, Any]]:
    """Render a definition table to its OpenAPI ``definitions`` mapping."""
    return {name: definition.to_openapi() for name, definition in definitions.items()}
