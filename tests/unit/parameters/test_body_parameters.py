"""Tests for body parameter generation from rule maps."""

from __future__ import annotations

from swaggerize.config import GeneratorSettings
from swaggerize.parameters.body import BodyParameterGenerator, ParameterTreeBuilder
from swaggerize.parameters.tokenizer import In


def schema_for(rules, settings=None):
    [param] = BodyParameterGenerator(rules, settings=settings).get_parameters()
    return param["schema"]


class TestBodyParameterGenerator:
    def test_parameter_envelope(self) -> None:
        params = BodyParameterGenerator({"name": "string"}).get_parameters()
        assert len(params) == 1
        assert params[0]["in"] == "body"
        assert params[0]["name"] == "body"
        assert params[0]["description"] == ""
        assert params[0]["schema"]["type"] == "object"

    def test_param_location(self) -> None:
        assert BodyParameterGenerator({}).get_param_location() == "body"

    def test_envelope_uses_settings(self) -> None:
        settings = GeneratorSettings(
            body_param_name="payload", body_param_description="The payload"
        )
        [param] = BodyParameterGenerator({}, settings=settings).get_parameters()
        assert param["name"] == "payload"
        assert param["description"] == "The payload"

    def test_required_fields_are_collected(self) -> None:
        schema = schema_for({"name": "required|string", "age": "integer"})
        assert schema["required"] == ["name"]
        assert schema["properties"] == {
            "name": {"type": "string"},
            "age": {"type": "integer"},
        }

    def test_required_key_omitted_when_nothing_required(self) -> None:
        schema = schema_for({"name": "string", "age": "integer"})
        assert "required" not in schema

    def test_required_keeps_declared_path(self) -> None:
        schema = schema_for({"address.city": "required|string"})
        assert schema["required"] == ["address.city"]

    def test_required_from_list_rules(self) -> None:
        schema = schema_for({"email": ["required", "email"]})
        assert schema["required"] == ["email"]

    def test_wildcard_makes_array(self) -> None:
        schema = schema_for({"tags.*": "string"})
        assert schema["properties"]["tags"] == {
            "type": "array",
            "items": {"type": "string"},
        }

    def test_nested_object(self) -> None:
        schema = schema_for({"address.city": "string", "address.zip": "integer"})
        assert schema["properties"]["address"] == {
            "type": "object",
            "properties": {
                "city": {"type": "string"},
                "zip": {"type": "integer"},
            },
        }

    def test_enum_values(self) -> None:
        schema = schema_for({"status": "in:active,inactive"})
        assert schema["properties"]["status"] == {
            "type": "string",
            "enum": ["active", "inactive"],
        }

    def test_enum_from_rule_object(self) -> None:
        schema = schema_for({"status": ["required", In(["open", "closed"])]})
        assert schema["properties"]["status"]["enum"] == ["open", "closed"]

    def test_array_of_objects(self) -> None:
        schema = schema_for(
            {
                "items": "required|array",
                "items.*.sku": "required|string",
                "items.*.quantity": "integer",
            }
        )
        assert schema["required"] == ["items", "items.*.sku"]
        assert schema["properties"]["items"] == {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "sku": {"type": "string"},
                    "quantity": {"type": "integer"},
                },
            },
        }

    def test_nested_arrays(self) -> None:
        schema = schema_for({"matrix.*.*": "numeric"})
        assert schema["properties"]["matrix"] == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "number"}},
        }

    def test_container_declared_before_children(self) -> None:
        schema = schema_for({"meta": "array", "meta.*": "integer"})
        assert schema["properties"]["meta"] == {
            "type": "array",
            "items": {"type": "integer"},
        }

    def test_leaf_declaration_overwrites_type(self) -> None:
        schema = schema_for({"address.city": "string", "address": "array"})
        address = schema["properties"]["address"]
        assert address["type"] == "array"
        assert address["properties"] == {"city": {"type": "string"}}

    def test_field_without_rule_list_is_object(self) -> None:
        schema = schema_for({"settings": None})
        assert schema["properties"]["settings"] == {"type": "object", "properties": {}}

    def test_declaration_order_is_kept(self) -> None:
        schema = schema_for({"b": "string", "a": "string", "c": "string"})
        assert list(schema["properties"]) == ["b", "a", "c"]


class TestParameterTreeBuilder:
    def test_empty_path_is_noop(self) -> None:
        builder = ParameterTreeBuilder()
        builder.add_field("", [])
        assert builder.properties == {}

    def test_root_wildcard_uses_index_placeholder(self) -> None:
        builder = ParameterTreeBuilder()
        builder.add_field("*", ["string"])
        assert builder.properties == {"0": {"type": "string"}}

    def test_intermediate_container_is_never_downgraded(self) -> None:
        builder = ParameterTreeBuilder()
        builder.add_field("user", ["string"])
        builder.add_field("user.name", ["string"])
        builder.add_field("user.age", ["integer"])
        assert builder.properties["user"]["type"] == "object"
        assert builder.properties["user"]["properties"] == {
            "name": {"type": "string"},
            "age": {"type": "integer"},
        }
