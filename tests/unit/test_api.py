"""
Unit tests for the top-level entry point and shape detection.
"""

import copy
import logging

import pytest
from picoschema import (
    FORBIDDEN,
    Schema,
    UnrecognizedFieldError,
    UnsupportedValueKindError,
    looks_like_json_schema,
    to_schema,
)
from picoschema.schema.detector import Route, route


class TestShapeDetector:
    """Test routing between the picoschema parser and the mapper."""

    @pytest.mark.parametrize(
        "type_name", ["string", "boolean", "null", "number", "integer", "object", "array"]
    )
    def test_json_schema_types(self, type_name):
        """Test a recognised type routes to the mapper."""
        assert route({"type": type_name}) is Route.JSON_SCHEMA

    def test_properties_mapping(self):
        """Test a properties mapping without type routes to the mapper."""
        assert route({"properties": {"a": {"type": "string"}}}) is Route.JSON_SCHEMA_OBJECT

    def test_properties_not_a_mapping(self):
        """Test a 'properties' shorthand field stays shorthand."""
        assert route({"properties": "string"}) is Route.PICOSCHEMA

    def test_unknown_type_value(self):
        """Test a 'type' shorthand field stays shorthand."""
        assert route({"type": "string, kind of thing"}) is Route.PICOSCHEMA
        assert route({"type": ["string", "null"]}) is Route.PICOSCHEMA

    def test_non_mappings(self):
        """Test strings and lists are shorthand."""
        assert route("string") is Route.PICOSCHEMA
        assert route(["a"]) is Route.PICOSCHEMA
        assert looks_like_json_schema("string") is False
        assert looks_like_json_schema({"type": "object"}) is True

    def test_routing_is_logged(self, caplog):
        """Test the decision is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="picoschema.schema.detector"):
            route({"type": "object"})

        assert "json_schema" in caplog.text


class TestToSchema:
    """Test the public to_schema entry point."""

    def test_none_gives_no_schema(self):
        """Test None in, None out."""
        assert to_schema(None) is None

    def test_scalar(self):
        """Test a bare scalar token."""
        assert to_schema("string, a name") == Schema(type="string", description="a name")

    def test_any(self):
        """Test 'any' is unconstrained."""
        assert to_schema("any").type == ""

    def test_enum(self):
        """Test a list is an enum."""
        schema = to_schema(["a", "b", "c"])

        assert schema.enum == ["a", "b", "c"]
        assert schema.type == ""

    def test_shorthand_object(self):
        """Test an object in shorthand."""
        schema = to_schema({"name": "string", "age?": "integer"})

        assert schema.required == ["name"]
        assert list(schema.properties) == ["name", "age"]
        assert schema.additional_properties is FORBIDDEN

    def test_json_schema_passthrough(self):
        """Test a JSON Schema document is mapped, not parsed as shorthand."""
        doc = {
            "type": "object",
            "properties": {"name": {"type": "string"}},
        }
        schema = to_schema(doc)

        assert schema.properties["name"] == Schema(type="string")
        # Shorthand would have made the object closed and 'name' required.
        assert schema.additional_properties is None
        assert schema.required == []

    def test_properties_without_type_forced_to_object(self):
        """Test the type is set to object when only properties are given."""
        schema = to_schema({"properties": {"id": {"type": "integer"}}, "required": ["id"]})

        assert schema.type == "object"
        assert schema.required == ["id"]

    def test_json_schema_errors_propagate(self):
        """Test mapper errors reach the caller."""
        with pytest.raises(UnrecognizedFieldError):
            to_schema({"type": "object", "properties": {}, "name": "string"})

    def test_unsupported_top_level(self):
        """Test a number is not a schema."""
        with pytest.raises(UnsupportedValueKindError):
            to_schema(3)

    def test_input_not_mutated(self):
        """Test the decoded document is left unchanged."""
        doc = {
            "title": "string",
            "status?(enum)": ["draft", "final"],
            "authors(array)": {"name": "string"},
        }
        before = copy.deepcopy(doc)
        to_schema(doc)

        assert doc == before

    def test_full_document(self):
        """Test a realistic document end to end."""
        schema = to_schema({
            "title": "string, the book title",
            "pages?": "integer",
            "tags(array, list of tags)": "string",
            "format?(enum, binding)": ["hardcover", "paperback"],
            "author(object)": {"name": "string", "email?": "string"},
            "(*)": "any",
        })

        assert schema.to_dict() == {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "the book title"},
                "pages": {"type": "integer"},
                "tags": {
                    "type": "array",
                    "description": "list of tags",
                    "items": {"type": "string"},
                },
                "format": {
                    "description": "binding",
                    "enum": ["hardcover", "paperback", None],
                },
                "author": {
                    "type": "object",
                    "properties": {"name": {"type": "string"}, "email": {"type": "string"}},
                    "required": ["name"],
                    "additionalProperties": False,
                },
            },
            "required": ["title", "tags", "author"],
            "additionalProperties": {},
        }
