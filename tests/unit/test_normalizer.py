"""
Unit tests for the schema normalizer and JSON encoding.
"""

import datetime

import pytest
from picoschema import SchemaEncodingError, to_canonical_value, to_schema
from picoschema.schema import FORBIDDEN, Schema, sort_schema_lists


class TestSortSchemaLists:
    """Test in-place sorting of required lists."""

    def test_sorts_nested_required(self):
        """Test properties and items are visited."""
        schema = to_schema({
            "b": "string",
            "a": "string",
            "child": {"y": "string", "x": "string"},
            "list(array)": {"n": "string", "m": "string"},
        })
        sort_schema_lists(schema)

        assert schema.required == ["a", "b", "child", "list"]
        assert schema.properties["child"].required == ["x", "y"]
        assert schema.properties["list"].items.required == ["m", "n"]

    def test_property_and_enum_order_untouched(self):
        """Test only required is sorted."""
        schema = to_schema({"b(enum)": ["z", "a"], "a": "string"})
        sort_schema_lists(schema)

        assert list(schema.properties) == ["b", "a"]
        assert schema.properties["b"].enum == ["z", "a"]

    def test_sorting_twice_is_noop(self):
        """Test sorting is idempotent."""
        schema = to_schema({"c": "string", "a": "string", "b": "string"})
        sort_schema_lists(schema)
        once = list(schema.required)
        sort_schema_lists(schema)

        assert schema.required == once


class TestToCanonicalValue:
    """Test canonical JSON values."""

    def test_canonical_value(self):
        """Test the value is plain JSON data with sorted required."""
        value = to_canonical_value(to_schema({"name": "string", "age": "integer"}))

        assert value == {
            "type": "object",
            "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
            "required": ["age", "name"],
            "additionalProperties": False,
        }

    def test_equivalent_schemas_compare_equal(self):
        """Test authoring order does not affect the canonical value."""
        first = to_schema({"a": "string", "b": "integer"})
        second = to_schema({"b": "integer", "a": "string"})

        assert to_canonical_value(first) == to_canonical_value(second)

    def test_idempotent(self):
        """Test applying it twice gives identical results."""
        schema = to_schema({"z": "string", "y?": "string", "x": {"q": "string", "p": "string"}})

        assert to_canonical_value(schema) == to_canonical_value(schema)

    def test_json_schema_input(self):
        """Test mapped extras survive the round trip."""
        schema = to_schema({
            "type": "object",
            "properties": {"n": {"type": "integer", "minimum": 1}},
            "required": ["n"],
            "additionalProperties": False,
        })

        assert to_canonical_value(schema) == {
            "type": "object",
            "properties": {"n": {"type": "integer", "minimum": 1}},
            "required": ["n"],
            "additionalProperties": False,
        }

    def test_unencodable_value(self):
        """Test passthrough values that JSON cannot encode."""
        schema = to_schema({"type": "string", "default": datetime.date(2024, 1, 1)})

        with pytest.raises(SchemaEncodingError, match="not JSON serializable"):
            to_canonical_value(schema)


class TestSchemaEncoding:
    """Test Schema.to_dict and to_json."""

    def test_unset_fields_omitted(self):
        """Test an empty schema encodes to an empty object."""
        assert Schema().to_dict() == {}
        assert Schema().to_json() == "{}"

    def test_additional_properties_variants(self):
        """Test the three additionalProperties states."""
        assert "additionalProperties" not in Schema(type="object").to_dict()
        assert Schema(additional_properties=FORBIDDEN).to_dict() == {"additionalProperties": False}
        assert Schema(additional_properties=Schema(type="string")).to_dict() == {
            "additionalProperties": {"type": "string"}
        }

    def test_to_json_indent(self):
        """Test indentation is passed through."""
        assert Schema(type="string").to_json(indent=2) == '{\n  "type": "string"\n}'

    def test_to_json_unencodable_extra(self):
        """Test to_json reports passthrough values JSON cannot encode."""
        schema = Schema(type="string", extras={"default": datetime.date(2024, 1, 1)})

        with pytest.raises(SchemaEncodingError, match="not JSON serializable"):
            schema.to_json()
