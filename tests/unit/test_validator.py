"""
Unit tests for the meta-schema check.
"""

from picoschema import to_schema
from picoschema.schema import Schema
from picoschema.validation import check_schema, format_validation_errors


class TestCheckSchema:
    """Test checking schemas against the JSON Schema meta-schema."""

    def test_translated_schema_is_valid(self):
        """Test a shorthand translation passes the check."""
        schema = to_schema({
            "name": "string",
            "tags?(array)": "string",
            "color?(enum)": ["red", "green"],
            "(*)": "integer",
        })

        result = check_schema(schema)

        assert result.is_valid is True
        assert result.errors == []
        assert result.document == schema.to_dict()

    def test_accepts_dict(self):
        """Test an already encoded document can be checked."""
        result = check_schema({"type": "string", "minLength": 1})

        assert result.is_valid is True

    def test_bad_type_name(self):
        """Test a type outside the JSON Schema vocabulary."""
        result = check_schema(Schema(type="text"))

        assert result.is_valid is False
        assert result.errors[0].path == ".type"

    def test_bad_passthrough_value(self):
        """Test a passthrough bound of the wrong kind is reported with its path."""
        schema = to_schema({
            "type": "object",
            "properties": {"age": {"type": "integer", "minimum": "zero"}},
        })

        result = check_schema(schema)

        assert result.is_valid is False
        assert any(e.path == ".properties.age.minimum" for e in result.errors)

    def test_format_validation_errors(self):
        """Test formatting of check errors."""
        result = check_schema(Schema(type="text"))
        formatted = format_validation_errors(result.errors)

        assert "Schema check failed" in formatted
        assert ".type" in formatted

    def test_format_no_errors(self):
        """Test formatting an empty error list."""
        assert format_validation_errors([]) == "No validation errors"
