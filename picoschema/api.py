"""
High-level Python API for picoschema.

This module provides the main user-facing entry points: translating a
decoded document into a Schema, and producing its canonical JSON value.
"""

from typing import Any, Optional

from picoschema.schema.detector import Route, route
from picoschema.schema.mapper import map_to_schema
from picoschema.schema.normalizer import to_canonical_value
from picoschema.schema.parser import parse_pico
from picoschema.schema.types import Schema


def to_schema(value: Any) -> Optional[Schema]:
    """
    Translate picoschema, or an embedded JSON Schema, into a Schema.

    Args:
        value: Result of decoding the schema section of a YAML/JSON document

    Returns:
        Optional[Schema]: The translated schema, or None if ``value`` is None

    Raises:
        PicoschemaError: If the value cannot be translated

    Example:
        ```python
        from picoschema import load_document_string, to_schema

        doc = load_document_string('''
        name: string, the full name
        age?: integer
        tags(array): string
        ''')
        to_schema(doc).to_json(indent=2)
        ```
    """
    if value is None:
        return None

    target = route(value)
    if target is Route.JSON_SCHEMA:
        return map_to_schema(value)
    if target is Route.JSON_SCHEMA_OBJECT:
        schema = map_to_schema(value)
        schema.type = "object"
        return schema
    return parse_pico(value)


__all__ = ["to_schema", "to_canonical_value"]
