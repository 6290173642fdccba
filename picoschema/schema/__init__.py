"""
Schema translation module.

This module turns decoded picoschema documents into Schema trees, maps
documents that already are JSON Schema onto the same tree, and produces a
canonical form for comparisons.

Components:
    - types: Schema node definition and JSON encoding
    - lexer: Scalar tokens and property keys
    - parser: Picoschema grammar
    - mapper: JSON-Schema-shaped mapping to Schema via a fixed field table
    - detector: Chooses between parser and mapper
    - normalizer: Canonical, comparable output

Example:
    ```python
    from picoschema.schema import parse_pico, map_to_schema

    parse_pico({"name": "string", "age?": "integer"})
    map_to_schema({"type": "object", "properties": {"name": {"type": "string"}}})
    ```
"""

from picoschema.schema.detector import Route, looks_like_json_schema, route
from picoschema.schema.lexer import PropertyKey, parse_property_key, parse_scalar
from picoschema.schema.mapper import FIELD_SHAPES, FieldShape, map_to_schema
from picoschema.schema.normalizer import sort_schema_lists, to_canonical_value
from picoschema.schema.parser import parse_pico
from picoschema.schema.types import FORBIDDEN, Forbidden, Schema

__all__ = [
    "Route",
    "route",
    "looks_like_json_schema",
    "PropertyKey",
    "parse_property_key",
    "parse_scalar",
    "FIELD_SHAPES",
    "FieldShape",
    "map_to_schema",
    "sort_schema_lists",
    "to_canonical_value",
    "parse_pico",
    "FORBIDDEN",
    "Forbidden",
    "Schema",
]
