"""
Schema normalizer - canonical form for comparing translated schemas.

JSON objects compare equal regardless of key order, but lists do not, and the
``required`` list follows authoring order. ``sort_schema_lists`` sorts it so
that equivalent schemas encode identically. Only apply this when producing
output for comparison; consumers expecting authored order should get the
schema as translated.
"""

import json
from typing import Any

from picoschema.schema.types import Schema


def sort_schema_lists(schema: Schema) -> None:
    """
    Sort ``required`` in place, recursing into properties and items.

    Only the fields the translator fills from unordered sources are sorted;
    enum order and property order are left alone.
    """
    schema.required.sort()
    if schema.properties is not None:
        for prop in schema.properties.values():
            sort_schema_lists(prop)
    if schema.items is not None:
        sort_schema_lists(schema.items)


def to_canonical_value(schema: Schema) -> Any:
    """
    Normalize a schema and round-trip it through JSON.

    Args:
        schema: Translated schema; its ``required`` lists are sorted in place

    Returns:
        Any: Plain decoded JSON value (dicts, lists, scalars)

    Raises:
        SchemaEncodingError: If a passthrough value is not JSON serializable

    Example:
        ```python
        schema = to_schema({"b": "string", "a": "string"})
        to_canonical_value(schema)["required"]  # ["a", "b"]
        ```
    """
    sort_schema_lists(schema)
    return json.loads(schema.to_json())
