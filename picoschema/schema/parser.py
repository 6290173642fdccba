"""
Picoschema parser - converts shorthand values into Schema trees.

The input is whatever a YAML or JSON decoder produced for the schema section
of a document: strings, lists and (ordered) mappings.

    - A string is a scalar type, see ``lexer.parse_scalar``
    - A list is an enum of literal values
    - A mapping is an object whose keys are property keys, see
      ``lexer.parse_property_key``

Usage:
    ```python
    from picoschema.schema import parse_pico

    schema = parse_pico({
        "name": "string",
        "age?": "integer, age in years",
        "tags(array, labels)": "string",
        "color?(enum)": ["red", "green"],
        "(*)": "string",
    })
    schema.to_dict()
    # {
    #     "type": "object",
    #     "properties": {
    #         "name": {"type": "string"},
    #         "age": {"type": "integer", "description": "age in years"},
    #         "tags": {"type": "array", "items": {"type": "string"}, "description": "labels"},
    #         "color": {"enum": ["red", "green", None]},
    #     },
    #     "required": ["name", "tags"],
    #     "additionalProperties": {"type": "string"},
    # }
    ```
"""

from collections.abc import Mapping
from typing import Any

from picoschema.errors import (
    MalformedEnumError,
    PicoschemaError,
    UnknownModifierError,
    UnsupportedValueKindError,
)
from picoschema.schema.lexer import WILDCARD, parse_property_key, parse_scalar
from picoschema.schema.types import FORBIDDEN, Schema

MODIFIERS = ["object", "array", "enum", WILDCARD]


def parse_pico(value: Any) -> Schema:
    """
    Parse a picoschema value into a Schema.

    Args:
        value: Decoded string, list or mapping

    Returns:
        Schema: Root of the translated schema tree

    Raises:
        PicoschemaError: On the first malformed value, with ``path`` set to
            the property keys leading to it
    """
    if isinstance(value, str):
        return parse_scalar(value)
    if isinstance(value, (list, tuple)):
        return _parse_enum(value)
    if isinstance(value, Mapping):
        return _parse_object(value)
    raise UnsupportedValueKindError(value)


def _parse_enum(values) -> Schema:
    if not values:
        raise MalformedEnumError("enum value is an empty array")
    # Copy so the caller's document is never aliased by the output tree.
    return Schema(enum=list(values))


def _parse_object(mapping: Mapping) -> Schema:
    """
    Parse a mapping of property keys into an object schema.

    Objects reject unknown properties unless a ``(*)`` entry supplies a
    schema for them.
    """
    schema = Schema(type="object", properties={}, additional_properties=FORBIDDEN)

    for raw_key, raw_value in mapping.items():
        key = parse_property_key(str(raw_key))
        if key.is_required and key.name not in schema.required:
            schema.required.append(key.name)

        try:
            prop = parse_pico(raw_value)
        except PicoschemaError as e:
            raise e.nest(str(raw_key))

        if key.modifier is None:
            schema.properties[key.name] = prop
            continue

        if key.modifier == "array":
            prop = Schema(type="array", items=prop)
        elif key.modifier == "object":
            pass
        elif key.modifier == "enum":
            if prop.enum is None:
                raise MalformedEnumError(f"enum value {prop.to_dict()!r} is not an array").nest(str(raw_key))
            if key.optional:
                prop.enum.append(None)
        elif key.modifier == WILDCARD:
            schema.additional_properties = prop
            continue
        else:
            raise UnknownModifierError(key.modifier, MODIFIERS).nest(str(raw_key))

        if key.description is not None:
            prop.description = key.description

        schema.properties[key.name] = prop

    return schema
