"""
Structural mapper - converts JSON-Schema-shaped mappings into Schema trees.

When a decoded document already is a JSON Schema (rather than picoschema
shorthand), each key is looked up in ``FIELD_SHAPES``, a closed table of the
recognised JSON Schema field names. The field's ``FieldShape`` decides which
kinds of value are accepted and how they are converted:

    ANY             stored verbatim
    STRING          str
    UINT            non-negative whole number
    BOOL            bool
    STRING_LIST     list of str
    SCHEMA          mapping, mapped recursively
    SCHEMA_LIST     list of mappings, each mapped recursively
    SCHEMA_MAP      mapping of mappings, mapped recursively in key order
    SCHEMA_OR_BOOL  false (forbidden), true (anything) or a mapping

Usage:
    ```python
    from picoschema.schema import map_to_schema

    schema = map_to_schema({
        "type": "object",
        "properties": {"name": {"type": "string", "minLength": 1}},
        "required": ["name"],
    })
    schema.properties["name"].extras  # {"minLength": 1}
    ```
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Dict, List

from picoschema.errors import (
    FieldTypeMismatchError,
    PicoschemaError,
    UnrecognizedFieldError,
    describe_kind,
)
from picoschema.schema.types import FORBIDDEN, Schema


class FieldShape(Enum):
    ANY = "any"
    STRING = "string"
    UINT = "unsigned integer"
    BOOL = "boolean"
    STRING_LIST = "array of strings"
    SCHEMA = "object"
    SCHEMA_LIST = "array of objects"
    SCHEMA_MAP = "object of objects"
    SCHEMA_OR_BOOL = "object or boolean"


FIELD_SHAPES: Dict[str, FieldShape] = {
    # Core vocabulary
    "$schema": FieldShape.STRING,
    "$id": FieldShape.STRING,
    "$anchor": FieldShape.STRING,
    "$ref": FieldShape.STRING,
    "$dynamicRef": FieldShape.STRING,
    "$defs": FieldShape.SCHEMA_MAP,
    "$comment": FieldShape.STRING,
    # Applicators
    "allOf": FieldShape.SCHEMA_LIST,
    "anyOf": FieldShape.SCHEMA_LIST,
    "oneOf": FieldShape.SCHEMA_LIST,
    "not": FieldShape.SCHEMA,
    "if": FieldShape.SCHEMA,
    "then": FieldShape.SCHEMA,
    "else": FieldShape.SCHEMA,
    "dependentSchemas": FieldShape.SCHEMA_MAP,
    "prefixItems": FieldShape.SCHEMA_LIST,
    "items": FieldShape.SCHEMA,
    "contains": FieldShape.SCHEMA,
    "properties": FieldShape.SCHEMA_MAP,
    "patternProperties": FieldShape.SCHEMA_MAP,
    "additionalProperties": FieldShape.SCHEMA_OR_BOOL,
    "propertyNames": FieldShape.SCHEMA,
    # Validation
    "type": FieldShape.STRING,
    "enum": FieldShape.ANY,
    "const": FieldShape.ANY,
    "multipleOf": FieldShape.ANY,
    "maximum": FieldShape.ANY,
    "exclusiveMaximum": FieldShape.ANY,
    "minimum": FieldShape.ANY,
    "exclusiveMinimum": FieldShape.ANY,
    "maxLength": FieldShape.UINT,
    "minLength": FieldShape.UINT,
    "pattern": FieldShape.STRING,
    "maxItems": FieldShape.UINT,
    "minItems": FieldShape.UINT,
    "uniqueItems": FieldShape.BOOL,
    "maxContains": FieldShape.UINT,
    "minContains": FieldShape.UINT,
    "maxProperties": FieldShape.UINT,
    "minProperties": FieldShape.UINT,
    "required": FieldShape.STRING_LIST,
    # Format, content and annotations
    "format": FieldShape.STRING,
    "contentEncoding": FieldShape.STRING,
    "contentMediaType": FieldShape.STRING,
    "contentSchema": FieldShape.SCHEMA,
    "title": FieldShape.STRING,
    "description": FieldShape.STRING,
    "default": FieldShape.ANY,
    "deprecated": FieldShape.BOOL,
    "readOnly": FieldShape.BOOL,
    "writeOnly": FieldShape.BOOL,
    "examples": FieldShape.ANY,
}


def map_to_schema(mapping: Mapping) -> Schema:
    """
    Convert a JSON-Schema-shaped mapping into a Schema.

    Args:
        mapping: Decoded JSON Schema document

    Returns:
        Schema: Typed schema tree

    Raises:
        UnrecognizedFieldError: If a key is not a known JSON Schema field
        FieldTypeMismatchError: If a field's value has the wrong kind
    """
    schema = Schema()
    for name, value in mapping.items():
        shape = FIELD_SHAPES.get(name)
        if shape is None:
            raise UnrecognizedFieldError(str(name))
        _assign(schema, name, _CONVERTERS[shape](name, value))
    return schema


def _assign(schema: Schema, name: str, value: Any) -> None:
    if name == "type":
        schema.type = value
    elif name == "description":
        schema.description = value
    elif name == "enum":
        schema.enum = value
    elif name == "properties":
        schema.properties = value
    elif name == "items":
        schema.items = value
    elif name == "required":
        schema.required = value
    elif name == "additionalProperties":
        schema.additional_properties = value
    else:
        schema.extras[name] = value


def _convert_any(name: str, value: Any) -> Any:
    return value


def _convert_string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise FieldTypeMismatchError(name, FieldShape.STRING.value, describe_kind(value))
    return value


def _convert_uint(name: str, value: Any) -> int:
    # bool is an int subclass but never a count.
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise FieldTypeMismatchError(name, FieldShape.UINT.value, describe_kind(value))
    return value


def _convert_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise FieldTypeMismatchError(name, FieldShape.BOOL.value, describe_kind(value))
    return value


def _convert_string_list(name: str, value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        raise FieldTypeMismatchError(name, FieldShape.STRING_LIST.value, describe_kind(value))
    for index, element in enumerate(value):
        if not isinstance(element, str):
            raise FieldTypeMismatchError(name, "string", describe_kind(element), index=index)
    return list(value)


def _convert_schema(name: str, value: Any) -> Schema:
    if not isinstance(value, Mapping):
        raise FieldTypeMismatchError(name, FieldShape.SCHEMA.value, describe_kind(value))
    try:
        return map_to_schema(value)
    except PicoschemaError as e:
        raise e.nest(name)


def _convert_schema_list(name: str, value: Any) -> List[Schema]:
    if not isinstance(value, (list, tuple)):
        raise FieldTypeMismatchError(name, FieldShape.SCHEMA_LIST.value, describe_kind(value))
    schemas = []
    for index, element in enumerate(value):
        if not isinstance(element, Mapping):
            raise FieldTypeMismatchError(name, "object", describe_kind(element), index=index)
        try:
            schemas.append(map_to_schema(element))
        except PicoschemaError as e:
            raise e.nest(name, index)
    return schemas


def _convert_schema_map(name: str, value: Any) -> Dict[str, Schema]:
    if not isinstance(value, Mapping):
        raise FieldTypeMismatchError(name, FieldShape.SCHEMA_MAP.value, describe_kind(value))
    schemas = {}
    for key, element in value.items():
        if not isinstance(element, Mapping):
            raise FieldTypeMismatchError(
                name, "object", describe_kind(element)
            ).nest(name, str(key))
        try:
            schemas[str(key)] = map_to_schema(element)
        except PicoschemaError as e:
            raise e.nest(name, str(key))
    return schemas


def _convert_schema_or_bool(name: str, value: Any) -> Any:
    if value is False:
        return FORBIDDEN
    if value is True:
        return Schema()
    if not isinstance(value, Mapping):
        raise FieldTypeMismatchError(name, FieldShape.SCHEMA_OR_BOOL.value, describe_kind(value))
    return _convert_schema(name, value)


_CONVERTERS: Dict[FieldShape, Callable[[str, Any], Any]] = {
    FieldShape.ANY: _convert_any,
    FieldShape.STRING: _convert_string,
    FieldShape.UINT: _convert_uint,
    FieldShape.BOOL: _convert_bool,
    FieldShape.STRING_LIST: _convert_string_list,
    FieldShape.SCHEMA: _convert_schema,
    FieldShape.SCHEMA_LIST: _convert_schema_list,
    FieldShape.SCHEMA_MAP: _convert_schema_map,
    FieldShape.SCHEMA_OR_BOOL: _convert_schema_or_bool,
}
