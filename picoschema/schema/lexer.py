"""
Token-level parsing for picoschema strings and property keys.

Scalar values are written as ``type`` or ``type, description``::

    "string"                 -> {"type": "string"}
    "integer, age in years"  -> {"type": "integer", "description": "age in years"}
    "any"                    -> {}

Property keys carry an optional marker and an optional parenthetical::

    name                     required property
    name?                    optional property
    tags(array)              array of the value's schema
    tags?(array, some tags)  optional array with a description
    (*)                      schema for additional properties
"""

from dataclasses import dataclass
from typing import Optional

from picoschema.errors import UnsupportedScalarTypeError
from picoschema.schema.types import Schema

SCALAR_TYPES = ("string", "boolean", "null", "number", "integer", "any")

WILDCARD = "*"


@dataclass
class PropertyKey:
    """
    A decoded picoschema property key.

    Attributes:
        name: Property name without the optional marker or parenthetical
        optional: Whether the key ended with ``?``
        modifier: Keyword inside the parentheses, None without parentheses
        description: Text after the first comma inside the parentheses
    """

    name: str
    optional: bool = False
    modifier: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_required(self) -> bool:
        return not self.optional and self.name != "" and self.modifier != WILDCARD


def parse_scalar(token: str) -> Schema:
    """
    Parse a scalar type token, with an optional description after a comma.

    Args:
        token: Shorthand string such as ``"string, the user's name"``

    Returns:
        Schema: Scalar schema; ``any`` yields an empty type

    Raises:
        UnsupportedScalarTypeError: If the type token is not recognised
    """
    type_name, comma, description = token.partition(",")
    if type_name not in SCALAR_TYPES:
        raise UnsupportedScalarTypeError(type_name)

    schema = Schema(type="" if type_name == "any" else type_name)
    if comma:
        schema.description = description.strip()
    return schema


def parse_property_key(key: str) -> PropertyKey:
    """
    Split a property key into name, optionality, modifier and description.

    A key missing its closing parenthesis is accepted as if it were present,
    and repeated closing parentheses are all dropped. A wildcard modifier on
    a named key never makes that name required.

    Example:
        ```python
        parse_property_key("color?(enum, paint color)")
        # PropertyKey(name="color", optional=True, modifier="enum",
        #             description="paint color")
        ```
    """
    if key == WILDCARD:
        return PropertyKey(name="", modifier=WILDCARD)

    name, paren, parenthetical = key.partition("(")
    optional = name.endswith("?")
    if optional:
        name = name[:-1]

    if not paren:
        return PropertyKey(name=name, optional=optional)

    parenthetical = parenthetical.rstrip(")")
    modifier, comma, description = parenthetical.partition(",")
    return PropertyKey(
        name=name,
        optional=optional,
        modifier=modifier,
        description=description.strip() if comma else None,
    )
