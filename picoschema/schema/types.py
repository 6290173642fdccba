"""
Schema node definitions for translated JSON Schema documents.

This module defines the typed output of the translator. A ``Schema`` holds the
fields the picoschema grammar writes directly (type, description, enum,
properties, items, required, additionalProperties) plus a passthrough bag for
every other JSON Schema field accepted by the structural mapper.

Additional properties policy:
    None        Not set, omitted from the encoded document
    FORBIDDEN   Encoded as ``"additionalProperties": false``
    Schema(...) Extra properties allowed if they match the given schema

Each node knows how to:
    - Encode itself into a plain JSON-ready dict (``to_dict``)
    - Serialize itself to JSON text (``to_json``)
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from picoschema.errors import SchemaEncodingError

JSON_SCHEMA_TYPES = ("string", "boolean", "null", "number", "integer", "object", "array")


@dataclass(frozen=True)
class Forbidden:
    """Additional properties are rejected."""

    def __repr__(self) -> str:
        return "FORBIDDEN"


FORBIDDEN = Forbidden()


@dataclass
class Schema:
    """
    One node of a JSON Schema document.

    Example JSON Schema:
        {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"type": "string"}}
            },
            "required": ["name"],
            "additionalProperties": false
        }

    Attributes:
        type: JSON type name, or "" for an unconstrained value
        description: Free text description ("" when unset)
        enum: Allowed literal values (None when not an enum)
        properties: Property name -> child schema, in authored order
        items: Schema for array elements
        required: Names of required properties
        additional_properties: FORBIDDEN, a catch-all Schema, or None
        extras: Other JSON Schema fields keyed by their JSON name
    """

    type: str = ""
    description: str = ""
    enum: Optional[List[Any]] = None
    properties: Optional[Dict[str, "Schema"]] = None
    items: Optional["Schema"] = None
    required: List[str] = field(default_factory=list)
    additional_properties: Union[Forbidden, "Schema", None] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Encode this schema as a plain dict ready for ``json.dumps``.

        Unset fields are omitted. An empty ``properties`` mapping is kept so
        that an object without fields still advertises them as empty.

        Returns:
            Dict: JSON Schema document
        """
        doc: Dict[str, Any] = {}
        if self.type:
            doc["type"] = self.type
        if self.description:
            doc["description"] = self.description
        if self.enum is not None:
            doc["enum"] = list(self.enum) if isinstance(self.enum, (list, tuple)) else self.enum
        if self.properties is not None:
            doc["properties"] = {name: prop.to_dict() for name, prop in self.properties.items()}
        if self.items is not None:
            doc["items"] = self.items.to_dict()
        if self.required:
            doc["required"] = list(self.required)
        if isinstance(self.additional_properties, Forbidden):
            doc["additionalProperties"] = False
        elif self.additional_properties is not None:
            doc["additionalProperties"] = self.additional_properties.to_dict()
        for name, value in self.extras.items():
            doc[name] = _encode_extra(value)
        return doc

    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Serialize this schema to JSON text.

        Raises:
            SchemaEncodingError: If a passthrough value is not JSON serializable
        """
        try:
            return json.dumps(self.to_dict(), indent=indent)
        except (TypeError, ValueError) as e:
            raise SchemaEncodingError(f"schema is not JSON serializable: {e}") from e


def _encode_extra(value: Any) -> Any:
    # Structural fields hold nested schemas, lists of them or maps of them.
    if isinstance(value, Schema):
        return value.to_dict()
    if isinstance(value, list) and value and all(isinstance(v, Schema) for v in value):
        return [v.to_dict() for v in value]
    if isinstance(value, dict) and value and all(isinstance(v, Schema) for v in value.values()):
        return {k: v.to_dict() for k, v in value.items()}
    return value
