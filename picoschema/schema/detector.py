"""
Shape detection - decide whether a decoded value is JSON Schema or picoschema.

A mapping is treated as JSON Schema when its ``type`` is one of the JSON
Schema type names, or when it has a ``properties`` mapping. Everything else
is picoschema shorthand.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from picoschema.schema.types import JSON_SCHEMA_TYPES

logger = logging.getLogger(__name__)


class Route(Enum):
    JSON_SCHEMA = "json_schema"
    # JSON Schema without a type but with properties; result is forced to object.
    JSON_SCHEMA_OBJECT = "json_schema_object"
    PICOSCHEMA = "picoschema"


def route(value: Any) -> Route:
    """
    Pick the translator for a decoded value.

    Args:
        value: Decoded document (not None)

    Returns:
        Route: Which translator should handle the value

    Example:
        ```python
        route({"type": "object", "properties": {}})  # Route.JSON_SCHEMA
        route({"properties": {"a": {}}})              # Route.JSON_SCHEMA_OBJECT
        route({"name": "string"})                     # Route.PICOSCHEMA
        ```
    """
    result = Route.PICOSCHEMA
    if isinstance(value, Mapping):
        type_name = value.get("type")
        if isinstance(type_name, str) and type_name in JSON_SCHEMA_TYPES:
            result = Route.JSON_SCHEMA
        elif isinstance(value.get("properties"), Mapping):
            result = Route.JSON_SCHEMA_OBJECT

    logger.debug("Routing %s value to %s", type(value).__name__, result.value)
    return result


def looks_like_json_schema(value: Any) -> bool:
    """Whether ``value`` should be read as a JSON Schema document."""
    return route(value) is not Route.PICOSCHEMA
