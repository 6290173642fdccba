"""
Meta-schema check for translated schemas.

Translation only guarantees that the output is shaped like a JSON Schema; it
does not check that, for example, a passthrough ``format`` or ``minimum``
holds a sensible value. This module validates a translated schema against
the JSON Schema 2020-12 meta-schema and reports every problem found.

Usage:
    ```python
    from picoschema import to_schema
    from picoschema.validation import check_schema

    result = check_schema(to_schema({"name": "string"}))
    if not result.is_valid:
        for error in result.errors:
            print(f"Error at {error.path}: {error.message}")
    ```
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from jsonschema import Draft202012Validator

from picoschema.schema.types import Schema

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """
    A single meta-schema violation.

    Attributes:
        path: Location in the schema document (e.g., ".properties.age.minimum")
        message: Human-readable error message
        validator: Meta-schema keyword that failed (e.g., "type")
    """
    path: str
    message: str
    validator: str


@dataclass
class ValidationResult:
    """
    Result of checking a schema document.

    Attributes:
        is_valid: Whether the document is a valid JSON Schema
        errors: List of violations (empty if valid)
        document: The encoded schema that was checked
    """
    is_valid: bool
    errors: List[ValidationError]
    document: Dict[str, Any]


def check_schema(schema: Union[Schema, Dict[str, Any]]) -> ValidationResult:
    """
    Validate a schema against the JSON Schema 2020-12 meta-schema.

    Args:
        schema: Translated Schema or its encoded dict

    Returns:
        ValidationResult: All violations found, in document order
    """
    document = schema.to_dict() if isinstance(schema, Schema) else schema

    meta = Draft202012Validator(Draft202012Validator.META_SCHEMA)
    errors = [
        _convert_jsonschema_error(error)
        for error in sorted(meta.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    ]
    logger.debug("Meta-schema check found %d error(s)", len(errors))

    return ValidationResult(is_valid=not errors, errors=errors, document=document)


def _convert_jsonschema_error(error: Any) -> ValidationError:
    path = "." + ".".join(str(p) for p in error.path) if error.path else "root"
    return ValidationError(path=path, message=error.message, validator=str(error.validator))


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format meta-schema errors as a human-readable string.

    Example:
        ```python
        print(format_validation_errors(result.errors))
        # Schema check failed with 1 error(s):
        #
        #   1. At .properties.age.minimum: 'zero' is not of type 'number'
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Schema check failed with {len(errors)} error(s):"]
    for i, error in enumerate(errors, 1):
        lines.append(f"\n  {i}. At {error.path}: {error.message}")

    return "\n".join(lines)
