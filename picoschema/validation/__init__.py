"""
Validation layer module.

This module checks translated schemas against the JSON Schema meta-schema so
that problems in passthrough fields surface before the schema is used.

Components:
    - validator: Meta-schema check using the jsonschema library

Example:
    ```python
    from picoschema.validation import check_schema

    result = check_schema({"type": "string", "minLength": -1})
    if not result.is_valid:
        print(f"Check failed: {len(result.errors)} errors")
        for error in result.errors:
            print(f"  - {error.path}: {error.message}")
    ```
"""

from picoschema.validation.validator import (
    check_schema,
    ValidationResult,
    ValidationError,
    format_validation_errors
)

__all__ = [
    "check_schema",
    "ValidationResult",
    "ValidationError",
    "format_validation_errors",
]
