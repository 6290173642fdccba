"""
picoschema: Compact Schema Shorthand for JSON Schema

picoschema lets authors describe object shapes, scalar types, arrays, enums,
optional fields and inline descriptions with one short line per field, and
translates that shorthand into a standard JSON Schema document.

Key Features:
    - Scalar types with inline descriptions: ``name: string, the full name``
    - Optional fields: ``age?: integer``
    - Arrays, nested objects and enums via parentheticals:
      ``tags(array): string``, ``color?(enum): [red, green]``
    - Schema for additional properties: ``(*): string``
    - Documents that already are JSON Schema are passed through, typed

Quick Start:
    ```python
    from picoschema import load_document_string, to_schema, to_canonical_value

    doc = load_document_string('''
    title: string
    pages?: integer, number of pages
    authors(array, people who wrote it):
      name: string
      email?: string
    ''')

    schema = to_schema(doc)
    print(schema.to_json(indent=2))
    ```

Architecture:
    1. Shape Detector: JSON Schema or picoschema?
    2. Picoschema Parser: shorthand -> Schema, via the scalar and key lexers
    3. Structural Mapper: JSON Schema mapping -> Schema, via a field table
    4. Normalizer: canonical JSON value for comparisons
"""

__version__ = "0.1.0"

from picoschema.api import to_schema, to_canonical_value  # noqa: F401
from picoschema.errors import (  # noqa: F401
    DocumentLoadError,
    FieldTypeMismatchError,
    MalformedEnumError,
    PicoschemaError,
    SchemaEncodingError,
    UnknownModifierError,
    UnrecognizedFieldError,
    UnsupportedScalarTypeError,
    UnsupportedValueKindError,
)
from picoschema.loader import load_document, load_document_string  # noqa: F401
from picoschema.schema import (  # noqa: F401
    FORBIDDEN,
    Schema,
    looks_like_json_schema,
    map_to_schema,
    parse_pico,
    sort_schema_lists,
)
from picoschema.validation import check_schema  # noqa: F401

__all__ = [
    "to_schema",
    "to_canonical_value",
    "parse_pico",
    "map_to_schema",
    "looks_like_json_schema",
    "sort_schema_lists",
    "Schema",
    "FORBIDDEN",
    "load_document",
    "load_document_string",
    "check_schema",
    "PicoschemaError",
    "UnsupportedValueKindError",
    "UnsupportedScalarTypeError",
    "MalformedEnumError",
    "UnknownModifierError",
    "UnrecognizedFieldError",
    "FieldTypeMismatchError",
    "SchemaEncodingError",
    "DocumentLoadError",
]
