"""
Error types raised while translating picoschema into JSON Schema.

Every failure is fatal to the whole translation: the first error aborts the
call and propagates to the caller. While an error travels back up through
nested properties or JSON Schema fields, each level prepends its own key to
``error.path`` so the final message pinpoints the offending location.

Hierarchy:
    PicoschemaError (ValueError)
    ├── UnsupportedValueKindError: value is not a string, list or mapping
    ├── UnsupportedScalarTypeError: unknown scalar type token
    ├── MalformedEnumError: an (enum) property whose value is not a list
    ├── UnknownModifierError: unknown parenthetical keyword
    ├── UnrecognizedFieldError: unknown key in a JSON-Schema-shaped mapping
    ├── FieldTypeMismatchError: a JSON Schema field has the wrong kind of value
    ├── SchemaEncodingError: schema could not be round-tripped through JSON
    └── DocumentLoadError: source document could not be read or decoded
"""

from typing import Any, List, Optional, Union

PathSegment = Union[str, int]


def describe_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value (``"object"``, ``"integer"``, ...)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def format_path(path: List[PathSegment]) -> str:
    """Render a path like ``properties.address[0]``."""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


class PicoschemaError(ValueError):
    """
    Base class for all translation errors.

    Attributes:
        message: Description of the problem at its origin
        path: Keys leading from the top-level value to the problem
    """

    def __init__(self, message: str, path: Optional[List[PathSegment]] = None):
        super().__init__(message)
        self.message = message
        self.path: List[PathSegment] = list(path or [])

    def nest(self, *segments: PathSegment) -> "PicoschemaError":
        """Prepend location segments while the error propagates outwards."""
        self.path[:0] = segments
        return self

    def __str__(self) -> str:
        if not self.path:
            return f"picoschema: {self.message}"
        return f"picoschema: {format_path(self.path)}: {self.message}"


class UnsupportedValueKindError(PicoschemaError):
    """A shorthand value is not a string, list or mapping."""

    def __init__(self, value: Any):
        super().__init__(
            f"value {value!r} of type {describe_kind(value)} is not an object, list or string"
        )
        self.value = value


class UnsupportedScalarTypeError(PicoschemaError):
    """A scalar token names a type the shorthand does not know."""

    def __init__(self, token: str):
        super().__init__(f"unsupported scalar type {token!r}")
        self.token = token


class MalformedEnumError(PicoschemaError):
    """An enum value is an empty list, or an (enum) property value is not a list."""


class UnknownModifierError(PicoschemaError):
    """A parenthetical modifier is not one of the recognised keywords."""

    def __init__(self, modifier: str, allowed: List[str]):
        super().__init__(
            f"parenthetical type {modifier!r} is none of {', '.join(allowed)}"
        )
        self.modifier = modifier


class UnrecognizedFieldError(PicoschemaError):
    """A JSON-Schema-shaped mapping uses a key outside the known field table."""

    def __init__(self, field: str):
        super().__init__(f"unrecognized JSON schema field name {field!r}")
        self.field = field


class FieldTypeMismatchError(PicoschemaError):
    """
    A JSON Schema field holds a value of the wrong kind.

    Attributes:
        field: JSON field name
        wanted: Description of the expected kind
        found: Kind of the value actually present
        index: Position of the offending element for list fields, else None
    """

    def __init__(self, field: str, wanted: str, found: str, index: Optional[int] = None):
        if index is None:
            message = f"found type {found} for field {field!r}, want {wanted}"
        else:
            message = f"found type {found} for field element {index} of {field!r}, want {wanted}"
        super().__init__(message)
        self.field = field
        self.wanted = wanted
        self.found = found
        self.index = index


class SchemaEncodingError(PicoschemaError):
    """A schema holds a passthrough value that cannot be encoded as JSON."""


class DocumentLoadError(PicoschemaError):
    """A schema document is missing, unreadable or not valid YAML."""
