"""
CLI command implementations.

This module contains the logic behind each CLI command:
- convert: Translate a picoschema document to JSON Schema
- check: Translate, then validate the result against the meta-schema
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape

from picoschema.api import to_schema
from picoschema.errors import PicoschemaError
from picoschema.loader import load_document
from picoschema.schema.normalizer import to_canonical_value
from picoschema.validation import check_schema

from .display import (
    print_error,
    print_json,
    print_success,
    print_validation_errors,
)

logger = logging.getLogger(__name__)


def translate_file(source: Path, canonical: bool = False) -> Optional[Any]:
    """
    Load a document and translate it to an encoded JSON Schema.

    Args:
        source: Path to a YAML or JSON picoschema document
        canonical: Sort ``required`` lists for stable comparison

    Returns:
        The JSON Schema as plain data, or None for an empty document

    Raises:
        PicoschemaError: If loading or translation fails
    """
    schema = to_schema(load_document(source))
    if schema is None:
        return None
    if canonical:
        return to_canonical_value(schema)
    # Encode through JSON so unserializable passthrough values fail here.
    return json.loads(schema.to_json())


def convert_command(
    source: Path,
    output_path: Optional[Path],
    canonical: bool,
    indent: int,
    check: bool
) -> None:
    """
    Execute the convert command.

    Args:
        source: Path to the picoschema document
        output_path: Optional path to write the JSON Schema to
        canonical: Whether to emit canonical (sorted) output
        indent: JSON indentation
        check: Whether to run the meta-schema check before writing
    """
    try:
        document = translate_file(source, canonical=canonical)
    except PicoschemaError as e:
        print_error(f"Failed to convert {source}: {escape(str(e))}")
        raise SystemExit(1)

    if document is None:
        print_error(f"No schema found in {source}")
        raise SystemExit(1)

    if check:
        result = check_schema(document)
        if not result.is_valid:
            print_error("Generated schema failed the meta-schema check")
            print_validation_errors(result.errors)
            raise SystemExit(1)

    if output_path is None:
        print_json(document, indent=indent)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(document, indent=indent) + "\n", encoding="utf-8")
    logger.debug("Wrote %s", output_path)
    print_success(f"Schema written to: {output_path}")


def check_command(source: Path, show_schema: bool) -> None:
    """
    Execute the check command.

    Args:
        source: Path to the picoschema document
        show_schema: Whether to display the generated schema
    """
    try:
        document = translate_file(source)
    except PicoschemaError as e:
        print_error(f"Failed to convert {source}: {escape(str(e))}")
        raise SystemExit(1)

    if document is None:
        print_error(f"No schema found in {source}")
        raise SystemExit(1)

    if show_schema:
        print_json(document, title="Generated Schema")

    result = check_schema(document)
    if not result.is_valid:
        print_error("Schema check failed")
        print_validation_errors(result.errors)
        raise SystemExit(1)

    print_success(f"{source} is a valid schema")
