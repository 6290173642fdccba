"""
Command-line interface module.

This module provides a terminal interface for picoschema using Typer and Rich.

Commands:
    - convert: Translate a picoschema document to JSON Schema
    - check: Translate and validate the result against the meta-schema

Example Usage:
    ```bash
    # Print the JSON Schema
    picoschema convert person.yaml

    # Canonical output written to a file
    picoschema convert person.yaml --canonical --output person.schema.json

    # Meta-schema check
    picoschema check person.yaml --show-schema
    ```
"""

from .main import app

__all__ = ["app"]
