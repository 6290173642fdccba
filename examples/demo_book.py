#!/usr/bin/env python3
"""
Demo: Book record in picoschema.

This demonstrates translating shorthand with:
- Required and optional fields: title, pages?
- Scalar descriptions: "string, the book title"
- Array of nested objects: authors(array)
- Optional enum: format?(enum)
- Additional properties: (*)
"""

import json

from picoschema import check_schema, load_document_string, to_canonical_value, to_schema

DOCUMENT = """
title: string, the book title
pages?: integer, number of pages
format?(enum, binding): [hardcover, paperback]
authors(array, people who wrote it):
  name: string
  email?: string
(*): string
"""


def main():
    print("=" * 60)
    print("picoschema Demo: Book Record")
    print("=" * 60)

    print("\nShorthand:")
    print(DOCUMENT)

    schema = to_schema(load_document_string(DOCUMENT))

    print("JSON Schema (authored order):")
    print(schema.to_json(indent=2))

    result = check_schema(schema)
    print(f"\nMeta-schema check: {'passed' if result.is_valid else 'failed'}")

    print("\nCanonical value (sorted required):")
    print(json.dumps(to_canonical_value(schema), indent=2))


if __name__ == "__main__":
    main()
