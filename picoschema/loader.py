"""
Load picoschema documents from YAML or JSON.

JSON is a subset of YAML, so both are decoded with ``PicoschemaLoader``, a
``yaml.SafeLoader`` that resolves booleans the YAML 1.2 way: only
``true``/``false`` are booleans (``yes``, ``no``, ``on``, ``off`` stay strings)
and dates stay strings. Enum literals and property keys therefore reach the
translator as written. Mapping key order is preserved, which keeps property
order as authored.
"""

import logging
import re
from pathlib import Path
from typing import Any, Union

import yaml

from picoschema.errors import DocumentLoadError

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class PicoschemaLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans and no implicit timestamps."""


PicoschemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
PicoschemaLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_document_string(content: str) -> Any:
    """
    Decode YAML or JSON text into a dynamic value.

    Raises:
        DocumentLoadError: If the text is not valid YAML
    """
    try:
        return yaml.load(content, Loader=PicoschemaLoader)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"failed to parse YAML: {exc}") from exc


def load_document(file_path: Union[str, Path]) -> Any:
    """
    Read and decode a YAML or JSON schema document.

    Args:
        file_path: Path to a .yaml, .yml or .json file

    Returns:
        Any: Decoded value (None for an empty document)

    Raises:
        DocumentLoadError: If the file is missing, unreadable or not valid YAML
    """
    path = Path(file_path)

    if not path.is_file():
        raise DocumentLoadError(f"schema file not found: {path}")

    logger.debug("Loading schema document: %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(f"failed to read schema file {path}: {exc}") from exc

    try:
        return load_document_string(content)
    except DocumentLoadError as e:
        raise e.nest(str(path))
