"""
Settings Schema Files

Declarations kept in YAML instead of code:

    settings:
      - key: DATABASE_URL
        kind: string
      - key: PORT
        kind: number
        default: 8080
      - key: ALLOWED_HOSTS
        kind: list
        default: [localhost]

Custom settings need a Python parser and are declared in code only.
"""

import logging
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import TypeAdapter

from envsettings.core.builder import Builder
from envsettings.core.declarations import SettingDeclaration
from envsettings.utils.exceptions import SchemaError

logger = logging.getLogger(__name__)

_declarations_adapter = TypeAdapter(List[SettingDeclaration])


def parse_schema(document: Any) -> Builder:
    """
    Build a Builder from a parsed schema document.

    Args:
        document: Mapping with a 'settings' list of declaration mappings

    Returns:
        Builder holding the declarations in document order

    Raises:
        SchemaError: If the document shape is wrong or declares a custom setting
        ValidationError: If an entry has invalid options
    """
    if not isinstance(document, dict) or 'settings' not in document:
        raise SchemaError("Schema document must be a mapping with a 'settings' list")

    entries = document['settings'] or []
    if not isinstance(entries, list):
        raise SchemaError("'settings' must be a list of declarations")

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SchemaError(f"Declaration #{index} must be a mapping, got {type(entry).__name__}")
        if entry.get('kind') == 'custom':
            raise SchemaError(
                f"Declaration #{index} ({entry.get('key')}): custom settings cannot be declared in a schema file"
            )

    builder = Builder()
    for declaration in _declarations_adapter.validate_python(entries):
        builder.add(declaration)
    return builder


def load_schema(path: Union[str, Path]) -> Builder:
    """
    Read declarations from a YAML schema file.

    Args:
        path: Path to the YAML file

    Returns:
        Builder holding the file's declarations

    Raises:
        FileNotFoundError: If the file does not exist
        SchemaError: If the document shape is wrong
    """
    schema_file = Path(path)
    if not schema_file.exists():
        raise FileNotFoundError(f"Settings schema not found: {schema_file}")

    with open(schema_file) as f:
        document = yaml.safe_load(f)

    builder = parse_schema(document)
    logger.debug(f"Read {len(builder)} declarations from {schema_file}")
    return builder
