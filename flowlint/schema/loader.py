"""YAML/JSON loading and parsing for process IR documents."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import Definitions, ProcessDocument


def load_yaml(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw data.

    Args:
        path: Path to the document.

    Returns:
        The parsed data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_definitions(path: str | Path) -> Definitions:
    """Load and parse an IR document into Definitions.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data does not match the IR schema.
    """
    data = load_yaml(path)
    return parse_definitions_data(data)


def parse_definitions_from_string(text: str) -> Definitions:
    """Parse a YAML or JSON string into Definitions.

    Raises:
        SchemaLoadError: If the text cannot be parsed.
        SchemaValidationError: If the data does not match the IR schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return parse_definitions_data(data)


def parse_definitions_data(data: Any) -> Definitions:
    """Validate a raw ``{definitions: {...}}`` mapping into Definitions.

    Args:
        data: The raw IR mapping, as produced by the process builder.

    Returns:
        The parsed Definitions.

    Raises:
        SchemaValidationError: If the data does not match the IR schema.
    """
    if not isinstance(data, dict):
        raise SchemaValidationError(
            f"Expected a mapping with a 'definitions' key, got {type(data).__name__}",
            [{"loc": "", "msg": "Input should be a mapping", "type": "dict_type"}],
        )

    try:
        return ProcessDocument.model_validate(data).definitions
    except ValidationError as e:
        raise _to_schema_error(e) from e


def _to_schema_error(e: ValidationError) -> SchemaValidationError:
    errors = [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in e.errors()
    ]
    return SchemaValidationError(
        f"Schema validation failed with {len(errors)} error(s)", errors
    )
