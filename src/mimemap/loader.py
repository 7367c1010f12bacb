"""Loaders producing mapping tables from files on disk."""

import json
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from src.logging import get_logger

from .exceptions import TableLoadError
from .generator import MimeMappingGenerator
from .table import MappingTable, RawTable

logger = get_logger(__name__)

# Bundled mime.types file backing the built-in table
DEFAULT_DATA_FILE = "mime.types"


def read_default_data() -> str:
    """
    Read the bundled ``mime.types`` text.

    Raises:
        TableLoadError: If the bundled data file cannot be read
    """
    source = resources.files(__package__) / "data" / DEFAULT_DATA_FILE
    try:
        return source.read_text(encoding="utf-8")
    except OSError as e:
        raise TableLoadError(
            "Cannot read built-in mime.types data", str(source), table_format="mime.types"
        ) from e


def read_mime_types_file(path: str | Path) -> str:
    """
    Read the text of a ``mime.types`` file.

    Raises:
        TableLoadError: If the file cannot be read
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TableLoadError("Cannot read mime.types file", str(path), table_format="mime.types") from e


def generate_table(text: str, source: str) -> MappingTable:
    """
    Generate a table from ``mime.types`` text.

    Args:
        text: Contents of a ``mime.types`` file
        source: Name of the file, used in errors

    Returns:
        The generated table

    Raises:
        TableLoadError: If the text holds no mappings
    """
    table = MimeMappingGenerator(text).generate_mapping()
    if not table.mimes:
        raise TableLoadError("mime.types data contains no mappings", source, table_format="mime.types")
    return table


def load_default_table() -> RawTable:
    """
    Load the built-in table from the bundled ``mime.types`` file.

    Returns:
        The generated table

    Raises:
        TableLoadError: If the bundled data file is missing or holds no mappings
    """
    table = generate_table(read_default_data(), DEFAULT_DATA_FILE).to_raw()
    logger.info("Loaded built-in mapping table (%d extensions)", len(table["mimes"]))
    return table


def load_mime_types_file(path: str | Path) -> RawTable:
    """
    Load a table from an Apache ``mime.types`` file.

    Args:
        path: Path to the file

    Returns:
        The generated table

    Raises:
        TableLoadError: If the file cannot be read or holds no mappings
    """
    table = generate_table(read_mime_types_file(path), str(path))
    logger.debug("Loaded mime.types file %s", path)
    return table.to_raw()


def load_json_table(path: str | Path) -> RawTable:
    """
    Load a table from a JSON file with "extensions" and "mimes" entries.

    Args:
        path: Path to the JSON file

    Returns:
        The validated table

    Raises:
        TableLoadError: If the file cannot be read, is not JSON or has the
            wrong shape
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise TableLoadError("Cannot read mapping table", str(path), table_format="json") from e
    except json.JSONDecodeError as e:
        raise TableLoadError("Mapping table is not valid JSON", str(path), table_format="json") from e

    try:
        table = MappingTable.from_raw(data)
    except ValidationError as e:
        raise TableLoadError(
            "Mapping table has an invalid structure",
            str(path),
            {"errors": e.error_count()},
            table_format="json",
        ) from e

    logger.debug("Loaded JSON mapping table %s", path)
    return table.to_raw()
