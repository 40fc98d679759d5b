"""
Source table loader.

Reads the six raw category tables from JSON files. Each file holds one
JSON object mapping card id to attribute bag; object key order is kept
as the catalog order of the entries.

No validation of the entries happens here. That is the converters' job.
"""

import json
from pathlib import Path
from typing import Any

from rivalscatalog.config import CATEGORY_ORDER, SOURCE_FILES
from rivalscatalog.models.errors import SourceTableError
from rivalscatalog.services.catalog_builder import SourceTables


def load_source_table(path: Path) -> dict[str, Any]:
    """
    Load one source table.

    Args:
        path: Path to a JSON file holding an object of entries

    Returns:
        Dict mapping card id to raw attribute bag, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        SourceTableError: If the file is not valid JSON, not an object,
            or repeats a key
    """
    if not path.exists():
        raise FileNotFoundError(f"Source table not found at {path}.")

    def unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        # Ids must be unique within a table
        obj: dict[str, Any] = {}
        for key, value in pairs:
            if key in obj:
                raise SourceTableError(str(path), f"duplicate key '{key}'")
            obj[key] = value
        return obj

    with open(path, encoding="utf-8") as f:
        try:
            table = json.load(f, object_pairs_hook=unique_keys)
        except json.JSONDecodeError as e:
            raise SourceTableError(str(path), f"not valid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(table, dict):
        raise SourceTableError(str(path), f"expected an object, got {type(table).__name__}")

    return table


def load_source_tables(source_dir: Path, allow_missing: bool = False) -> SourceTables:
    """
    Load all six source tables from a directory.

    Args:
        source_dir: Directory containing city.json, agendas.json, havens.json,
            library.json, factions.json and monster.json
        allow_missing: Treat a missing file as an empty table

    Returns:
        SourceTables ready for build_catalog

    Raises:
        FileNotFoundError: If a file is missing and allow_missing is False
        SourceTableError: If a file is malformed
    """
    tables: dict[str, dict[str, Any]] = {}

    for stack in CATEGORY_ORDER:
        path = source_dir / SOURCE_FILES[stack]
        if allow_missing and not path.exists():
            tables[stack.value] = {}
            continue
        tables[stack.value] = load_source_table(path)

    return SourceTables.from_mapping(tables)
