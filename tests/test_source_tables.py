import json
from pathlib import Path

import pytest

from rivalscatalog.models.card import Stack
from rivalscatalog.models.errors import SourceTableError
from rivalscatalog.parsers.source_tables import load_source_table, load_source_tables


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory with all six tables, the library table holding three entries."""
    files = {
        "city.json": {"c1": {"name": "Old Manor"}},
        "agendas.json": {"a1": {"name": "Kingmaker"}},
        "havens.json": {"h1": {"name": "Catacombs"}},
        "library.json": {
            "l3": {"name": "Third"},
            "l1": {"name": "First"},
            "l2": {"name": "Second"},
        },
        "factions.json": {"f1": {"name": "Sister Lilith"}},
        "monster.json": {"agent": {"name": "Second Inquisition Agent"}},
    }
    for name, content in files.items():
        (tmp_path / name).write_text(json.dumps(content), encoding="utf-8")
    return tmp_path


class TestLoadSourceTable:
    def test_keeps_file_order(self, source_dir: Path) -> None:
        table = load_source_table(source_dir / "library.json")

        assert list(table) == ["l3", "l1", "l2"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Source table not found"):
            load_source_table(tmp_path / "city.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "city.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SourceTableError, match="not valid JSON"):
            load_source_table(path)

    def test_array_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "city.json"
        path.write_text(json.dumps([{"name": "Old Manor"}]), encoding="utf-8")

        with pytest.raises(SourceTableError) as exc_info:
            load_source_table(path)

        assert exc_info.value.path == str(path)
        assert "expected an object" in exc_info.value.reason

    def test_duplicate_id_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "library.json"
        path.write_text(
            '{"l1": {"name": "Hunting Knife"}, "l1": {"name": "Bloodlust"}}',
            encoding="utf-8",
        )

        with pytest.raises(SourceTableError, match="duplicate key 'l1'"):
            load_source_table(path)

    def test_duplicate_field_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "city.json"
        path.write_text('{"c1": {"copies": 1, "copies": 3}}', encoding="utf-8")

        with pytest.raises(SourceTableError, match="duplicate key 'copies'"):
            load_source_table(path)


class TestLoadSourceTables:
    def test_loads_all_categories(self, source_dir: Path) -> None:
        tables = load_source_tables(source_dir)

        assert tables.entry_count() == 8
        assert list(tables.table(Stack.AGENDA)) == ["a1"]
        assert list(tables.table(Stack.FACTION)) == ["f1"]
        assert list(tables.table(Stack.MONSTER)) == ["agent"]

    def test_missing_file_fails_by_default(self, source_dir: Path) -> None:
        (source_dir / "monster.json").unlink()

        with pytest.raises(FileNotFoundError):
            load_source_tables(source_dir)

    def test_allow_missing(self, source_dir: Path) -> None:
        (source_dir / "monster.json").unlink()

        tables = load_source_tables(source_dir, allow_missing=True)

        assert tables.table(Stack.MONSTER) == {}
        assert tables.entry_count() == 7
