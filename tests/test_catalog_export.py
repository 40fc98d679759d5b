import json
from pathlib import Path

from rivalscatalog.config import BuildPolicy
from rivalscatalog.models.report import BuildReport
from rivalscatalog.services.catalog_builder import (
    SourceTables,
    build_catalog,
)
from rivalscatalog.services.catalog_export import (
    build_report,
    card_to_dict,
    catalog_to_json,
    write_catalog,
)
from rivalscatalog.services.converters import to_city, to_faction, to_library, to_monster


class TestCardToDict:
    def test_city(self, city_raw: dict) -> None:
        data = card_to_dict(to_city("c1", city_raw))

        assert data == {
            "stack": "city",
            "id": "c1",
            "illustrator": "",
            "image": "",
            "name": "Old Manor",
            "set": "core",
            "text": "A haven.",
            "types": ["location"],
            "copies": 3,
        }

    def test_faction_uses_source_field_names(self, faction_raw: dict) -> None:
        data = card_to_dict(to_faction("f1", faction_raw))

        assert data["stack"] == "faction"
        assert data["bloodPotency"] == 2
        assert data["attributePhysical"] == 2
        assert data["attributeSocial"] == 1
        assert data["attributeMental"] == 0
        assert data["disciplines"] == ["potence", "presence"]
        assert data["types"] == ["character"]
        assert "blood_potency" not in data

    def test_library_omits_unset_optionals(self, library_raw: dict) -> None:
        data = card_to_dict(to_library("l1", library_raw))

        assert data["attackType"] == ["physical"]
        assert data["damage"] == 2
        for absent in ("clan", "bloodPotency", "reactionType", "shield", "flavor"):
            assert absent not in data

    def test_monster_has_no_id(self, monster_raw: dict) -> None:
        data = card_to_dict(to_monster("agent", monster_raw))

        assert "id" not in data
        assert data["stack"] == "monster"
        assert data["types"] == ["monster"]

    def test_export_round_trips_through_converter(self, faction_raw: dict) -> None:
        card = to_faction("f1", faction_raw)

        assert to_faction("f1", card_to_dict(card)) == card


class TestCatalogExport:
    def test_catalog_to_json_keeps_order(self, source_tables: SourceTables) -> None:
        catalog = build_catalog(source_tables)

        data = json.loads(catalog_to_json(catalog))

        assert [item["stack"] for item in data] == [card.stack.value for card in catalog]

    def test_write_catalog(self, source_tables: SourceTables, tmp_path: Path) -> None:
        catalog = build_catalog(source_tables)
        output = tmp_path / "out" / "catalog.json"

        path = write_catalog(catalog, output)

        assert path == output
        assert len(json.loads(output.read_text(encoding="utf-8"))) == len(catalog)


class TestBuildReport:
    def test_strict_report(self, source_tables: SourceTables) -> None:
        report = build_report(build_catalog(source_tables))

        assert isinstance(report, BuildReport)
        assert report.policy == "strict"
        assert report.total == 7
        assert report.counts["library"] == 2
        assert report.complete is True

    def test_lenient_report_lists_skipped(self, city_raw: dict) -> None:
        tables = SourceTables(city={"c1": city_raw, "c2": {**city_raw, "copies": 0}})
        catalog = build_catalog(tables, policy=BuildPolicy.LENIENT)

        report = build_report(catalog, BuildPolicy.LENIENT)

        assert report.complete is False
        assert report.total == 1
        skipped = report.skipped[0]
        assert skipped.card_ref == "c2"
        assert skipped.field == "copies"
        assert skipped.error_type == "InvalidNumericValueError"

    def test_report_serializes(self, source_tables: SourceTables) -> None:
        report = build_report(build_catalog(source_tables))

        data = json.loads(report.model_dump_json())

        assert data["total"] == 7
        assert list(data["counts"]) == ["city", "agenda", "haven", "library", "faction", "monster"]
