"""
RivalsCatalog services.

Conversion of raw source entries and assembly of the catalog.
"""

from rivalscatalog.config import BuildPolicy
from rivalscatalog.services.catalog_builder import (
    Catalog,
    SourceTables,
    build_catalog,
    get_catalog,
)
from rivalscatalog.services.catalog_export import (
    build_report,
    card_to_dict,
    catalog_to_json,
    write_catalog,
)
from rivalscatalog.services.converters import (
    CONVERTERS,
    to_agenda,
    to_city,
    to_faction,
    to_haven,
    to_library,
    to_monster,
)

__all__ = [
    "BuildPolicy",
    "CONVERTERS",
    "Catalog",
    "SourceTables",
    "build_catalog",
    "build_report",
    "card_to_dict",
    "catalog_to_json",
    "get_catalog",
    "to_agenda",
    "to_city",
    "to_faction",
    "to_haven",
    "to_library",
    "to_monster",
    "write_catalog",
]
