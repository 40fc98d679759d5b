"""
Catalog export.

Lossless serialization of card records for consumers that need a wire
form. Field names are the source tables' camelCase names, the `stack`
discriminant is always present, and unset optional fields are omitted.
"""

import json
from dataclasses import fields
from pathlib import Path
from typing import Any

from rivalscatalog.config import BuildPolicy
from rivalscatalog.models.card import Card
from rivalscatalog.models.report import BuildReport, SkippedCard
from rivalscatalog.services.catalog_builder import Catalog

# Record attribute -> source field name, where they differ
EXPORT_NAMES: dict[str, str] = {
    "blood_potency": "bloodPotency",
    "attribute_physical": "attributePhysical",
    "attribute_social": "attributeSocial",
    "attribute_mental": "attributeMental",
    "attack_type": "attackType",
    "reaction_type": "reactionType",
}


def card_to_dict(card: Card) -> dict[str, Any]:
    """
    Convert a card record to a JSON-ready dict.

    Tuples become lists, enum tags become their string values, and
    optional fields that are None are left out.
    """
    data: dict[str, Any] = {"stack": card.stack.value}

    for f in fields(card):
        if f.name == "stack":
            continue
        value = getattr(card, f.name)
        if value is None:
            continue
        if isinstance(value, tuple):
            value = list(value)
        data[EXPORT_NAMES.get(f.name, f.name)] = value

    return data


def catalog_to_json(catalog: Catalog, indent: int | None = 2) -> str:
    """Serialize the whole catalog as a JSON array, in catalog order."""
    return json.dumps([card_to_dict(card) for card in catalog], indent=indent, ensure_ascii=False)


def write_catalog(catalog: Catalog, output_path: Path) -> Path:
    """
    Write the catalog JSON to a file.

    Args:
        catalog: Catalog to export
        output_path: Destination file. Parent directories are created.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(catalog_to_json(catalog))
    return output_path


def build_report(catalog: Catalog, policy: BuildPolicy | str = BuildPolicy.STRICT) -> BuildReport:
    """Summarize a built catalog."""
    return BuildReport(
        policy=BuildPolicy(policy).value,
        total=len(catalog),
        counts=catalog.counts(),
        skipped=[SkippedCard.from_error(error) for error in catalog.skipped],
    )
