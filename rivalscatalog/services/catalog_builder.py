"""
Catalog assembly.

Runs every source table through its category converter and concatenates
the results into one ordered, immutable catalog.

INVARIANTS:
- Categories are concatenated in CATEGORY_ORDER
- Entries keep their source table (insertion) order within a category
- A STRICT build with any failing entry publishes NO catalog
- A built catalog is never mutated; rebuilding creates a new one
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from rivalscatalog.config import CATEGORY_ORDER, BuildPolicy, settings
from rivalscatalog.models.card import Card, Stack, card_ref
from rivalscatalog.models.errors import CardConversionError, CatalogBuildError
from rivalscatalog.models.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from rivalscatalog.services.converters import CONVERTERS

logger = logging.getLogger(__name__)

RawTable = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class SourceTables:
    """
    The six raw source tables, one per category.

    Each table maps a card id (monster: a name-like key) to a raw
    attribute bag. Iteration order of each mapping is the catalog order
    of its entries.
    """

    city: RawTable = field(default_factory=dict)
    agenda: RawTable = field(default_factory=dict)
    haven: RawTable = field(default_factory=dict)
    library: RawTable = field(default_factory=dict)
    faction: RawTable = field(default_factory=dict)
    monster: RawTable = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, tables: Mapping[str, RawTable]) -> "SourceTables":
        """Build from a {category: table} mapping. Missing categories are empty."""
        by_name = {Stack(category).value: table for category, table in tables.items()}
        return cls(**by_name)

    def table(self, stack: Stack) -> RawTable:
        """Get the raw table of a category."""
        table: RawTable = getattr(self, stack.value)
        return table

    def entry_count(self) -> int:
        """Total number of raw entries across all tables."""
        return sum(len(self.table(stack)) for stack in CATEGORY_ORDER)


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    The assembled card catalog.

    Safe to iterate any number of times. There is no mutation API;
    a rebuild produces a new Catalog.

    Attributes:
        cards: Every converted card, in catalog order
        skipped: Entries dropped by a LENIENT build (always empty for STRICT)
    """

    cards: tuple[Card, ...] = ()
    skipped: tuple[CardConversionError, ...] = ()

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def by_stack(self, stack: Stack | str) -> tuple[Card, ...]:
        """Get all cards of one category, in catalog order."""
        stack = Stack(stack)
        return tuple(card for card in self.cards if card.stack == stack)

    def find(self, stack: Stack | str, ref: str) -> Card | None:
        """Find a card by category and id (name for monsters)."""
        for card in self.by_stack(stack):
            if card_ref(card) == ref:
                return card
        return None

    def counts(self) -> dict[str, int]:
        """Number of cards per category, every category included."""
        counts = {stack.value: 0 for stack in CATEGORY_ORDER}
        for card in self.cards:
            counts[card.stack.value] += 1
        return counts


def build_catalog(
    tables: SourceTables,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    policy: BuildPolicy | str = BuildPolicy.STRICT,
) -> Catalog:
    """
    Convert every source entry and assemble the catalog.

    Args:
        tables: The six raw source tables
        vocabulary: Registry used to validate closed-vocabulary fields
        policy: STRICT refuses the build on any failure,
            LENIENT skips failing entries and logs them

    Returns:
        Catalog with cards in category order
        (city, agenda, haven, library, faction, monster)

    Raises:
        CatalogBuildError: STRICT policy and at least one entry failed.
            Carries every failure, not just the first.
    """
    policy = BuildPolicy(policy)
    cards: list[Card] = []
    errors: list[CardConversionError] = []

    for stack in CATEGORY_ORDER:
        convert = CONVERTERS[stack]
        for key, raw in tables.table(stack).items():
            try:
                cards.append(convert(key, raw, vocabulary))
            except CardConversionError as e:
                errors.append(e)

    if errors and policy is BuildPolicy.STRICT:
        logger.error(
            "catalog_build_failed",
            extra={
                "error_count": len(errors),
                "first_error": str(errors[0]),
                "entry_count": tables.entry_count(),
            },
        )
        raise CatalogBuildError(errors)

    for error in errors:
        logger.warning(
            "card_skipped",
            extra={
                "category": error.category,
                "card_ref": error.card_ref,
                "field": error.field,
                "reason": error.reason,
            },
        )

    catalog = Catalog(cards=tuple(cards), skipped=tuple(errors))
    logger.info(
        "catalog_built",
        extra={
            "policy": policy.value,
            "card_count": len(catalog),
            "skipped_count": len(catalog.skipped),
            "counts": catalog.counts(),
        },
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """
    Get the process-wide catalog.

    Built from the source tables in settings.source_dir on first call,
    then cached. Call get_catalog.cache_clear() to force a rebuild.

    Raises:
        FileNotFoundError: If a source table file doesn't exist
        CatalogBuildError: If the build is refused
    """
    from rivalscatalog.parsers.source_tables import load_source_tables

    tables = load_source_tables(settings.source_dir)
    return build_catalog(tables, policy=settings.build_policy)
