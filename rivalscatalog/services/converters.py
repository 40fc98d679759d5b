"""
Category converters.

THIS MODULE IS THE TRUST BOUNDARY FOR SOURCE TABLE ENTRIES.

Each converter maps one raw source entry (key, attribute bag) to one
immutable card record:

    (key, raw bag)  (UNTRUSTED)
         │
         ▼
    to_<category>(key, raw, vocabulary)
         │   1. required fields present
         │   2. text fields are strings
         │   3. counts are integers in range
         │   4. vocabulary fields hold known symbols
         │   5. fixed tags set by the record class, never read
         ▼
    Card record  (TRUSTED)

Converters are pure functions of their input and the vocabulary. Any violation
raises a CardConversionError subclass naming the category, card, field
and offending value. Unknown raw keys are ignored.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from rivalscatalog.models.card import (
    AgendaCard,
    Card,
    CityCard,
    FactionCard,
    HavenCard,
    LibraryCard,
    MonsterCard,
    Stack,
)
from rivalscatalog.models.errors import (
    InvalidFieldTypeError,
    InvalidNumericValueError,
    InvalidVocabularyValueError,
    MissingRequiredFieldError,
)
from rivalscatalog.models.vocabulary import DEFAULT_VOCABULARY, Domain, Vocabulary

# Smallest legal value for counts and power levels
MIN_COUNT = 0

# A city card must appear at least once in the city deck
MIN_COPIES = 1

Converter = Callable[[str, Mapping[str, Any], Vocabulary], Card]


# =============================================================================
# SHARED VALIDATION HELPERS
# =============================================================================


@dataclass(frozen=True, slots=True)
class _RawEntry:
    """A raw entry under conversion, with what errors need to locate it."""

    category: Stack
    ref: str
    raw: Mapping[str, Any]
    vocabulary: Vocabulary

    def __post_init__(self) -> None:
        if not isinstance(self.raw, Mapping):
            raise InvalidFieldTypeError(
                self.category.value, self.ref, "<entry>", self.raw, "an object of fields"
            )

    def get(self, field: str) -> Any:
        # An explicit null is the same as an absent field
        return self.raw.get(field)

    def require(self, field: str) -> Any:
        value = self.get(field)
        if value is None:
            raise MissingRequiredFieldError(self.category.value, self.ref, field)
        return value

    def text(self, field: str, required: bool = True) -> str | None:
        value = self.require(field) if required else self.get(field)
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidFieldTypeError(self.category.value, self.ref, field, value, "a string")
        return value

    def credit(self, field: str) -> str:
        # Absent illustrator/image credits become empty strings
        value = self.get(field)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise InvalidFieldTypeError(self.category.value, self.ref, field, value, "a string")
        return value

    def count(self, field: str, minimum: int = MIN_COUNT, required: bool = True) -> int | None:
        value = self.require(field) if required else self.get(field)
        if value is None:
            return None
        # bool is an int subclass but never a count
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise InvalidNumericValueError(self.category.value, self.ref, field, value, minimum)
        return value

    def symbol(self, field: str, domain: Domain, required: bool = True) -> str | None:
        value = self.text(field, required=required)
        if value is None:
            return None
        if not self.vocabulary.contains(domain, value):
            raise InvalidVocabularyValueError(self.category.value, self.ref, field, value)
        return value

    def symbols(
        self,
        field: str,
        domain: Domain,
        required: bool = True,
        non_empty: bool = False,
    ) -> tuple[str, ...] | None:
        value = self.require(field) if required else self.get(field)
        if value is None:
            return None
        if not isinstance(value, list | tuple):
            raise InvalidFieldTypeError(
                self.category.value, self.ref, field, value, "a list of strings"
            )
        if non_empty and not value:
            raise InvalidFieldTypeError(
                self.category.value, self.ref, field, value, "a non-empty list"
            )
        seen: set[str] = set()
        for item in value:
            if not isinstance(item, str):
                raise InvalidFieldTypeError(self.category.value, self.ref, field, item, "a string")
            if not self.vocabulary.contains(domain, item):
                raise InvalidVocabularyValueError(self.category.value, self.ref, field, item)
            # Tag lists name each symbol at most once
            if item in seen:
                raise InvalidFieldTypeError(
                    self.category.value, self.ref, field, item, "a list without duplicates"
                )
            seen.add(item)
        return tuple(value)


def _common_fields(entry: _RawEntry, card_id: str) -> dict[str, Any]:
    """Validate the fields shared by every addressable card."""
    return {
        "id": card_id,
        "illustrator": entry.credit("illustrator"),
        "image": entry.credit("image"),
        "name": entry.text("name"),
        "set": entry.symbol("set", Domain.SET),
        "text": entry.text("text"),
    }


# =============================================================================
# CONVERTERS
# =============================================================================


def to_agenda(
    card_id: str,
    raw: Mapping[str, Any],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> AgendaCard:
    """
    Convert an agenda table entry.

    Raw `types` is ignored; agenda records are always tagged ["agenda"].

    Raises:
        CardConversionError: If any field fails validation
    """
    entry = _RawEntry(Stack.AGENDA, card_id, raw, vocabulary)
    return AgendaCard(**_common_fields(entry, card_id))


def to_haven(
    card_id: str,
    raw: Mapping[str, Any],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> HavenCard:
    """Convert a haven table entry. Tagged ["haven"] regardless of raw `types`."""
    entry = _RawEntry(Stack.HAVEN, card_id, raw, vocabulary)
    return HavenCard(**_common_fields(entry, card_id))


def to_faction(
    card_id: str,
    raw: Mapping[str, Any],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> FactionCard:
    """
    Convert a faction (character) table entry.

    Clan, blood potency, the three attributes and the discipline list are
    all required. Records are always tagged ["character"].

    Raises:
        CardConversionError: If any field fails validation
    """
    entry = _RawEntry(Stack.FACTION, card_id, raw, vocabulary)
    return FactionCard(
        **_common_fields(entry, card_id),
        clan=entry.symbol("clan", Domain.CLAN),
        blood_potency=entry.count("bloodPotency"),
        attribute_physical=entry.count("attributePhysical"),
        attribute_social=entry.count("attributeSocial"),
        attribute_mental=entry.count("attributeMental"),
        disciplines=entry.symbols("disciplines", Domain.DISCIPLINE),
        flavor=entry.text("flavor", required=False),
    )


def to_library(
    card_id: str,
    raw: Mapping[str, Any],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> LibraryCard:
    """
    Convert a library table entry.

    `types` is read from the source and must be a non-empty list of
    library type tags. Every other mechanic is optional and left None
    when absent.

    Raises:
        CardConversionError: If any field fails validation
    """
    entry = _RawEntry(Stack.LIBRARY, card_id, raw, vocabulary)
    return LibraryCard(
        **_common_fields(entry, card_id),
        types=entry.symbols("types", Domain.LIBRARY_TYPE, non_empty=True),
        clan=entry.symbol("clan", Domain.CLAN, required=False),
        blood_potency=entry.count("bloodPotency", required=False),
        disciplines=entry.symbols("disciplines", Domain.DISCIPLINE, required=False),
        attack_type=entry.symbols("attackType", Domain.ATTACK_TYPE, required=False),
        reaction_type=entry.symbols("reactionType", Domain.ATTACK_TYPE, required=False),
        damage=entry.count("damage", required=False),
        shield=entry.count("shield", required=False),
        flavor=entry.text("flavor", required=False),
    )


def to_city(
    card_id: str,
    raw: Mapping[str, Any],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> CityCard:
    """
    Convert a city table entry.

    `copies` is the number of copies shuffled into the city deck and
    must be at least 1.

    Raises:
        CardConversionError: If any field fails validation
    """
    entry = _RawEntry(Stack.CITY, card_id, raw, vocabulary)
    return CityCard(
        **_common_fields(entry, card_id),
        types=entry.symbols("types", Domain.CITY_TYPE, non_empty=True),
        copies=entry.count("copies", minimum=MIN_COPIES),
        blood=entry.count("blood", required=False),
        agenda=entry.count("agenda", required=False),
        flavor=entry.text("flavor", required=False),
    )


def to_monster(
    key: str,
    raw: Mapping[str, Any],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> MonsterCard:
    """
    Convert a monster table entry.

    Monsters have no id. The table key is only used to name the entry in
    errors when the raw `name` itself is unusable.

    Raises:
        CardConversionError: If any field fails validation
    """
    name = raw.get("name") if isinstance(raw, Mapping) else None
    ref = name if isinstance(name, str) and name else key
    entry = _RawEntry(Stack.MONSTER, ref, raw, vocabulary)
    return MonsterCard(
        illustrator=entry.credit("illustrator"),
        name=entry.text("name"),
        blood_potency=entry.count("bloodPotency"),
        physical=entry.count("physical"),
        social=entry.count("social"),
        mental=entry.count("mental"),
        set=entry.symbol("set", Domain.SET),
        text=entry.text("text"),
        blood=entry.count("blood", required=False),
        agenda=entry.count("agenda", required=False),
    )


CONVERTERS: dict[Stack, Converter] = {
    Stack.AGENDA: to_agenda,
    Stack.HAVEN: to_haven,
    Stack.FACTION: to_faction,
    Stack.LIBRARY: to_library,
    Stack.CITY: to_city,
    Stack.MONSTER: to_monster,
}
