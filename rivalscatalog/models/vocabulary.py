"""
Closed vocabularies for card fields.

Every field whose value is drawn from a fixed symbol list (set, clan,
discipline, attack type, per-category type tags) is validated against
a Vocabulary registry during conversion.

INVARIANTS:
- Each domain is a frozenset of symbols (immutable after construction)
- The registry exposes membership tests only, never mutation
- A narrower registry is a NEW registry (see with_domain)
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum


class CardSet(str, Enum):
    """Product a card was printed in."""

    CORE = "core"
    BLOOD_AND_ALCHEMY = "blood_and_alchemy"
    HEART_OF_EUROPE = "heart_of_europe"
    SHADOWS_AND_SHROUDS = "shadows_and_shrouds"
    WOLF_AND_RAT = "wolf_and_rat"
    THE_DEAD_OF_NIGHT = "the_dead_of_night"
    FALL_OF_LONDON = "fall_of_london"
    PROMO = "promo"


class Clan(str, Enum):
    """Vampire clans."""

    BANU_HAQIM = "Banu Haqim"
    BRUJAH = "Brujah"
    GANGREL = "Gangrel"
    HECATA = "Hecata"
    LASOMBRA = "Lasombra"
    MALKAVIAN = "Malkavian"
    MINISTRY = "Ministry"
    NOSFERATU = "Nosferatu"
    RAVNOS = "Ravnos"
    SALUBRI = "Salubri"
    THIN_BLOOD = "Thin-Blood"
    TOREADOR = "Toreador"
    TREMERE = "Tremere"
    TZIMISCE = "Tzimisce"
    VENTRUE = "Ventrue"


class Discipline(str, Enum):
    """Vampire disciplines."""

    ANIMALISM = "animalism"
    AUSPEX = "auspex"
    BLOOD_SORCERY = "blood_sorcery"
    CELERITY = "celerity"
    DOMINATE = "dominate"
    FORTITUDE = "fortitude"
    OBFUSCATE = "obfuscate"
    OBLIVION = "oblivion"
    POTENCE = "potence"
    PRESENCE = "presence"
    PROTEAN = "protean"
    THIN_BLOOD_ALCHEMY = "thin_blood_alchemy"


class AttackType(str, Enum):
    """Attack (and reaction) channels."""

    PHYSICAL = "physical"
    SOCIAL = "social"
    MENTAL = "mental"
    RANGED = "ranged"


class LibraryCardType(str, Enum):
    """Type tags allowed on library cards."""

    ACTION = "action"
    ALLY = "ally"
    ATTACK = "attack"
    CONSPIRACY = "conspiracy"
    ONGOING = "ongoing"
    REACTION = "reaction"
    RETAINER = "retainer"
    SCHEME = "scheme"
    SPECIAL = "special"
    TITLE = "title"
    TRAP = "trap"
    UNHOSTED = "unhosted"


class CityCardType(str, Enum):
    """Type tags allowed on city cards."""

    ALLY = "ally"
    EVENT = "event"
    GUEST = "guest"
    LOCATION = "location"
    MORTAL = "mortal"


class Domain(str, Enum):
    """Names of the closed vocabularies known to the registry."""

    SET = "set"
    CLAN = "clan"
    DISCIPLINE = "discipline"
    ATTACK_TYPE = "attack_type"
    LIBRARY_TYPE = "library_type"
    CITY_TYPE = "city_type"


def _symbols(enum_cls: type[Enum]) -> frozenset[str]:
    return frozenset(member.value for member in enum_cls)


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """
    Read-only registry of closed vocabularies.

    Attributes:
        sets: Valid card set symbols
        clans: Valid clan names
        disciplines: Valid discipline symbols
        attack_types: Valid attack/reaction channels
        library_types: Valid library card type tags
        city_types: Valid city card type tags
    """

    sets: frozenset[str]
    clans: frozenset[str]
    disciplines: frozenset[str]
    attack_types: frozenset[str]
    library_types: frozenset[str]
    city_types: frozenset[str]

    @classmethod
    def default(cls) -> "Vocabulary":
        """Build the registry from the enumerations in this module."""
        return cls(
            sets=_symbols(CardSet),
            clans=_symbols(Clan),
            disciplines=_symbols(Discipline),
            attack_types=_symbols(AttackType),
            library_types=_symbols(LibraryCardType),
            city_types=_symbols(CityCardType),
        )

    def symbols(self, domain: Domain) -> frozenset[str]:
        """Get the full symbol set of a domain."""
        return {
            Domain.SET: self.sets,
            Domain.CLAN: self.clans,
            Domain.DISCIPLINE: self.disciplines,
            Domain.ATTACK_TYPE: self.attack_types,
            Domain.LIBRARY_TYPE: self.library_types,
            Domain.CITY_TYPE: self.city_types,
        }[domain]

    def contains(self, domain: Domain, symbol: object) -> bool:
        """Check whether `symbol` belongs to `domain`. Non-strings never do."""
        if isinstance(symbol, Enum):
            symbol = symbol.value
        return isinstance(symbol, str) and symbol in self.symbols(domain)

    def with_domain(self, domain: Domain, symbols: Iterable[str]) -> "Vocabulary":
        """Return a new registry with one domain replaced."""
        field_name = {
            Domain.SET: "sets",
            Domain.CLAN: "clans",
            Domain.DISCIPLINE: "disciplines",
            Domain.ATTACK_TYPE: "attack_types",
            Domain.LIBRARY_TYPE: "library_types",
            Domain.CITY_TYPE: "city_types",
        }[domain]
        return replace(self, **{field_name: frozenset(symbols)})


DEFAULT_VOCABULARY = Vocabulary.default()
