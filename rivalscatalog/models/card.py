"""
Card records.

One frozen record class per category, discriminated by the `stack` tag.
Records are produced only by the category converters and never change
after construction.

INVARIANTS:
- `stack` and (for single-tag categories) `types` are fixed by the class
- List-valued fields are tuples (immutable)
- Monster records have no id
"""

from dataclasses import dataclass, field
from enum import Enum


class Stack(str, Enum):
    """Discriminant tag identifying a card's category."""

    AGENDA = "agenda"
    HAVEN = "haven"
    FACTION = "faction"
    LIBRARY = "library"
    CITY = "city"
    MONSTER = "monster"


# Fixed type tags of the single-tag categories
AGENDA_TYPES: tuple[str, ...] = ("agenda",)
HAVEN_TYPES: tuple[str, ...] = ("haven",)
CHARACTER_TYPES: tuple[str, ...] = ("character",)
MONSTER_TYPES: tuple[str, ...] = ("monster",)


@dataclass(frozen=True, slots=True)
class AgendaCard:
    """An agenda: a player's victory condition."""

    id: str
    illustrator: str
    image: str
    name: str
    set: str
    text: str
    types: tuple[str, ...] = field(default=AGENDA_TYPES, init=False)
    stack: Stack = field(default=Stack.AGENDA, init=False)


@dataclass(frozen=True, slots=True)
class HavenCard:
    """A haven: a player's home location."""

    id: str
    illustrator: str
    image: str
    name: str
    set: str
    text: str
    types: tuple[str, ...] = field(default=HAVEN_TYPES, init=False)
    stack: Stack = field(default=Stack.HAVEN, init=False)


@dataclass(frozen=True, slots=True)
class FactionCard:
    """
    A faction character (vampire).

    Attributes:
        clan: Clan the character belongs to
        blood_potency: Blood potency, >= 0
        attribute_physical: Physical attribute, >= 0
        attribute_social: Social attribute, >= 0
        attribute_mental: Mental attribute, >= 0
        disciplines: Disciplines the character has (may be empty)
        flavor: Flavor text, if printed
    """

    id: str
    illustrator: str
    image: str
    name: str
    set: str
    text: str
    clan: str
    blood_potency: int
    attribute_physical: int
    attribute_social: int
    attribute_mental: int
    disciplines: tuple[str, ...]
    flavor: str | None = None
    types: tuple[str, ...] = field(default=CHARACTER_TYPES, init=False)
    stack: Stack = field(default=Stack.FACTION, init=False)


@dataclass(frozen=True, slots=True)
class LibraryCard:
    """
    A library card.

    Every mechanic beyond the common fields is optional; None means the
    card does not have that mechanic at all (a printed 0 stays 0).

    Attributes:
        types: Non-empty tuple of library type tags
        clan: Clan requirement
        blood_potency: Blood potency requirement
        disciplines: Discipline requirements
        attack_type: Attack channels this card attacks with
        reaction_type: Attack channels this card reacts to
        damage: Damage dealt
        shield: Shield provided
        flavor: Flavor text
    """

    id: str
    illustrator: str
    image: str
    name: str
    set: str
    text: str
    types: tuple[str, ...]
    clan: str | None = None
    blood_potency: int | None = None
    disciplines: tuple[str, ...] | None = None
    attack_type: tuple[str, ...] | None = None
    reaction_type: tuple[str, ...] | None = None
    damage: int | None = None
    shield: int | None = None
    flavor: str | None = None
    stack: Stack = field(default=Stack.LIBRARY, init=False)


@dataclass(frozen=True, slots=True)
class CityCard:
    """
    A city deck card.

    Attributes:
        types: Non-empty tuple of city type tags
        copies: Number of copies in the city deck, >= 1
        blood: Blood gained, if any
        agenda: Agenda points gained, if any
        flavor: Flavor text
    """

    id: str
    illustrator: str
    image: str
    name: str
    set: str
    text: str
    types: tuple[str, ...]
    copies: int
    blood: int | None = None
    agenda: int | None = None
    flavor: str | None = None
    stack: Stack = field(default=Stack.CITY, init=False)


@dataclass(frozen=True, slots=True)
class MonsterCard:
    """A monster. Not individually addressable, so it has no id."""

    illustrator: str
    name: str
    blood_potency: int
    physical: int
    social: int
    mental: int
    set: str
    text: str
    blood: int | None = None
    agenda: int | None = None
    types: tuple[str, ...] = field(default=MONSTER_TYPES, init=False)
    stack: Stack = field(default=Stack.MONSTER, init=False)


Card = AgendaCard | HavenCard | FactionCard | LibraryCard | CityCard | MonsterCard


CARD_CLASSES: dict[Stack, type[Card]] = {
    Stack.AGENDA: AgendaCard,
    Stack.HAVEN: HavenCard,
    Stack.FACTION: FactionCard,
    Stack.LIBRARY: LibraryCard,
    Stack.CITY: CityCard,
    Stack.MONSTER: MonsterCard,
}


def card_ref(card: Card) -> str:
    """Get the identifier of a card, or its name for monsters."""
    if isinstance(card, MonsterCard):
        return card.name
    return card.id
