import pytest

from rivalscatalog.services.catalog_builder import SourceTables, get_catalog


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    """Drop the process-wide catalog between tests.

    get_catalog() caches the first build; without this a catalog built
    from one test's source directory would leak into the next.
    """
    get_catalog.cache_clear()
    yield
    get_catalog.cache_clear()


@pytest.fixture
def agenda_raw() -> dict:
    return {
        "illustrator": "Felipe Gaona",
        "image": "agenda-kingmaker.webp",
        "name": "Kingmaker",
        "set": "core",
        "text": "Gain 1 Agenda whenever a character you control becomes a Prince.",
        "types": ["agenda"],
    }


@pytest.fixture
def haven_raw() -> dict:
    return {
        "illustrator": "Mara Miranda",
        "image": "haven-catacombs.webp",
        "name": "Catacombs",
        "set": "core",
        "text": "Your characters have +1 Shield against Ranged attacks.",
    }


@pytest.fixture
def faction_raw() -> dict:
    return {
        "illustrator": "Ana Milosevic",
        "image": "faction-sister-lilith.webp",
        "name": "Sister Lilith",
        "set": "core",
        "text": "While attacking, gain +1 Damage.",
        "clan": "Brujah",
        "bloodPotency": 2,
        "attributePhysical": 2,
        "attributeSocial": 1,
        "attributeMental": 0,
        "disciplines": ["potence", "presence"],
        "flavor": "Rage is a gift.",
    }


@pytest.fixture
def library_raw() -> dict:
    return {
        "illustrator": "Dimitri Bielak",
        "image": "library-hunting-knife.webp",
        "name": "Hunting Knife",
        "set": "core",
        "text": "Attach to a character.",
        "types": ["attack"],
        "attackType": ["physical"],
        "damage": 2,
    }


@pytest.fixture
def city_raw() -> dict:
    return {
        "name": "Old Manor",
        "set": "core",
        "text": "A haven.",
        "types": ["location"],
        "copies": 3,
    }


@pytest.fixture
def monster_raw() -> dict:
    return {
        "illustrator": "Marco Primo",
        "name": "Second Inquisition Agent",
        "bloodPotency": 3,
        "physical": 3,
        "social": 1,
        "mental": 2,
        "set": "core",
        "text": "Deals 1 Aggravated damage when defeated.",
        "agenda": 1,
    }


@pytest.fixture
def source_tables(
    agenda_raw: dict,
    haven_raw: dict,
    faction_raw: dict,
    library_raw: dict,
    city_raw: dict,
    monster_raw: dict,
) -> SourceTables:
    """One valid entry per category (two for library)."""
    return SourceTables(
        city={"c1": city_raw},
        agenda={"a1": agenda_raw},
        haven={"h1": haven_raw},
        library={
            "l1": library_raw,
            "l2": {**library_raw, "name": "Blood Bond", "types": ["conspiracy", "ongoing"]},
        },
        faction={"f1": faction_raw},
        monster={"second-inquisition-agent": monster_raw},
    )
