from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from rivalscatalog.models.card import Stack


class BuildPolicy(str, Enum):
    """What a catalog build does with an entry that fails conversion."""

    STRICT = "strict"  # Refuse the whole build
    LENIENT = "lenient"  # Skip the entry, log it, publish the rest


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "RivalsCatalog"
    debug: bool = False

    # Directory holding one JSON source table per category
    source_dir: Path = Path("data/sources")

    # Where the build job writes the assembled catalog
    export_path: Path = Path("data/catalog.json")

    # Unknown policy names fail at startup
    build_policy: BuildPolicy = BuildPolicy.STRICT


settings = Settings()


# =============================================================================
# CATALOG LAYOUT
# =============================================================================

# Concatenation order of the categories in the assembled catalog.
# Downstream indexes rely on this order being stable.
CATEGORY_ORDER: tuple[Stack, ...] = (
    Stack.CITY,
    Stack.AGENDA,
    Stack.HAVEN,
    Stack.LIBRARY,
    Stack.FACTION,
    Stack.MONSTER,
)

# Source table file name per category
SOURCE_FILES: dict[Stack, str] = {
    Stack.CITY: "city.json",
    Stack.AGENDA: "agendas.json",
    Stack.HAVEN: "havens.json",
    Stack.LIBRARY: "library.json",
    Stack.FACTION: "factions.json",
    Stack.MONSTER: "monster.json",
}
