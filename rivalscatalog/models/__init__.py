from rivalscatalog.models.card import (
    CARD_CLASSES,
    AgendaCard,
    Card,
    CityCard,
    FactionCard,
    HavenCard,
    LibraryCard,
    MonsterCard,
    Stack,
    card_ref,
)
from rivalscatalog.models.errors import (
    CardConversionError,
    CatalogBuildError,
    InvalidFieldTypeError,
    InvalidNumericValueError,
    InvalidVocabularyValueError,
    MissingRequiredFieldError,
    SourceTableError,
)
from rivalscatalog.models.report import BuildReport, SkippedCard
from rivalscatalog.models.vocabulary import (
    DEFAULT_VOCABULARY,
    AttackType,
    CardSet,
    CityCardType,
    Clan,
    Discipline,
    Domain,
    LibraryCardType,
    Vocabulary,
)

__all__ = [
    "AgendaCard",
    "AttackType",
    "BuildReport",
    "CARD_CLASSES",
    "Card",
    "CardConversionError",
    "CardSet",
    "CatalogBuildError",
    "CityCard",
    "CityCardType",
    "Clan",
    "DEFAULT_VOCABULARY",
    "Discipline",
    "Domain",
    "FactionCard",
    "HavenCard",
    "InvalidFieldTypeError",
    "InvalidNumericValueError",
    "InvalidVocabularyValueError",
    "LibraryCard",
    "LibraryCardType",
    "MissingRequiredFieldError",
    "MonsterCard",
    "SkippedCard",
    "SourceTableError",
    "Stack",
    "Vocabulary",
    "card_ref",
]
