"""
Conversion error hierarchy.

Every failure carries enough context to locate the offending source
record: category, card reference (id, or name for monsters), field and
offending value.

These are HARD FAILURES. A converter never returns a partial record.
"""

from typing import Any


class CardConversionError(Exception):
    """
    Base exception for a raw entry that cannot become a card record.

    Attributes:
        category: Category of the source table ("library", "city", ...)
        card_ref: Card id, or name for monsters
        field: Raw field name that failed (camelCase, as in the source)
        value: Offending raw value (None when the field is missing)
        reason: Short description of the violated rule
    """

    def __init__(
        self,
        category: str,
        card_ref: str,
        field: str,
        reason: str,
        value: Any = None,
    ) -> None:
        self.category = category
        self.card_ref = card_ref
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{category} card '{card_ref}': field '{field}' {reason}")


class MissingRequiredFieldError(CardConversionError):
    """Raised when a required field is absent from a raw entry."""

    def __init__(self, category: str, card_ref: str, field: str) -> None:
        super().__init__(category, card_ref, field, reason="is required but missing")


class InvalidVocabularyValueError(CardConversionError):
    """Raised when a closed-vocabulary field holds an unknown symbol."""

    def __init__(self, category: str, card_ref: str, field: str, value: Any) -> None:
        super().__init__(
            category,
            card_ref,
            field,
            reason=f"has unknown value {value!r}",
            value=value,
        )


class InvalidNumericValueError(CardConversionError):
    """Raised when a count is not an integer or is out of range."""

    def __init__(
        self,
        category: str,
        card_ref: str,
        field: str,
        value: Any,
        minimum: int,
    ) -> None:
        self.minimum = minimum
        super().__init__(
            category,
            card_ref,
            field,
            reason=f"must be an integer >= {minimum}, got {value!r}",
            value=value,
        )


class InvalidFieldTypeError(CardConversionError):
    """Raised when a field has the wrong shape (e.g. text that is not a string)."""

    def __init__(self, category: str, card_ref: str, field: str, value: Any, expected: str) -> None:
        self.expected = expected
        super().__init__(
            category,
            card_ref,
            field,
            reason=f"must be {expected}, got {type(value).__name__}",
            value=value,
        )


class CatalogBuildError(Exception):
    """
    Raised when a strict catalog build meets any conversion failure.

    The entire build is refused. No catalog is published.

    Attributes:
        errors: Every conversion failure, in catalog order
    """

    def __init__(self, errors: list[CardConversionError]) -> None:
        if not errors:
            raise ValueError("CatalogBuildError requires at least one error")
        self.errors = tuple(errors)
        extra = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        super().__init__(f"Catalog build failed: {errors[0]}{extra}")

    @property
    def first(self) -> CardConversionError:
        """The first failure encountered."""
        return self.errors[0]


class SourceTableError(Exception):
    """Raised when a source table file is not a JSON object of entries."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid source table {path}: {reason}")
