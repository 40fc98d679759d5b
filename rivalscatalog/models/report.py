"""
Build report models.

Summary of one catalog build, for logs and for the build job's output.
"""

from pydantic import BaseModel, Field

from rivalscatalog.models.errors import CardConversionError


class SkippedCard(BaseModel):
    """A source entry left out of the catalog by a lenient build."""

    category: str = Field(..., description="Category of the source table")
    card_ref: str = Field(..., description="Card id, or name for monsters")
    field: str = Field(..., description="Raw field that failed validation")
    reason: str = Field(..., description="Violated rule")
    error_type: str = Field(..., description="Name of the conversion error class")

    @classmethod
    def from_error(cls, error: CardConversionError) -> "SkippedCard":
        """Describe a conversion error."""
        return cls(
            category=error.category,
            card_ref=error.card_ref,
            field=error.field,
            reason=error.reason,
            error_type=type(error).__name__,
        )


class BuildReport(BaseModel):
    """Outcome of a successful catalog build."""

    policy: str = Field(..., description="Build policy used (strict or lenient)")
    total: int = Field(..., description="Number of cards in the catalog")
    counts: dict[str, int] = Field(
        default_factory=dict,
        description="Number of cards per category, in catalog order",
    )
    skipped: list[SkippedCard] = Field(
        default_factory=list,
        description="Entries dropped by a lenient build",
    )

    @property
    def complete(self) -> bool:
        """Whether every source entry made it into the catalog."""
        return not self.skipped
