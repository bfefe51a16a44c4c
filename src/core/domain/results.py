"""
Results - Output value objects of the dough calculation core

Plain numeric results handed to the presentation layer. Immutable.
"""

from pydantic import Field

from src.core.domain.base import DomainModel


class IngredientResult(DomainModel):
    """
    Ingredient masses for one batch.

    Invariant: flour_g + water_g + salt_g + yeast_g == total dough mass
    (within floating-point tolerance).
    """

    flour_g: float = Field(..., ge=0, description="Flour (g)")
    water_g: float = Field(..., ge=0, description="Water (g)")
    salt_g: float = Field(..., ge=0, description="Salt (g)")
    yeast_g: float = Field(..., ge=0, description="Yeast (g), dry or fresh")

    model_config = {"frozen": True}

    def total_g(self) -> float:
        """Sum of all four components"""
        return self.flour_g + self.water_g + self.salt_g + self.yeast_g


class TimelineResult(DomainModel):
    """
    Segment durations of the fermentation timeline, in hours.

    Order: bulk -> fridge -> warmup -> proof. fridge_hours and warmup_hours
    are zero on the room-temperature-only path.

    Invariant: the four segments sum to the plan's total_hours.
    """

    bulk_hours: float = Field(..., ge=0, description="Bulk fermentation (h)")
    fridge_hours: float = Field(0.0, ge=0, description="Cold fermentation (h)")
    warmup_hours: float = Field(0.0, ge=0, description="Bench rest after fridge (h)")
    proof_hours: float = Field(..., ge=0, description="Final proof of the balls (h)")
    effective_hours: float = Field(
        ..., ge=0, description="Room-temperature equivalent fermentation time (h)"
    )

    model_config = {"frozen": True}

    def total_hours(self) -> float:
        """Sum of all segments"""
        return self.bulk_hours + self.fridge_hours + self.warmup_hours + self.proof_hours

    def uses_fridge(self) -> bool:
        """True if the timeline has a cold fermentation segment"""
        return self.fridge_hours > 0
