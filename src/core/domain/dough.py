"""
Dough - Input value objects for the dough calculation core

Immutable Pydantic models describing one calculation request:
- DoughSpec (what to make: balls, hydration, salt, yeast)
- Environment (ambient temperature)
- FlourStrength (W index)
- FermentationPlan (time budget and optional fridge schedule)

Field constraints reject malformed records at construction time with
InvalidParameter. The core functions re-check the numeric invariants on the values they receive.
"""

from enum import Enum
from typing import Final

from pydantic import Field, field_validator

from src.core.domain.base import DomainModel


# =============================================================================
# CONSTANTS
# =============================================================================

# Fresh yeast is about a third as potent by weight as dry yeast
FRESH_YEAST_MASS_MULTIPLIER: Final[float] = 3.0

# Hydration upper bound (fraction of flour mass)
HYDRATION_MAX: Final[float] = 1.0

# Default share of room-temperature activity reached in the fridge
DEFAULT_FRIDGE_FACTOR: Final[float] = 0.25

# Default bench rest after the fridge (hours)
DEFAULT_WARMUP_HOURS: Final[float] = 3.0


# =============================================================================
# ENUMS
# =============================================================================


class YeastKind(str, Enum):
    """Baker's yeast type"""

    DRY = "dry"
    FRESH = "fresh"

    @property
    def mass_multiplier(self) -> float:
        """Mass of this yeast needed per unit mass of dry yeast."""
        return _YEAST_MASS_MULTIPLIER[self]


_YEAST_MASS_MULTIPLIER: Final[dict[YeastKind, float]] = {
    YeastKind.DRY: 1.0,
    YeastKind.FRESH: FRESH_YEAST_MASS_MULTIPLIER,
}


# =============================================================================
# INPUT MODELS
# =============================================================================


class DoughSpec(DomainModel):
    """
    What to make.

    Immutable model (frozen=True). Ratios are fractions of flour mass
    except salt, which is given in grams per kg of flour.
    """

    ball_count: int = Field(..., ge=1, description="Number of dough balls")
    ball_weight_g: float = Field(..., gt=0, description="Weight of one ball (g)")
    hydration: float = Field(
        ..., gt=0, le=HYDRATION_MAX, description="Water as a fraction of flour (0.75 = 75%)"
    )
    salt_per_kg: float = Field(..., ge=0, description="Salt in g per kg of flour")
    yeast_kind: YeastKind = Field(YeastKind.DRY, description="Yeast type")
    yeast_percent: float | None = Field(
        None,
        ge=0,
        description="Explicit yeast fraction of flour; None lets the yeast model decide",
    )

    model_config = {"frozen": True}

    def total_dough_g(self) -> float:
        """
        Total dough mass.

        Returns:
            ball_count * ball_weight_g
        """
        return self.ball_count * self.ball_weight_g


class Environment(DomainModel):
    """
    Ambient conditions.

    Temperatures outside [4, 35] C are flagged by the yeast model, not rejected.
    """

    temperature_c: float = Field(25.0, description="Ambient temperature (C)")

    model_config = {"frozen": True}


class FlourStrength(DomainModel):
    """Flour strength index W (typical bread flours: 180-400)"""

    w: float = Field(..., gt=0, description="W value")

    model_config = {"frozen": True}


class FermentationPlan(DomainModel):
    """
    Time budget for the whole process, mix to bake.

    fridge_hours == 0 selects the room-temperature-only timeline; warmup_hours
    only applies when the dough goes into the fridge.
    """

    total_hours: float = Field(..., gt=0, description="Total process time (h)")
    fridge_hours: float = Field(0.0, ge=0, description="Time in the fridge (h)")
    warmup_hours: float = Field(
        DEFAULT_WARMUP_HOURS, ge=0, description="Bench rest after the fridge (h)"
    )
    fridge_factor: float = Field(
        DEFAULT_FRIDGE_FACTOR,
        gt=0,
        le=1.0,
        description="Fermentation rate in the fridge relative to room temperature",
    )

    model_config = {"frozen": True}

    @field_validator("fridge_hours")
    @classmethod
    def validate_fridge_within_total(cls, v: float, info) -> float:
        """fridge_hours must fit inside total_hours"""
        if "total_hours" in info.data:
            total = info.data["total_hours"]
            if v > total:
                raise ValueError(f"fridge_hours {v} must be <= total_hours {total}")
        return v

    @field_validator("warmup_hours")
    @classmethod
    def validate_schedule_fits(cls, v: float, info) -> float:
        """With a fridge, fridge_hours + warmup_hours must fit inside total_hours"""
        if "total_hours" in info.data and "fridge_hours" in info.data:
            total = info.data["total_hours"]
            fridge = info.data["fridge_hours"]
            if fridge > 0 and fridge + v > total:
                raise ValueError(
                    f"fridge_hours {fridge} + warmup_hours {v} must be <= total_hours {total}"
                )
        return v

    def uses_fridge(self) -> bool:
        """True if the plan includes a cold fermentation stage"""
        return self.fridge_hours > 0
