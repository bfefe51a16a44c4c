"""Dough Profile - persisted parameter record and its conversion to core inputs.

A profile is a flat JSON record holding every parameter of one dough. It is
checked against contracts/schema/dough_profile.json, parsed into an immutable
DoughProfile, optionally overridden field by field (overrides win) and split
into the core value objects.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import ValidationError
from pydantic import BaseModel, Field

from src.core.contracts import DoughProfileValidator, validate_dough_profile
from src.core.domain.dough import (
    DEFAULT_FRIDGE_FACTOR,
    DEFAULT_WARMUP_HOURS,
    DoughSpec,
    Environment,
    FermentationPlan,
    FlourStrength,
    YeastKind,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PROFILE MODEL
# =============================================================================


class DoughProfile(BaseModel):
    """Flat dough profile record.

    Field names follow the persisted JSON record. Defaults match a two-ball
    Neapolitan batch at room temperature.
    """

    w: float = Field(..., gt=0, description="Flour strength W")
    temp: float = Field(25.0, description="Ambient temperature (C)")
    yeast: YeastKind = Field(YeastKind.DRY, description="Yeast type")
    yeast_percent: float | None = Field(None, ge=0, description="Explicit yeast fraction")
    hydration: float = Field(0.75, gt=0, le=1.0, description="Water fraction of flour")
    salt_per_kg: float = Field(20.0, ge=0, description="Salt in g/kg flour")
    ball_weight: float = Field(280.0, gt=0, description="Ball weight (g)")
    balls: int = Field(2, ge=1, description="Number of balls")
    total_hours: float = Field(11.0, gt=0, description="Total process time (h)")
    fridge_hours: float = Field(0.0, ge=0, description="Fridge time (h), 0 = no fridge")
    warmup_hours: float = Field(DEFAULT_WARMUP_HOURS, ge=0, description="Warmup after fridge (h)")
    fridge_factor: float = Field(DEFAULT_FRIDGE_FACTOR, gt=0, le=1.0, description="Fridge rate")
    start: str | None = Field(None, description="Start time HH:MM")

    model_config = {"frozen": True}

    def with_overrides(self, **overrides: Any) -> "DoughProfile":
        """Profile with the given fields replaced; None values are ignored.

        Mirrors "load profile, then apply flags": an explicit override always
        wins over the stored value.
        """
        updates = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(updates) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown profile fields: {sorted(unknown)}")

        merged = self.model_dump()
        merged.update(updates)
        return DoughProfile.model_validate(merged)

    def to_inputs(self) -> "ProfileInputs":
        """Split the record into core value objects.

        Raises:
            InvalidParameter: If the values do not form a valid dough or
                fermentation plan (e.g. fridge + warmup exceed total_hours)
        """
        return ProfileInputs(
            dough=DoughSpec(
                ball_count=self.balls,
                ball_weight_g=self.ball_weight,
                hydration=self.hydration,
                salt_per_kg=self.salt_per_kg,
                yeast_kind=self.yeast,
                yeast_percent=self.yeast_percent,
            ),
            fermentation=FermentationPlan(
                total_hours=self.total_hours,
                fridge_hours=self.fridge_hours,
                warmup_hours=self.warmup_hours,
                fridge_factor=self.fridge_factor,
            ),
            environment=Environment(temperature_c=self.temp),
            strength=FlourStrength(w=self.w),
            start=self.start,
        )


@dataclass(frozen=True)
class ProfileInputs:
    """Core inputs extracted from a profile."""

    dough: DoughSpec
    fermentation: FermentationPlan
    environment: Environment
    strength: FlourStrength
    start: str | None


# =============================================================================
# LOAD / SAVE
# =============================================================================


def parse_profile(data: dict[str, Any]) -> DoughProfile:
    """
    Validate a raw record and build a DoughProfile.

    Raises:
        jsonschema.ValidationError: If the record violates the schema
        pydantic.ValidationError: If the record violates the model
    """
    try:
        validate_dough_profile(data)
    except ValidationError:
        for problem in DoughProfileValidator().describe_errors(data):
            logger.error("Invalid dough profile: %s", problem)
        raise

    return DoughProfile.model_validate(data)


def load_profile(path: Path | str) -> DoughProfile:
    """
    Read a profile JSON file.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not JSON
        jsonschema.ValidationError: If the record violates the schema
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    profile = parse_profile(data)
    logger.info("Loaded dough profile from %s", path)
    return profile


def save_profile(profile: DoughProfile, path: Path | str) -> None:
    """Write a profile as pretty-printed JSON."""
    path = Path(path)
    data = profile.model_dump(mode="json")
    # The record must stay loadable by load_profile
    validate_dough_profile(data)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")

    logger.info("Saved dough profile to %s", path)
