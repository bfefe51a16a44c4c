"""
Fermentation - Effective hours and bulk/proof timeline

Converts a fermentation plan and the ambient temperature into segment
durations: bulk -> (fridge -> warmup) -> proof.

FORMULAS:
    effective_hours = (total - fridge) + fridge * fridge_factor

    No fridge:   bulk = 55% of total, proof = the rest; then a temperature
                 shift of 0.05 h per C away from 25 C, at most 1 h and at
                 most 20% of the stage giving time.
                 Warm: bulk -> proof. Cold: proof -> bulk.

    With fridge: remaining = total - fridge - warmup
                 bulk_ratio = 0.35 - 0.01 * (T - 25)   (T > 25, floor 0.20)
                 bulk_ratio = 0.35 + 0.01 * (25 - T)   (T < 25, cap 0.60)
                 bulk = remaining * bulk_ratio, proof = remaining - bulk

CRITICAL INVARIANTS:
1. Segments always sum to total_hours (proof is computed as the remainder)
2. fridge_hours == 0 gives effective_hours == total_hours exactly
3. total_hours <= 0, fridge + warmup > total, fridge_factor outside (0, 1]
   -> InvalidParameter
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.dough import DEFAULT_FRIDGE_FACTOR, Environment, FermentationPlan
from src.core.domain.results import TimelineResult
from src.core.math.numerical_safeguards import (
    InvalidParameter,
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_unit_fraction,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Reference temperature for the split adjustments (C)
TIMELINE_REFERENCE_TEMPERATURE_C: Final[float] = 25.0

# Room-temperature-only split
NO_FRIDGE_BULK_SHARE: Final[float] = 0.55
NO_FRIDGE_SHIFT_HOURS_PER_C: Final[float] = 0.05
NO_FRIDGE_MAX_SHIFT_HOURS: Final[float] = 1.0
NO_FRIDGE_MAX_SHIFT_SHARE: Final[float] = 0.2

# Split of the time left after fridge and warmup
FRIDGE_BULK_SHARE: Final[float] = 0.35
FRIDGE_BULK_SHARE_STEP_PER_C: Final[float] = 0.01
FRIDGE_BULK_SHARE_MIN: Final[float] = 0.20
FRIDGE_BULK_SHARE_MAX: Final[float] = 0.60


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TimelineConfig:
    """Timeline split calibration.

    The 55/45 and 35/65 splits are heuristics; keep them unless you have
    baking data that says otherwise.
    """

    reference_temperature_c: float = TIMELINE_REFERENCE_TEMPERATURE_C

    no_fridge_bulk_share: float = NO_FRIDGE_BULK_SHARE
    no_fridge_shift_hours_per_c: float = NO_FRIDGE_SHIFT_HOURS_PER_C
    no_fridge_max_shift_hours: float = NO_FRIDGE_MAX_SHIFT_HOURS
    no_fridge_max_shift_share: float = NO_FRIDGE_MAX_SHIFT_SHARE

    fridge_bulk_share: float = FRIDGE_BULK_SHARE
    fridge_bulk_share_step_per_c: float = FRIDGE_BULK_SHARE_STEP_PER_C
    fridge_bulk_share_min: float = FRIDGE_BULK_SHARE_MIN
    fridge_bulk_share_max: float = FRIDGE_BULK_SHARE_MAX


DEFAULT_TIMELINE_CONFIG: Final[TimelineConfig] = TimelineConfig()


# =============================================================================
# EFFECTIVE HOURS
# =============================================================================


def validate_time_budget(total_hours: float, fridge_hours: float, warmup_hours: float) -> None:
    """
    Check that the fixed segments fit into the total time budget.

    Raises:
        InvalidParameter: If total_hours <= 0, a segment is negative,
            fridge_hours > total_hours or (with fridge) fridge + warmup > total
    """
    validate_positive(total_hours, "total_hours")
    validate_non_negative(fridge_hours, "fridge_hours")
    validate_non_negative(warmup_hours, "warmup_hours")

    if fridge_hours > total_hours:
        raise InvalidParameter(
            "fridge_hours", f"{fridge_hours} h exceeds total_hours {total_hours} h"
        )

    if fridge_hours > 0 and fridge_hours + warmup_hours > total_hours:
        raise InvalidParameter(
            "warmup_hours",
            f"fridge_hours {fridge_hours} h + warmup_hours {warmup_hours} h "
            f"exceeds total_hours {total_hours} h",
        )


def effective_hours(
    total_hours: float,
    fridge_hours: float = 0.0,
    fridge_factor: float = DEFAULT_FRIDGE_FACTOR,
) -> float:
    """
    Room-temperature equivalent fermentation time.

    Fridge hours count at fridge_factor of the room-temperature rate.

    Args:
        total_hours: Total process time (h)
        fridge_hours: Time in the fridge (h)
        fridge_factor: Fridge rate relative to room temperature, in (0, 1]

    Returns:
        (total - fridge) + fridge * fridge_factor

    Raises:
        InvalidParameter: If total_hours <= 0, fridge_hours outside
            [0, total_hours] or fridge_factor outside (0, 1]

    Examples:
        >>> effective_hours(24.0, 16.0, 0.25)
        12.0
        >>> effective_hours(11.0)
        11.0
    """
    validate_positive(total_hours, "total_hours")
    validate_non_negative(fridge_hours, "fridge_hours")
    validate_unit_fraction(fridge_factor, "fridge_factor")

    if fridge_hours > total_hours:
        raise InvalidParameter(
            "fridge_hours", f"{fridge_hours} h exceeds total_hours {total_hours} h"
        )

    if fridge_hours == 0:
        return total_hours

    return (total_hours - fridge_hours) + fridge_hours * fridge_factor


# =============================================================================
# TIMELINE SPLITS
# =============================================================================


def split_without_fridge(
    total_hours: float,
    temperature_c: float,
    config: TimelineConfig = DEFAULT_TIMELINE_CONFIG,
) -> TimelineResult:
    """
    Room-temperature-only timeline: bulk + proof == total_hours.

    Warm dough moves up to 1 h from bulk to proof, cold dough the opposite.

    Args:
        total_hours: Total process time (h)
        temperature_c: Ambient temperature (C)
        config: Split calibration

    Returns:
        TimelineResult with zero fridge/warmup

    Raises:
        InvalidParameter: If total_hours <= 0 or temperature_c is not finite
    """
    validate_positive(total_hours, "total_hours")
    validate_finite(temperature_c, "temperature_c")

    bulk = total_hours * config.no_fridge_bulk_share
    proof = total_hours - bulk
    delta_t = temperature_c - config.reference_temperature_c

    if delta_t > 0:
        shift = min(delta_t * config.no_fridge_shift_hours_per_c, config.no_fridge_max_shift_hours)
        shift = min(shift, bulk * config.no_fridge_max_shift_share)
        bulk -= shift
    elif delta_t < 0:
        shift = min(-delta_t * config.no_fridge_shift_hours_per_c, config.no_fridge_max_shift_hours)
        shift = min(shift, proof * config.no_fridge_max_shift_share)
        bulk += shift

    return TimelineResult(
        bulk_hours=bulk,
        fridge_hours=0.0,
        warmup_hours=0.0,
        proof_hours=total_hours - bulk,
        effective_hours=total_hours,
    )


def fridge_bulk_ratio(
    temperature_c: float,
    config: TimelineConfig = DEFAULT_TIMELINE_CONFIG,
) -> float:
    """
    Bulk share of the time left after fridge and warmup.

    Raises:
        InvalidParameter: If temperature_c is not finite

    Examples:
        >>> fridge_bulk_ratio(25.0)
        0.35
    """
    validate_finite(temperature_c, "temperature_c")

    delta_t = temperature_c - config.reference_temperature_c

    if delta_t > 0:
        return max(
            config.fridge_bulk_share - delta_t * config.fridge_bulk_share_step_per_c,
            config.fridge_bulk_share_min,
        )
    if delta_t < 0:
        return min(
            config.fridge_bulk_share - delta_t * config.fridge_bulk_share_step_per_c,
            config.fridge_bulk_share_max,
        )
    return config.fridge_bulk_share


def split_with_fridge(
    total_hours: float,
    temperature_c: float,
    fridge_hours: float,
    warmup_hours: float,
    fridge_factor: float = DEFAULT_FRIDGE_FACTOR,
    config: TimelineConfig = DEFAULT_TIMELINE_CONFIG,
) -> TimelineResult:
    """
    Fridge timeline: bulk + fridge + warmup + proof == total_hours.

    fridge_hours and warmup_hours are fixed by the caller; the remainder is
    split between bulk and proof (proof gets the larger share).

    Args:
        total_hours: Total process time (h)
        temperature_c: Ambient temperature (C)
        fridge_hours: Time in the fridge (h), > 0
        warmup_hours: Bench rest after the fridge (h)
        fridge_factor: Fridge rate relative to room temperature, in (0, 1]
        config: Split calibration

    Returns:
        TimelineResult with all four segments

    Raises:
        InvalidParameter: If the budget does not fit, fridge_factor is
            outside (0, 1] or temperature_c is not finite

    Examples:
        >>> t = split_with_fridge(24.0, 25.0, 16.0, 3.0)
        >>> (round(t.bulk_hours, 2), round(t.proof_hours, 2), t.effective_hours)
        (1.75, 3.25, 12.0)
    """
    validate_time_budget(total_hours, fridge_hours, warmup_hours)
    validate_finite(temperature_c, "temperature_c")

    eff_hours = effective_hours(total_hours, fridge_hours, fridge_factor)

    remaining = max(total_hours - fridge_hours - warmup_hours, 0.0)
    bulk = remaining * fridge_bulk_ratio(temperature_c, config)

    return TimelineResult(
        bulk_hours=bulk,
        fridge_hours=fridge_hours,
        warmup_hours=warmup_hours,
        proof_hours=remaining - bulk,
        effective_hours=eff_hours,
    )


def compute_timeline(
    plan: FermentationPlan,
    environment: Environment,
    config: TimelineConfig = DEFAULT_TIMELINE_CONFIG,
) -> TimelineResult:
    """
    Timeline for a fermentation plan.

    Uses the fridge path when plan.fridge_hours > 0; otherwise warmup_hours
    is ignored and the whole budget is spent at room temperature.

    Raises:
        InvalidParameter: If total_hours <= 0, fridge + warmup > total or
            fridge_factor is outside (0, 1]
    """
    validate_time_budget(plan.total_hours, plan.fridge_hours, plan.warmup_hours)
    validate_unit_fraction(plan.fridge_factor, "fridge_factor")

    if plan.fridge_hours > 0:
        return split_with_fridge(
            total_hours=plan.total_hours,
            temperature_c=environment.temperature_c,
            fridge_hours=plan.fridge_hours,
            warmup_hours=plan.warmup_hours,
            fridge_factor=plan.fridge_factor,
            config=config,
        )

    return split_without_fridge(plan.total_hours, environment.temperature_c, config)
