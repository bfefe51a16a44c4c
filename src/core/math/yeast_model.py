"""
Yeast Model - Required yeast percentage from temperature, flour and time

Maps (yeast kind, temperature, flour strength W, fermentation hours) to the
yeast fraction of flour mass needed to finish fermentation on time.

FORMULAS:
    f_temp     = q10 ** ((T_ref - T) / 10)          # Q10 rule, q10 = 2
    f_strength = (W_ref / W) ** strength_exponent   # mild W effect, exponent 0.2
    f_time     = H_ref / hours                      # inverse with time

    dry_percent      = baseline_percent * f_temp * f_strength * f_time
    required_percent = dry_percent * yeast_kind.mass_multiplier   # fresh = 3x

Baseline: 0.35% dry yeast at 25 C, W = 260, 12 h.

CRITICAL INVARIANTS:
1. Every factor is finite and strictly positive, or InvalidParameter is raised
2. The result is never clamped; implausible values are reported by yeast_warnings
3. Higher temperature or more hours strictly lowers the required percentage
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.dough import DoughSpec, Environment, FlourStrength, YeastKind
from src.core.math.numerical_safeguards import (
    checked_divide,
    checked_power,
    validate_finite,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Dry yeast fraction of flour at the reference point (0.35%)
BASELINE_YEAST_PERCENT_DRY: Final[float] = 0.0035

# Reference point of the baseline
REFERENCE_TEMPERATURE_C: Final[float] = 25.0
REFERENCE_STRENGTH_W: Final[float] = 260.0
REFERENCE_HOURS: Final[float] = 12.0

# Rate multiplier per 10 C
Q10: Final[float] = 2.0

# Exponent of the flour strength adjustment
STRENGTH_EXPONENT: Final[float] = 0.2

# Temperatures outside this range make the Q10 rule meaningless (flagged only)
TYPICAL_TEMPERATURE_MIN_C: Final[float] = 4.0
TYPICAL_TEMPERATURE_MAX_C: Final[float] = 35.0

# Plausible dry-equivalent yeast band (0.05% .. 1.5% of flour)
PLAUSIBLE_YEAST_PERCENT_DRY_MIN: Final[float] = 0.0005
PLAUSIBLE_YEAST_PERCENT_DRY_MAX: Final[float] = 0.015


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class YeastModelConfig:
    """Yeast model calibration.

    The defaults reproduce the baseline of 0.35% dry yeast at 25 C, W=260, 12 h.
    The strength exponent is a heuristic; change it only with baking data.
    """

    baseline_percent: float = BASELINE_YEAST_PERCENT_DRY
    reference_temperature_c: float = REFERENCE_TEMPERATURE_C
    reference_strength_w: float = REFERENCE_STRENGTH_W
    reference_hours: float = REFERENCE_HOURS
    q10: float = Q10
    strength_exponent: float = STRENGTH_EXPONENT


DEFAULT_YEAST_MODEL_CONFIG: Final[YeastModelConfig] = YeastModelConfig()


# =============================================================================
# ADJUSTMENT FACTORS
# =============================================================================


def temperature_factor(
    temperature_c: float,
    config: YeastModelConfig = DEFAULT_YEAST_MODEL_CONFIG,
) -> float:
    """
    Q10 temperature factor relative to the reference temperature.

    Every 10 C below the reference doubles the required yeast, every 10 C
    above halves it.

    Args:
        temperature_c: Ambient temperature (C)
        config: Model calibration

    Returns:
        q10 ** ((T_ref - T) / 10), strictly positive

    Raises:
        InvalidParameter: If the temperature is not finite or the factor
            overflows/underflows

    Examples:
        >>> temperature_factor(25.0)
        1.0
        >>> temperature_factor(15.0)
        2.0
        >>> temperature_factor(35.0)
        0.5
    """
    validate_finite(temperature_c, "temperature_c")
    exponent = (config.reference_temperature_c - temperature_c) / 10.0
    return checked_power(config.q10, exponent, "temperature_c")


def strength_factor(
    w: float,
    config: YeastModelConfig = DEFAULT_YEAST_MODEL_CONFIG,
) -> float:
    """
    Flour strength factor: (W_ref / W) ** strength_exponent.

    Raises:
        InvalidParameter: If W <= 0 or not finite
    """
    validate_positive(w, "w")
    ratio = checked_divide(config.reference_strength_w, w, "w")
    return checked_power(ratio, config.strength_exponent, "w")


def time_factor(
    total_hours: float,
    config: YeastModelConfig = DEFAULT_YEAST_MODEL_CONFIG,
) -> float:
    """
    Time factor: H_ref / hours. Yeast is inversely proportional to time.

    Raises:
        InvalidParameter: If total_hours <= 0 or not finite
    """
    validate_positive(total_hours, "total_hours")
    return checked_divide(config.reference_hours, total_hours, "total_hours")


# =============================================================================
# REQUIRED YEAST
# =============================================================================


def estimate_dry_yeast_percent(
    temperature_c: float,
    w: float,
    total_hours: float,
    config: YeastModelConfig = DEFAULT_YEAST_MODEL_CONFIG,
) -> float:
    """
    Dry yeast fraction of flour mass (0.0035 == 0.35%).

    Args:
        temperature_c: Ambient temperature (C)
        w: Flour strength W
        total_hours: Fermentation hours (room-temperature equivalent)
        config: Model calibration

    Returns:
        baseline_percent * f_temp * f_strength * f_time

    Raises:
        InvalidParameter: On any invalid input or non-finite result

    Examples:
        >>> estimate_dry_yeast_percent(25.0, 260.0, 12.0)
        0.0035
    """
    f_temp = temperature_factor(temperature_c, config)
    f_strength = strength_factor(w, config)
    f_time = time_factor(total_hours, config)

    percent = config.baseline_percent * f_temp * f_strength * f_time
    validate_finite(percent, "yeast_percent")
    return percent


def resolve_yeast_percent(
    yeast_kind: YeastKind,
    environment: Environment,
    strength: FlourStrength,
    total_hours: float,
    config: YeastModelConfig = DEFAULT_YEAST_MODEL_CONFIG,
) -> float:
    """
    Required yeast fraction of flour for the given yeast kind.

    Fresh yeast needs mass_multiplier (3x) the dry-yeast mass.

    Raises:
        InvalidParameter: If W <= 0, total_hours <= 0 or the temperature is
            not finite
    """
    dry_percent = estimate_dry_yeast_percent(
        temperature_c=environment.temperature_c,
        w=strength.w,
        total_hours=total_hours,
        config=config,
    )
    return dry_percent * yeast_kind.mass_multiplier


def select_yeast_percent(
    dough: DoughSpec,
    environment: Environment,
    strength: FlourStrength,
    total_hours: float,
    config: YeastModelConfig = DEFAULT_YEAST_MODEL_CONFIG,
) -> float:
    """
    Yeast fraction to use for a dough.

    An explicit dough.yeast_percent bypasses the model (only checked for
    non-negativity). Otherwise the model is asked.
    """
    if dough.yeast_percent is not None:
        validate_non_negative(dough.yeast_percent, "yeast_percent")
        return dough.yeast_percent

    return resolve_yeast_percent(dough.yeast_kind, environment, strength, total_hours, config)


# =============================================================================
# DIAGNOSTICS
# =============================================================================


def yeast_warnings(
    temperature_c: float,
    yeast_percent: float,
    yeast_kind: YeastKind = YeastKind.DRY,
) -> tuple[str, ...]:
    """
    Flag inputs/outputs where the heuristic is unreliable.

    Nothing is rejected here; the caller decides whether to show the flags.

    Args:
        temperature_c: Ambient temperature (C)
        yeast_percent: Yeast fraction of flour for yeast_kind
        yeast_kind: Kind the percentage refers to

    Returns:
        Tuple of warning messages (empty if nothing looks off)
    """
    warnings: list[str] = []

    if temperature_c < TYPICAL_TEMPERATURE_MIN_C or temperature_c > TYPICAL_TEMPERATURE_MAX_C:
        warnings.append(
            f"temperature {temperature_c:.1f} C is outside "
            f"[{TYPICAL_TEMPERATURE_MIN_C:.0f}, {TYPICAL_TEMPERATURE_MAX_C:.0f}] C; "
            f"the Q10 estimate is unreliable"
        )

    dry_equivalent = yeast_percent / yeast_kind.mass_multiplier
    if dry_equivalent < PLAUSIBLE_YEAST_PERCENT_DRY_MIN:
        warnings.append(
            f"dry-equivalent yeast {dry_equivalent * 100:.3f}% is below "
            f"{PLAUSIBLE_YEAST_PERCENT_DRY_MIN * 100:.2f}% of flour; the dough may not rise"
        )
    elif dry_equivalent > PLAUSIBLE_YEAST_PERCENT_DRY_MAX:
        warnings.append(
            f"dry-equivalent yeast {dry_equivalent * 100:.3f}% is above "
            f"{PLAUSIBLE_YEAST_PERCENT_DRY_MAX * 100:.2f}% of flour; expect over-fermentation"
        )

    return tuple(warnings)
