"""
Core math modules for the dough calculator.

Pure numeric primitives; every function fails closed with InvalidParameter.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Exceptions
    InvalidParameter,
    # Checks and checked arithmetic
    checked_divide,
    checked_power,
    is_close,
    is_valid_float,
    # Validation
    validate_finite,
    validate_non_negative,
    validate_positive,
    validate_unit_fraction,
)

# Yeast Model
from src.core.math.yeast_model import (
    BASELINE_YEAST_PERCENT_DRY,
    DEFAULT_YEAST_MODEL_CONFIG,
    YeastModelConfig,
    estimate_dry_yeast_percent,
    resolve_yeast_percent,
    select_yeast_percent,
    strength_factor,
    temperature_factor,
    time_factor,
    yeast_warnings,
)

# Ingredients
from src.core.math.ingredients import (
    MASS_BALANCE_REL_TOL,
    compute_ingredients,
    salt_fraction,
    solve_mass_balance,
)

# Fermentation
from src.core.math.fermentation import (
    DEFAULT_TIMELINE_CONFIG,
    TimelineConfig,
    compute_timeline,
    effective_hours,
    fridge_bulk_ratio,
    split_with_fridge,
    split_without_fridge,
    validate_time_budget,
)

__all__ = [
    # Numerical Safeguards - Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards - Exceptions
    "InvalidParameter",
    # Numerical Safeguards - Checks
    "checked_divide",
    "checked_power",
    "is_close",
    "is_valid_float",
    # Numerical Safeguards - Validation
    "validate_finite",
    "validate_non_negative",
    "validate_positive",
    "validate_unit_fraction",
    # Yeast Model - Constants
    "BASELINE_YEAST_PERCENT_DRY",
    "DEFAULT_YEAST_MODEL_CONFIG",
    # Yeast Model - Types
    "YeastModelConfig",
    # Yeast Model - Functions
    "estimate_dry_yeast_percent",
    "resolve_yeast_percent",
    "select_yeast_percent",
    "strength_factor",
    "temperature_factor",
    "time_factor",
    "yeast_warnings",
    # Ingredients
    "MASS_BALANCE_REL_TOL",
    "compute_ingredients",
    "salt_fraction",
    "solve_mass_balance",
    # Fermentation - Constants
    "DEFAULT_TIMELINE_CONFIG",
    # Fermentation - Types
    "TimelineConfig",
    # Fermentation - Functions
    "compute_timeline",
    "effective_hours",
    "fridge_bulk_ratio",
    "split_with_fridge",
    "split_without_fridge",
    "validate_time_budget",
]
