"""
Ingredients - Four-component mass balance

Solves flour/water/salt/yeast masses for a target total dough mass using
baker's percentages (everything relative to flour).

FORMULAS:
    s     = salt_per_kg / 1000
    flour = T / (1 + h + s + y)
    water = flour * h
    salt  = flour * s
    yeast = flour * y

The relationship is linear in flour, so a single closed-form pass suffices.

CRITICAL INVARIANTS:
1. flour + water + salt + yeast == T (relative tolerance 1e-6)
2. T > 0, h > 0, s >= 0, y >= 0 or InvalidParameter
"""

from typing import Final

from src.core.domain.dough import DoughSpec
from src.core.domain.results import IngredientResult
from src.core.math.numerical_safeguards import (
    InvalidParameter,
    checked_divide,
    is_close,
    validate_non_negative,
    validate_positive,
)

# Salt is given per kg of flour
GRAMS_PER_KG: Final[float] = 1000.0

# Relative tolerance of the mass balance
MASS_BALANCE_REL_TOL: Final[float] = 1e-6


def salt_fraction(salt_per_kg: float) -> float:
    """
    Convert g/kg of flour to a fraction of flour mass.

    Examples:
        >>> salt_fraction(20.0)
        0.02
    """
    return salt_per_kg / GRAMS_PER_KG


def solve_mass_balance(
    total_dough_g: float,
    hydration: float,
    salt_per_kg: float,
    yeast_percent: float,
) -> IngredientResult:
    """
    Ingredient masses for a total dough mass.

    Args:
        total_dough_g: Total dough mass T (g)
        hydration: Water fraction of flour h (0.75 = 75%)
        salt_per_kg: Salt in g per kg of flour
        yeast_percent: Yeast fraction of flour y (0.0035 = 0.35%)

    Returns:
        IngredientResult summing to total_dough_g

    Raises:
        InvalidParameter: If T <= 0, h <= 0, any ratio is negative or the
            masses do not sum to T within MASS_BALANCE_REL_TOL

    Examples:
        >>> r = solve_mass_balance(560.0, 0.75, 20.0, 0.0035)
        >>> round(r.flour_g, 2)
        315.76
    """
    validate_positive(total_dough_g, "total_dough_g", eps=0.0)
    validate_positive(hydration, "hydration", eps=0.0)
    validate_non_negative(salt_per_kg, "salt_per_kg")
    validate_non_negative(yeast_percent, "yeast_percent")

    salt_pct = salt_fraction(salt_per_kg)
    flour = checked_divide(total_dough_g, 1.0 + hydration + salt_pct + yeast_percent, "hydration")

    result = IngredientResult(
        flour_g=flour,
        water_g=flour * hydration,
        salt_g=flour * salt_pct,
        yeast_g=flour * yeast_percent,
    )

    if not is_close(result.total_g(), total_dough_g, rel_tol=MASS_BALANCE_REL_TOL):
        raise InvalidParameter(
            "total_dough_g",
            f"mass balance does not close: {result.total_g()} g != {total_dough_g} g",
        )

    return result


def compute_ingredients(dough: DoughSpec, yeast_percent: float) -> IngredientResult:
    """
    Ingredient masses for a dough spec and an already resolved yeast fraction.

    Args:
        dough: What to make
        yeast_percent: Yeast fraction of flour (from the yeast model or explicit)

    Returns:
        IngredientResult summing to dough.total_dough_g()

    Raises:
        InvalidParameter: If the dough mass, hydration or any ratio is invalid
    """
    return solve_mass_balance(
        total_dough_g=dough.total_dough_g(),
        hydration=dough.hydration,
        salt_per_kg=dough.salt_per_kg,
        yeast_percent=yeast_percent,
    )
