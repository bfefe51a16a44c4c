"""
Numerical Safeguards - Safe Math Primitives for the Dough Core

Every calculation in the core goes through these helpers so that it fails
closed instead of producing Inf/NaN:
- Epsilon constants for denominators and float comparisons
- NaN/Inf detection
- Checked exponentiation (overflow/underflow become errors)
- Parameter validation raising InvalidParameter

CRITICAL INVARIANTS:
1. No division by a value at or below EPS_CALC
2. NaN/Inf never leave a core function (InvalidParameter is raised instead)
3. Float comparisons always account for machine precision
4. All operations are deterministic and side-effect free
"""

import math
from typing import Final

from src.core.errors import InvalidParameter

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Epsilon for general calculations; denominators must be strictly above it
EPS_CALC: Final[float] = 1e-12

# Relative tolerance for float comparison (is_close)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for float comparison (is_close)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare floats with machine-precision tolerance.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_power(base: float, exponent: float, field: str) -> float:
    """
    Exponentiation that refuses to return a non-finite or non-positive result.

    Used for multiplicative rate factors, which must stay strictly positive.

    Args:
        base: Positive base
        exponent: Exponent (any finite value)
        field: Input the exponent was derived from (for the error)

    Returns:
        base ** exponent

    Raises:
        InvalidParameter: If the result overflows, underflows to zero or is NaN

    Examples:
        >>> checked_power(2.0, 1.0, "temperature_c")
        2.0
        >>> checked_power(2.0, 5000.0, "temperature_c")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidParameter: temperature_c: factor overflows (2.0 ** 5000.0)
    """
    try:
        result = base**exponent
    except OverflowError:
        raise InvalidParameter(field, f"factor overflows ({base} ** {exponent})") from None

    if not is_valid_float(result):
        raise InvalidParameter(field, f"factor is not finite ({base} ** {exponent})")

    if result <= 0.0:
        raise InvalidParameter(field, f"factor underflows to zero ({base} ** {exponent})")

    return result


def checked_divide(numerator: float, denominator: float, field: str) -> float:
    """
    Division that treats a near-zero denominator as an invalid input.

    Args:
        numerator: Numerator
        denominator: Denominator, must be > EPS_CALC in absolute value
        field: Input the denominator was derived from (for the error)

    Returns:
        numerator / denominator

    Raises:
        InvalidParameter: If abs(denominator) <= EPS_CALC or the result is not finite
    """
    if not is_valid_float(denominator) or abs(denominator) <= EPS_CALC:
        raise InvalidParameter(field, f"denominator is zero or near zero, got {denominator}")

    result = numerator / denominator
    if not is_valid_float(result):
        raise InvalidParameter(field, f"result is not finite, got {result}")

    return result


# =============================================================================
# VALIDATION
# =============================================================================


def validate_finite(value: float, field: str) -> None:
    """
    Validate that a value is a finite float.

    Raises:
        InvalidParameter: If value is NaN or Inf
    """
    if not is_valid_float(value):
        raise InvalidParameter(field, f"must be a finite number (not NaN/Inf), got {value}")


def validate_positive(value: float, field: str, eps: float = EPS_CALC) -> None:
    """
    Validate that a value is positive.

    Args:
        value: Value to check
        field: Parameter name (for the error)
        eps: Minimum threshold (default: EPS_CALC)

    Raises:
        InvalidParameter: If value <= eps or NaN/Inf
    """
    validate_finite(value, field)

    if value <= eps:
        raise InvalidParameter(field, f"must be positive (> {eps}), got {value}")


def validate_non_negative(value: float, field: str) -> None:
    """
    Validate that a value is non-negative.

    Raises:
        InvalidParameter: If value < 0 or NaN/Inf
    """
    validate_finite(value, field)

    if value < 0:
        raise InvalidParameter(field, f"must be non-negative, got {value}")


def validate_unit_fraction(value: float, field: str) -> None:
    """
    Validate that a value lies in the half-open interval (0, 1].

    Raises:
        InvalidParameter: If value <= 0, value > 1 or NaN/Inf
    """
    validate_finite(value, field)

    if value <= 0.0 or value > 1.0:
        raise InvalidParameter(field, f"must be in (0, 1], got {value}")
