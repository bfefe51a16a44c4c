"""
Domain models and value objects.

Contains the input (DoughSpec, Environment, FlourStrength, FermentationPlan)
and output (IngredientResult, TimelineResult) value objects.
"""

from src.core.domain.base import DomainModel, to_invalid_parameter
from src.core.domain.dough import (
    DEFAULT_FRIDGE_FACTOR,
    DEFAULT_WARMUP_HOURS,
    FRESH_YEAST_MASS_MULTIPLIER,
    HYDRATION_MAX,
    DoughSpec,
    Environment,
    FermentationPlan,
    FlourStrength,
    YeastKind,
)
from src.core.domain.results import IngredientResult, TimelineResult

__all__ = [
    # Base
    "DomainModel",
    "to_invalid_parameter",
    # Constants
    "DEFAULT_FRIDGE_FACTOR",
    "DEFAULT_WARMUP_HOURS",
    "FRESH_YEAST_MASS_MULTIPLIER",
    "HYDRATION_MAX",
    # Inputs
    "YeastKind",
    "DoughSpec",
    "Environment",
    "FlourStrength",
    "FermentationPlan",
    # Outputs
    "IngredientResult",
    "TimelineResult",
]
