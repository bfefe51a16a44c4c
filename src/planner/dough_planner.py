"""Dough Planner - end-to-end dough calculation.

Chains the core components in the order the baker needs them:
1. Effective hours (fridge time counted at fridge_factor)
2. Yeast percentage (explicit, or from the yeast model at effective hours)
3. Ingredient masses
4. Bulk/fridge/warmup/proof timeline
5. Plausibility warnings (temperature range, yeast band)

The planner keeps no state between calls; one instance can serve any
number of concurrent requests.
"""

import logging
from dataclasses import dataclass, field

from src.core.domain.dough import DoughSpec, Environment, FermentationPlan, FlourStrength
from src.core.domain.results import IngredientResult, TimelineResult
from src.core.math.fermentation import TimelineConfig, compute_timeline, effective_hours
from src.core.math.ingredients import compute_ingredients
from src.core.math.yeast_model import YeastModelConfig, select_yeast_percent, yeast_warnings

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DoughPlan:
    """Result of one planning request."""

    total_dough_g: float
    effective_hours: float

    # Yeast
    yeast_percent: float  # Fraction of flour for dough.yeast_kind
    yeast_from_model: bool  # False if the dough spec fixed the percentage

    ingredients: IngredientResult
    timeline: TimelineResult

    warnings: tuple[str, ...]

    # Details
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DoughPlannerConfig:
    """Planner configuration: calibration of the yeast model and timeline."""

    yeast_model: YeastModelConfig = field(default_factory=YeastModelConfig)
    timeline: TimelineConfig = field(default_factory=TimelineConfig)


# =============================================================================
# PLANNER
# =============================================================================


class DoughPlanner:
    """Ingredients and timeline for one dough.

    Order of evaluation:
    1. effective_hours from the fermentation plan
    2. yeast percentage (explicit or modelled)
    3. ingredients
    4. timeline
    """

    def __init__(self, config: DoughPlannerConfig | None = None):
        """Create a planner.

        Args:
            config: calibration (optional, defaults are used otherwise)
        """
        self.config = config or DoughPlannerConfig()

    def plan(
        self,
        dough: DoughSpec,
        fermentation: FermentationPlan,
        environment: Environment,
        strength: FlourStrength,
    ) -> DoughPlan:
        """Compute ingredients and timeline.

        Args:
            dough: what to make
            fermentation: time budget and fridge schedule
            environment: ambient temperature
            strength: flour W

        Returns:
            DoughPlan

        Raises:
            InvalidParameter: if any input violates the core's domain
        """
        eff_hours = effective_hours(
            fermentation.total_hours,
            fermentation.fridge_hours,
            fermentation.fridge_factor,
        )

        yeast_percent = select_yeast_percent(
            dough, environment, strength, eff_hours, self.config.yeast_model
        )
        yeast_from_model = dough.yeast_percent is None

        ingredients = compute_ingredients(dough, yeast_percent)
        timeline = compute_timeline(fermentation, environment, self.config.timeline)

        warnings = yeast_warnings(environment.temperature_c, yeast_percent, dough.yeast_kind)
        for warning in warnings:
            logger.warning("Dough plan: %s", warning)

        logger.debug(
            "Dough plan: total=%.1f g, effective=%.2f h, yeast=%.4f%% (%s), "
            "bulk=%.2f h, fridge=%.2f h, warmup=%.2f h, proof=%.2f h",
            dough.total_dough_g(),
            eff_hours,
            yeast_percent * 100,
            "model" if yeast_from_model else "explicit",
            timeline.bulk_hours,
            timeline.fridge_hours,
            timeline.warmup_hours,
            timeline.proof_hours,
        )

        return DoughPlan(
            total_dough_g=dough.total_dough_g(),
            effective_hours=eff_hours,
            yeast_percent=yeast_percent,
            yeast_from_model=yeast_from_model,
            ingredients=ingredients,
            timeline=timeline,
            warnings=warnings,
            details=(
                f"Dough plan: {dough.ball_count} x {dough.ball_weight_g:.0f} g, "
                f"{dough.yeast_kind.value} yeast {yeast_percent * 100:.3f}%, "
                f"effective {eff_hours:.2f} h of {fermentation.total_hours:.2f} h"
            ),
        )
