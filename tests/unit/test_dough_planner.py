"""Tests for the Dough Planner

Covers:
- Default Neapolitan batch (no fridge)
- Overnight fridge plan: yeast from effective hours
- Explicit yeast percentage
- Fresh yeast
- Warnings and logging
- Error propagation
"""

import logging

import pytest

from src.core.domain import DoughSpec, Environment, FermentationPlan, FlourStrength, YeastKind
from src.core.math import InvalidParameter, TimelineConfig, YeastModelConfig
from src.planner import DoughPlanner, DoughPlannerConfig


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def planner():
    """Planner with default calibration."""
    return DoughPlanner()


@pytest.fixture
def dough():
    """2 x 280 g, 75% hydration, 20 g/kg salt, dry yeast from the model."""
    return DoughSpec(ball_count=2, ball_weight_g=280.0, hydration=0.75, salt_per_kg=20.0)


@pytest.fixture
def room():
    """25 C."""
    return Environment(temperature_c=25.0)


@pytest.fixture
def flour():
    """W=260."""
    return FlourStrength(w=260.0)


# =============================================================================
# TESTS
# =============================================================================


class TestDoughPlanner:
    """Tests for DoughPlanner.plan"""

    def test_room_temperature_batch(self, planner, dough, room, flour):
        """11 h at 25 C without fridge"""
        plan = planner.plan(dough, FermentationPlan(total_hours=11.0), room, flour)

        assert plan.total_dough_g == pytest.approx(560.0)
        assert plan.effective_hours == 11.0
        assert plan.yeast_from_model
        assert plan.yeast_percent == pytest.approx(0.0035 * 12.0 / 11.0)
        assert plan.ingredients.total_g() == pytest.approx(560.0, rel=1e-6)
        assert plan.timeline.bulk_hours == pytest.approx(6.05)
        assert plan.timeline.proof_hours == pytest.approx(4.95)
        assert plan.warnings == ()

    def test_overnight_fridge_uses_effective_hours(self, planner, dough, room, flour):
        """24 h with 16 h fridge counts as 12 h -> baseline yeast"""
        fermentation = FermentationPlan(total_hours=24.0, fridge_hours=16.0, warmup_hours=3.0)
        plan = planner.plan(dough, fermentation, room, flour)

        assert plan.effective_hours == pytest.approx(12.0)
        assert plan.yeast_percent == pytest.approx(0.0035)
        assert plan.timeline.bulk_hours == pytest.approx(1.75)
        assert plan.timeline.proof_hours == pytest.approx(3.25)
        assert plan.timeline.total_hours() == pytest.approx(24.0)

    def test_explicit_yeast_percent(self, planner, room, flour):
        """An explicit percentage bypasses the model"""
        dough = DoughSpec(
            ball_count=2, ball_weight_g=280.0, hydration=0.75, salt_per_kg=20.0, yeast_percent=0.0035
        )
        plan = planner.plan(dough, FermentationPlan(total_hours=48.0), room, flour)

        assert not plan.yeast_from_model
        assert plan.yeast_percent == 0.0035
        assert plan.ingredients.flour_g == pytest.approx(315.76, abs=0.01)
        assert plan.ingredients.yeast_g == pytest.approx(1.11, abs=0.01)

    def test_fresh_yeast(self, planner, dough, room, flour):
        """Fresh yeast needs 3x the mass"""
        fresh = dough.model_copy(update={"yeast_kind": YeastKind.FRESH})
        fermentation = FermentationPlan(total_hours=12.0)

        dry_plan = planner.plan(dough, fermentation, room, flour)
        fresh_plan = planner.plan(fresh, fermentation, room, flour)

        assert fresh_plan.yeast_percent == pytest.approx(3.0 * dry_plan.yeast_percent)
        assert fresh_plan.warnings == ()

    def test_custom_config(self, dough, room, flour):
        """Calibration comes from the planner config"""
        planner = DoughPlanner(
            DoughPlannerConfig(
                yeast_model=YeastModelConfig(baseline_percent=0.005),
                timeline=TimelineConfig(no_fridge_bulk_share=0.5),
            )
        )
        plan = planner.plan(dough, FermentationPlan(total_hours=12.0), room, flour)

        assert plan.yeast_percent == pytest.approx(0.005)
        assert plan.timeline.bulk_hours == pytest.approx(6.0)

    def test_warnings_logged(self, planner, dough, flour, caplog):
        """Cold kitchen and short time are flagged and logged"""
        cold = Environment(temperature_c=2.0)
        with caplog.at_level(logging.WARNING, logger="src.planner.dough_planner"):
            plan = planner.plan(dough, FermentationPlan(total_hours=4.0), cold, flour)

        assert len(plan.warnings) == 2
        assert any("temperature" in w for w in plan.warnings)
        assert any("above" in w for w in plan.warnings)
        assert len(caplog.records) == 2

    def test_details(self, planner, dough, room, flour):
        """details summarizes the plan"""
        plan = planner.plan(dough, FermentationPlan(total_hours=12.0), room, flour)
        assert "2 x 280 g" in plan.details
        assert "dry yeast 0.350%" in plan.details

    def test_invalid_input_propagates(self, planner, dough, room):
        """InvalidParameter from the core reaches the caller"""
        flour = FlourStrength.model_construct(w=-1.0)
        with pytest.raises(InvalidParameter) as exc_info:
            planner.plan(dough, FermentationPlan(total_hours=12.0), room, flour)
        assert exc_info.value.field == "w"

    def test_deterministic(self, planner, dough, room, flour):
        """Same request, same plan"""
        fermentation = FermentationPlan(total_hours=30.0, fridge_hours=20.0, warmup_hours=2.0)
        assert planner.plan(dough, fermentation, room, flour) == planner.plan(
            dough, fermentation, room, flour
        )
