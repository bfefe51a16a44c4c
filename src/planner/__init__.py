"""Planner - caller side of the dough core.

- DoughPlanner: ingredients + timeline for one dough
- Dough profiles: load/merge/save of the persisted parameter record
- Schedule: timeline segments on the wall clock
"""

from .dough_planner import DoughPlan, DoughPlanner, DoughPlannerConfig
from .profile import DoughProfile, ProfileInputs, load_profile, parse_profile, save_profile
from .schedule import Phase, PhaseWindow, build_schedule, parse_start_time

__all__ = [
    "DoughPlan",
    "DoughPlanner",
    "DoughPlannerConfig",
    "DoughProfile",
    "ProfileInputs",
    "load_profile",
    "parse_profile",
    "save_profile",
    "Phase",
    "PhaseWindow",
    "build_schedule",
    "parse_start_time",
]
