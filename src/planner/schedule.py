"""Schedule - timeline segments placed on the wall clock.

Turns a TimelineResult (hours per segment) into ordered phase windows with
start/end offsets and datetimes. Each phase is rounded to whole minutes.
Zero-length fridge and warmup phases are omitted.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

from src.core.domain.results import TimelineResult


class Phase(str, Enum):
    """Fermentation phase"""

    BULK = "bulk"
    FRIDGE = "fridge"
    WARMUP = "warmup"
    PROOF = "proof"


@dataclass(frozen=True)
class PhaseWindow:
    """One phase on the wall clock."""

    phase: Phase
    start_offset_hours: float
    end_offset_hours: float
    starts_at: datetime
    ends_at: datetime

    def duration_hours(self) -> float:
        return self.end_offset_hours - self.start_offset_hours


def parse_start_time(value: str, on_date: date) -> datetime:
    """Parse an "HH:MM" start time on the given date.

    Raises:
        ValueError: If value is not a valid HH:MM time
    """
    parsed = datetime.strptime(value.strip(), "%H:%M").time()
    return datetime.combine(on_date, time(parsed.hour, parsed.minute))


def build_schedule(timeline: TimelineResult, start: datetime) -> list[PhaseWindow]:
    """Place the timeline segments on the clock, starting at `start`.

    Args:
        timeline: segment durations
        start: when mixing begins

    Returns:
        Phase windows in order bulk -> fridge -> warmup -> proof
    """
    segments = [
        (Phase.BULK, timeline.bulk_hours),
        (Phase.FRIDGE, timeline.fridge_hours),
        (Phase.WARMUP, timeline.warmup_hours),
        (Phase.PROOF, timeline.proof_hours),
    ]

    windows: list[PhaseWindow] = []
    cursor = start
    offset_minutes = 0

    for phase, hours in segments:
        if phase in (Phase.FRIDGE, Phase.WARMUP) and hours <= 0:
            continue

        minutes = round(hours * 60)
        ends_at = cursor + timedelta(minutes=minutes)
        windows.append(
            PhaseWindow(
                phase=phase,
                start_offset_hours=offset_minutes / 60,
                end_offset_hours=(offset_minutes + minutes) / 60,
                starts_at=cursor,
                ends_at=ends_at,
            )
        )
        cursor = ends_at
        offset_minutes += minutes

    return windows
