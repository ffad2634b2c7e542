"""Timeline, phase and frequency rollups for the chart views."""

import math
from collections import defaultdict
from typing import Sequence

from .dates import format_date
from .models import FrequencyBucket, LogEntry, PhaseBucket, TimelineDataPoint
from .palette import frequency_color, mood_color, phase_color

BAND_WIDTH = 100
PHASE_VALUE_STEP = 25


def timeline_rollup(entries: Sequence[LogEntry]) -> list[TimelineDataPoint]:
    """One point per entry, in the order given."""
    return [
        TimelineDataPoint(
            index=i,
            date=format_date(e.created_at),
            intensity=e.conflict_intensity,
            mood=e.mood_label,
            hz=e.field_hz,
            phase=e.bloom_phase,
            color=mood_color(e.mood_label),
            petal=e.bloom_petal,
            constellation=e.constellation,
            status=e.status_code,
            desire=e.input_desire,
            full_date=e.created_at,
        )
        for i, e in enumerate(entries, start=1)
    ]


def _distinct(values) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def phase_rollup(entries: Sequence[LogEntry]) -> list[PhaseBucket]:
    """Group by bloom_phase, ascending.

    Phases outside 1-4 still get a bucket; only their fill color falls back.
    """
    groups = defaultdict(list)
    for e in entries:
        groups[e.bloom_phase].append(e)

    return [
        PhaseBucket(
            phase=phase,
            name=f"Phase {phase}",
            value=phase * PHASE_VALUE_STEP,
            count=len(members),
            moods=_distinct(m.mood_label for m in members),
            fill=phase_color(phase),
        )
        for phase, members in sorted(groups.items())
    ]


def frequency_band(hz: float) -> int:
    """Lower bound of the 100 Hz band containing hz."""
    return int(math.floor(hz / BAND_WIDTH) * BAND_WIDTH)


def band_label(low: int) -> str:
    return f"{low}-{low + BAND_WIDTH - 1}"


def frequency_rollup(entries: Sequence[LogEntry]) -> list[FrequencyBucket]:
    """Group field_hz into 100 Hz bands, ordered by numeric lower bound."""
    groups = defaultdict(list)
    for e in entries:
        groups[frequency_band(e.field_hz)].append(e)

    return [
        FrequencyBucket(
            low=low,
            range=band_label(low),
            count=len(members),
            avg_frequency=sum(m.field_hz for m in members) / len(members),
            moods=_distinct(m.mood_label for m in members),
            fill=frequency_color(low),
        )
        for low, members in sorted(groups.items())
    ]
