"""Scalar aggregates over an entry sequence.

Every function accepts an empty sequence and returns 0 for it.
"""

from collections import Counter
from datetime import timedelta
from types import MappingProxyType
from typing import Sequence

from .models import JourneyMetrics, LogEntry, StatusCount
from .palette import mood_color

MS_PER_DAY = 86_400_000


def completion_ratio(entries: Sequence[LogEntry]) -> float:
    """Percentage (0-100) of entries flagged final."""
    if not entries:
        return 0.0
    completed = sum(1 for e in entries if e.is_final)
    return completed / len(entries) * 100


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def average_intensity(entries: Sequence[LogEntry]) -> float:
    return _mean([e.conflict_intensity for e in entries])


def average_frequency(entries: Sequence[LogEntry]) -> float:
    return _mean([e.field_hz for e in entries])


def mood_diversity(entries: Sequence[LogEntry]) -> int:
    return len({e.mood_label for e in entries})


def journey_duration_days(entries: Sequence[LogEntry]) -> int:
    """Elapsed days between first and last entry, rounded up.

    Uses the raw millisecond difference, so two entries either side of
    midnight but an hour apart count as one day, not two.
    """
    if len(entries) <= 1:
        return 0
    stamps = [e.created_at for e in entries]
    elapsed_ms = (max(stamps) - min(stamps)) // timedelta(milliseconds=1)
    return -(-elapsed_ms // MS_PER_DAY)


def status_counts(entries: Sequence[LogEntry]) -> dict[str, int]:
    """Occurrences per status, in order of first appearance."""
    return dict(Counter(e.status_code for e in entries))


def status_rollup(entries: Sequence[LogEntry]) -> list[StatusCount]:
    """One point per status, colored by the mood of its first entry."""
    first_mood = {}
    for e in entries:
        first_mood.setdefault(e.status_code, e.mood_label)
    return [
        StatusCount(status=s, count=n, fill=mood_color(first_mood[s]))
        for s, n in status_counts(entries).items()
    ]


def compute_metrics(entries: Sequence[LogEntry]) -> JourneyMetrics:
    entries = list(entries)
    return JourneyMetrics(
        completion_ratio=completion_ratio(entries),
        average_intensity=average_intensity(entries),
        average_frequency=average_frequency(entries),
        mood_diversity=mood_diversity(entries),
        journey_duration_days=journey_duration_days(entries),
        status_counts=MappingProxyType(status_counts(entries)),
    )
