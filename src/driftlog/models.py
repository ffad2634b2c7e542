"""Data models for drift log entries and their rollups."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class LogEntry:
    id: str
    user_id: str
    created_at: datetime
    is_final: bool
    mood_label: str
    conflict_intensity: float
    field_hz: float
    bloom_phase: int
    constellation: str
    status_code: str
    input_desire: str = ""
    field_name: str = ""
    bloom_petal: str = ""


@dataclass(frozen=True)
class UserSummary:
    user_id: str
    latest_entry: LogEntry
    total_entries: int
    completion_ratio: float  # 0-100
    latest_mood: str
    last_activity: datetime
    constellation: str
    status_code: str


@dataclass(frozen=True)
class TimelineDataPoint:
    index: int  # 1-based
    date: str
    intensity: float
    mood: str
    hz: float
    phase: int
    color: str
    petal: str = ""
    constellation: str = ""
    status: str = ""
    desire: str = ""
    full_date: datetime | None = None


@dataclass(frozen=True)
class PhaseBucket:
    phase: int
    name: str
    value: int  # phase * 25, radial chart magnitude; not a share of entries
    count: int
    moods: tuple[str, ...]
    fill: str


@dataclass(frozen=True)
class FrequencyBucket:
    low: int
    range: str
    count: int
    avg_frequency: float
    moods: tuple[str, ...]
    fill: str


@dataclass(frozen=True)
class StatusCount:
    status: str
    count: int
    fill: str = ""


@dataclass(frozen=True)
class StatusStyle:
    """Icon, color and label for a classified status string."""

    icon: str
    color: str
    label: str


@dataclass(frozen=True)
class JourneyMetrics:
    completion_ratio: float = 0.0
    average_intensity: float = 0.0
    average_frequency: float = 0.0
    mood_diversity: int = 0
    journey_duration_days: int = 0
    status_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class UserProfile:
    """Everything the profile view renders for one user."""

    user_id: str
    entries: tuple[LogEntry, ...]
    latest_entry: LogEntry
    metrics: JourneyMetrics
    timeline: tuple[TimelineDataPoint, ...]
    phases: tuple[PhaseBucket, ...]
    frequencies: tuple[FrequencyBucket, ...]
    statuses: tuple[StatusCount, ...]


@dataclass(frozen=True)
class Overview:
    total_entries: int
    total_users: int
    users: tuple[UserSummary, ...]
