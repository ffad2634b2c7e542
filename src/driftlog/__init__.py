"""Drift log aggregation: per-user summaries, metrics and chart rollups."""

from .dashboard import build_overview, build_user_profile, to_dict
from .grouping import filter_summaries, get_user_entries, group_by_user, summarize_users
from .loader import load_entries
from .metrics import compute_metrics
from .models import (
    FrequencyBucket,
    JourneyMetrics,
    LogEntry,
    Overview,
    PhaseBucket,
    StatusCount,
    TimelineDataPoint,
    UserProfile,
    UserSummary,
)
from .rollups import frequency_rollup, phase_rollup, timeline_rollup

__all__ = [
    "LogEntry",
    "UserSummary",
    "TimelineDataPoint",
    "PhaseBucket",
    "FrequencyBucket",
    "StatusCount",
    "JourneyMetrics",
    "UserProfile",
    "Overview",
    "load_entries",
    "group_by_user",
    "summarize_users",
    "get_user_entries",
    "filter_summaries",
    "compute_metrics",
    "timeline_rollup",
    "phase_rollup",
    "frequency_rollup",
    "build_overview",
    "build_user_profile",
    "to_dict",
]
