"""Assemble the overview and per-user profile snapshots."""

from dataclasses import fields, is_dataclass
from datetime import datetime
from typing import Mapping, Optional, Sequence

import structlog

from .grouping import filter_summaries, get_user_entries, summarize_users
from .metrics import compute_metrics, status_rollup
from .models import LogEntry, Overview, UserProfile
from .rollups import frequency_rollup, phase_rollup, timeline_rollup

logger = structlog.get_logger()


def build_overview(entries: Sequence[LogEntry], search: Optional[str] = None) -> Overview:
    summaries = summarize_users(entries)
    users = filter_summaries(summaries.values(), search)
    return Overview(
        total_entries=len(entries),
        total_users=len(summaries),
        users=tuple(users),
    )


def build_user_profile(entries: Sequence[LogEntry], user_id: str) -> Optional[UserProfile]:
    """Profile snapshot for one user, or None when the user has no entries."""
    user_entries = get_user_entries(entries, user_id)
    if not user_entries:
        logger.debug("user_not_found", user_id=user_id)
        return None

    return UserProfile(
        user_id=user_id,
        entries=tuple(user_entries),
        latest_entry=user_entries[-1],
        metrics=compute_metrics(user_entries),
        timeline=tuple(timeline_rollup(user_entries)),
        phases=tuple(phase_rollup(user_entries)),
        frequencies=tuple(frequency_rollup(user_entries)),
        statuses=tuple(status_rollup(user_entries)),
    )


def _jsonable(value):
    if is_dataclass(value):
        return {f.name: _jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def to_dict(obj) -> dict:
    """Plain JSON-ready dict for any output record."""
    if not is_dataclass(obj):
        raise TypeError(f"Expected a dataclass instance, got {type(obj).__name__}")
    return _jsonable(obj)
