"""Per-user partitioning and summaries."""

from collections import defaultdict
from typing import Iterable, Optional

import structlog

from .metrics import completion_ratio
from .models import LogEntry, UserSummary

logger = structlog.get_logger()


def group_by_user(entries: Iterable[LogEntry]) -> dict[str, list[LogEntry]]:
    """Partition entries by user_id, keeping original order within each user."""
    groups = defaultdict(list)
    for entry in entries:
        groups[entry.user_id].append(entry)
    return dict(groups)


def latest_entry(entries: Iterable[LogEntry]) -> Optional[LogEntry]:
    """Entry with the greatest created_at.

    On equal timestamps the one appearing last in the sequence wins.
    """
    latest = None
    for entry in entries:
        if latest is None or entry.created_at >= latest.created_at:
            latest = entry
    return latest


def summarize_user(user_id: str, entries: list[LogEntry]) -> UserSummary:
    latest = latest_entry(entries)
    return UserSummary(
        user_id=user_id,
        latest_entry=latest,
        total_entries=len(entries),
        completion_ratio=completion_ratio(entries),
        latest_mood=latest.mood_label,
        last_activity=latest.created_at,
        constellation=latest.constellation,
        status_code=latest.status_code,
    )


def summarize_users(entries: Iterable[LogEntry]) -> dict[str, UserSummary]:
    """Build one UserSummary per distinct user_id."""
    groups = group_by_user(entries)
    summaries = {user_id: summarize_user(user_id, group) for user_id, group in groups.items()}
    logger.debug("users_summarized", users=len(summaries))
    return summaries


def get_user_entries(entries: Iterable[LogEntry], user_id: str) -> list[LogEntry]:
    """One user's entries in chronological order (stable on equal timestamps)."""
    return sorted((e for e in entries if e.user_id == user_id), key=lambda e: e.created_at)


def filter_summaries(summaries: Iterable[UserSummary], term: Optional[str]) -> list[UserSummary]:
    """Case-insensitive search over user id, latest mood and constellation."""
    summaries = list(summaries)
    if not term:
        return summaries
    needle = term.lower()
    return [
        s
        for s in summaries
        if needle in s.user_id.lower()
        or needle in s.latest_mood.lower()
        or needle in s.constellation.lower()
    ]
