"""Timestamp parsing and display formatting."""

from datetime import datetime, timezone


def parse_timestamp(value) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Naive timestamps are taken as UTC so every entry compares on one axis.
    Raises ValueError on unparseable input.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(dt: datetime, include_time: bool = False, include_weekday: bool = False) -> str:
    """Format as "Mar 5", "Tue, Mar 5" or "Mar 5, 02:30 PM".

    Rendered in the timestamp's own UTC offset.
    """
    text = f"{dt.strftime('%b')} {dt.day}"
    if include_weekday:
        text = f"{dt.strftime('%a')}, {text}"
    if include_time:
        text = f"{text}, {dt.strftime('%I:%M %p')}"
    return text
