"""Shared enums and types for drift-insights."""

from enum import StrEnum


class ChartType(StrEnum):
    TIMELINE = "timeline"
    FREQUENCY = "frequency"
    PHASE = "phase"
    STATUS = "status"
    ENTRIES = "entries"


class StatusIcon(StrEnum):
    CHECK_CIRCLE = "check-circle"
    TRENDING_UP = "trending-up"
    CLOCK = "clock"
    ACTIVITY = "activity"
    SHIELD = "shield"
    SPARKLES = "sparkles"
    ALERT_CIRCLE = "alert-circle"
