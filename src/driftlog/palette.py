"""Static color, label and message tables for moods, statuses and charts.

All tables are read-only. Lookups are total: any key missing from a table
resolves to that table's default instead of raising.
"""

from types import MappingProxyType

from shared_types import ChartType, StatusIcon

from .models import StatusStyle

DEFAULT_MOOD_COLOR = "#60A5FA"
DEFAULT_MOOD_TOKEN = "drift-azure"

MOOD_COLORS = MappingProxyType(
    {
        "Contemplative": "#60A5FA",
        "Frustrated": "#EF4444",
        "Serene": "#F59E0B",
        "Curious": "#A855F7",
        "Anxious": "#F97316",
        "Uncertain": "#10B981",
        "Determined": "#A855F7",
        "Balanced": "#F59E0B",
        "Vulnerable": "#D1D5DB",
        "Transcendent": "#C084FC",
    }
)

MOOD_TOKENS = MappingProxyType(
    {
        "Contemplative": "drift-azure",
        "Frustrated": "drift-crimson",
        "Serene": "drift-golden",
        "Curious": "drift-violet",
        "Anxious": "drift-amber",
        "Uncertain": "drift-emerald",
        "Determined": "drift-violet",
        "Balanced": "drift-golden",
        "Vulnerable": "drift-pearl",
        "Transcendent": "drift-cosmic",
    }
)

# Phases 1-4 in order; anything else uses the first color.
PHASE_COLORS = ("azure", "violet", "golden", "cosmic")

# (exclusive upper bound of band start, color); last entry catches the rest
FREQUENCY_COLORS = (
    (400, "violet"),
    (500, "azure"),
    (700, "emerald"),
    (900, "amber"),
    (None, "cosmic"),
)

# Checked in order, first group with a matching fragment wins.
STATUS_RULES = (
    (
        ("complete", "mastered", "fully_validated", "excellence_achieved"),
        StatusStyle(StatusIcon.CHECK_CIRCLE, "green", "Completed"),
    ),
    (
        ("compliant", "progressing", "active", "validated"),
        StatusStyle(StatusIcon.TRENDING_UP, "blue", "In Progress"),
    ),
    (
        ("processing", "pending", "in_progress"),
        StatusStyle(StatusIcon.CLOCK, "yellow", "Processing"),
    ),
    (
        ("evaluating", "preliminary"),
        StatusStyle(StatusIcon.ACTIVITY, "orange", "Evaluating"),
    ),
    (
        ("protective", "safety"),
        StatusStyle(StatusIcon.SHIELD, "purple", "Protected"),
    ),
    (
        ("elevated", "divine"),
        StatusStyle(StatusIcon.SPARKLES, "pink", "Elevated"),
    ),
)

UNKNOWN_STATUS = StatusStyle(StatusIcon.ALERT_CIRCLE, "gray", "Unknown")

COMPLETED_FRAGMENTS = STATUS_RULES[0][0]

EMPTY_STATE_MESSAGES = MappingProxyType(
    {
        ChartType.TIMELINE: (
            "As this user progresses through their emotional journey, "
            "their conflict intensity patterns will be visualized here."
        ),
        ChartType.FREQUENCY: (
            "Frequency distributions will show the user's most visited "
            "energetic states once more entries are logged."
        ),
        ChartType.PHASE: (
            "Bloom phase progression will display the user's growth "
            "trajectory through different emotional stages."
        ),
        ChartType.STATUS: (
            "Guardian status monitoring will track the safety and "
            "compliance of the user's journey."
        ),
        ChartType.ENTRIES: (
            "Individual drift log entries will appear here as the user "
            "documents their emotional experiences."
        ),
    }
)

DEFAULT_EMPTY_STATE = "Data visualization will appear here as the user's journey develops."

_METRIC_LABELS = MappingProxyType(
    {
        "intensity": "Conflict Intensity",
        "count": "Occurrences",
        "phase": "Bloom Phase",
        "hz": "Frequency (Hz)",
        "mood": "Emotional State",
        "date": "Timeline",
    }
)

_VALUE_LABELS = MappingProxyType(
    {
        ChartType.FREQUENCY: "Frequency Count",
        ChartType.PHASE: "Phase Progress",
        ChartType.STATUS: "Status Count",
    }
)


def mood_color(mood: str) -> str:
    return MOOD_COLORS.get(mood, DEFAULT_MOOD_COLOR)


def mood_token(mood: str) -> str:
    return MOOD_TOKENS.get(mood, DEFAULT_MOOD_TOKEN)


def phase_color(phase: int) -> str:
    if 1 <= phase <= len(PHASE_COLORS):
        return PHASE_COLORS[phase - 1]
    return PHASE_COLORS[0]


def frequency_color(low: int) -> str:
    for bound, color in FREQUENCY_COLORS:
        if bound is None or low < bound:
            return color
    return FREQUENCY_COLORS[-1][1]


def classify_status(status: str) -> StatusStyle:
    """Classify a status string by the first matching fragment group."""
    normalized = status.lower()
    for fragments, style in STATUS_RULES:
        if any(fragment in normalized for fragment in fragments):
            return style
    return UNKNOWN_STATUS


def is_completed_status(status: str) -> bool:
    return any(fragment in status for fragment in COMPLETED_FRAGMENTS)


def empty_state_message(chart: str) -> str:
    return EMPTY_STATE_MESSAGES.get(chart, DEFAULT_EMPTY_STATE)


def metric_label(key: str, chart: str = "default") -> str:
    """Human label for a chart data key."""
    if key == "value":
        return _VALUE_LABELS.get(chart, "Value")
    if key in _METRIC_LABELS:
        return _METRIC_LABELS[key]
    return key[:1].upper() + key[1:]


def format_metric(value, key: str, show_unit: bool = True) -> str:
    """Format a chart value with the unit its key implies.

    Non-numeric values are returned as plain strings.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)

    if key == "intensity":
        return f"{value * 100:.1f}%" if show_unit else f"{value:.2f}"
    if key == "hz":
        return f"{value:.1f} Hz" if show_unit else f"{value:.1f}"
    if key == "phase":
        return f"Phase {value}"
    if key == "count":
        return f"{value} entries" if show_unit else str(value)
    if key == "value":
        return str(value)
    return f"{value:.1f}"
