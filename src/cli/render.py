"""Rich markup helpers shared by the CLI commands."""

from types import MappingProxyType

from rich.markup import escape

from driftlog.palette import classify_status, mood_color

# Tailwind 400 shades, matching the web dashboard
STATUS_HEX = MappingProxyType(
    {
        "green": "#4ADE80",
        "blue": "#60A5FA",
        "yellow": "#FACC15",
        "orange": "#FB923C",
        "purple": "#C084FC",
        "pink": "#F472B6",
        "gray": "#9CA3AF",
    }
)

DRIFT_HEX = MappingProxyType(
    {
        "azure": "#60A5FA",
        "violet": "#A855F7",
        "golden": "#F59E0B",
        "cosmic": "#C084FC",
        "emerald": "#10B981",
        "amber": "#F97316",
    }
)


def status_markup(status: str) -> str:
    style = classify_status(status)
    return f"[{STATUS_HEX.get(style.color, '#9CA3AF')}]{style.label}[/]"


def mood_markup(mood: str) -> str:
    return f"[{mood_color(mood)}]{escape(mood)}[/]"


def swatch(color: str) -> str:
    return f"[{DRIFT_HEX.get(color, '#60A5FA')}]██[/]"
