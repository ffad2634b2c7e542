"""Per-user journey profile CLI command."""

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.utils import console, get_components


@click.command()
@click.argument("user_id")
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None, help="Timeline rows to show")
@click.pass_obj
def profile(obj: dict, user_id: str, limit: int):
    """Show metrics, phase, frequency, status and timeline views for a user."""
    from cli.render import mood_markup, status_markup, swatch
    from driftlog.dashboard import build_user_profile
    from driftlog.dates import format_date
    from driftlog.palette import empty_state_message, format_metric, metric_label
    from shared_types import ChartType

    c = get_components(obj.get("data_path"), obj.get("config"))
    display = c["config"].display
    p = build_user_profile(c["entries"], user_id)

    if p is None:
        console.print(f"[yellow]User '{escape(user_id)}' not found.[/]")
        console.print(empty_state_message(ChartType.ENTRIES))
        return

    m = p.metrics
    latest = p.latest_entry
    noun = "Entry" if len(p.entries) == 1 else "Entries"
    console.print(
        Panel(
            f"[bold]{round(m.completion_ratio)}% Complete[/]  |  "
            f"Avg intensity: {format_metric(m.average_intensity, 'intensity')}  |  "
            f"Avg frequency: {format_metric(m.average_frequency, 'hz')}\n"
            f"Moods: {m.mood_diversity}  |  Journey: {m.journey_duration_days} days  |  "
            f"Latest: {mood_markup(latest.mood_label)} in {escape(latest.constellation)} "
            f"({status_markup(latest.status_code)})",
            title=f"{escape(p.user_id)} - {len(p.entries)} Drift Log {noun}",
        )
    )

    phase_table = Table(title="Bloom Phases", show_header=True)
    phase_table.add_column(metric_label("phase"))
    phase_table.add_column(metric_label("value", ChartType.PHASE), justify="right")
    phase_table.add_column(metric_label("count"), justify="right")
    phase_table.add_column("Moods")
    for b in p.phases:
        phase_table.add_row(
            f"{swatch(b.fill)} {b.name}",
            format_metric(b.value, "value"),
            format_metric(b.count, "count"),
            ", ".join(mood_markup(mood) for mood in b.moods),
        )
    console.print(phase_table)

    freq_table = Table(title="Frequency Bands", show_header=True)
    freq_table.add_column("Band (Hz)")
    freq_table.add_column(metric_label("count"), justify="right")
    freq_table.add_column("Average", justify="right")
    freq_table.add_column("Moods")
    for b in p.frequencies:
        freq_table.add_row(
            f"{swatch(b.fill)} {b.range}",
            format_metric(b.count, "count"),
            format_metric(b.avg_frequency, "hz"),
            ", ".join(mood_markup(mood) for mood in b.moods),
        )
    console.print(freq_table)

    status_table = Table(title="Guardian Status", show_header=True)
    status_table.add_column("Status")
    status_table.add_column("Kind")
    status_table.add_column(metric_label("value", ChartType.STATUS), justify="right")
    for s in p.statuses:
        status_table.add_row(escape(s.status), status_markup(s.status), str(s.count))
    console.print(status_table)

    limit = limit or display.timeline_limit
    timeline_table = Table(title="Timeline", show_header=True)
    timeline_table.add_column("#", justify="right", style="dim")
    timeline_table.add_column(metric_label("date"))
    timeline_table.add_column(metric_label("mood"))
    timeline_table.add_column(metric_label("intensity"), justify="right")
    timeline_table.add_column(metric_label("hz"), justify="right")
    timeline_table.add_column(metric_label("phase"), justify="right")
    for point in p.timeline[-limit:]:
        timeline_table.add_row(
            str(point.index),
            format_date(
                point.full_date,
                include_time=display.include_time,
                include_weekday=display.include_weekday,
            ),
            mood_markup(point.mood),
            format_metric(point.intensity, "intensity"),
            format_metric(point.hz, "hz"),
            format_metric(point.phase, "phase"),
        )
    console.print(timeline_table)
