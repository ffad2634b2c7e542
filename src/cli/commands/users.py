"""User overview CLI command."""

import click
from rich.markup import escape
from rich.table import Table

from cli.utils import console, get_components


@click.command()
@click.option("-s", "--search", default=None, help="Filter by user id, mood or constellation")
@click.pass_obj
def users(obj: dict, search: str):
    """List users with their latest mood and journey completion."""
    from driftlog.dashboard import build_overview
    from driftlog.dates import format_date
    from cli.render import mood_markup, status_markup

    c = get_components(obj.get("data_path"), obj.get("config"))
    display = c["config"].display
    overview = build_overview(c["entries"], search=search)

    if not overview.users:
        if overview.total_users:
            console.print(f"[yellow]No users match '{escape(search)}'.[/]")
        else:
            console.print("[yellow]No drift log entries found.[/]")
        return

    table = Table(show_header=True, title=f"Drift Log Users ({overview.total_users})")
    table.add_column("User", style="bold")
    table.add_column("Entries", justify="right")
    table.add_column("Complete", justify="right")
    table.add_column("Mood")
    table.add_column("Constellation")
    table.add_column("Status")
    table.add_column("Last Activity", style="dim")

    for u in overview.users:
        table.add_row(
            escape(u.user_id),
            str(u.total_entries),
            f"{round(u.completion_ratio)}%",
            mood_markup(u.latest_mood),
            escape(u.constellation),
            status_markup(u.status_code),
            format_date(u.last_activity, include_time=True, include_weekday=display.include_weekday),
        )

    console.print(table)
    console.print(f"\n[bold]Entries:[/] {overview.total_entries}  |  Users shown: {len(overview.users)}")
