"""Profile export CLI command."""

import json
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.markup import escape

from cli.utils import console, get_components


@click.command()
@click.argument("user_id")
@click.option("-o", "--output", required=True, type=click.Path(), help="Output JSON path")
@click.pass_obj
def export(obj: dict, user_id: str, output: str):
    """Export a user's profile snapshot as JSON."""
    from driftlog.dashboard import build_user_profile, to_dict

    c = get_components(obj.get("data_path"), obj.get("config"))
    p = build_user_profile(c["entries"], user_id)

    if p is None:
        console.print(f"[yellow]User '{escape(user_id)}' not found, nothing exported.[/]")
        return

    export_data = {
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "profile": to_dict(p),
    }

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(export_data, indent=2, default=str))

    console.print(f"[green]Exported {len(p.entries)} entries to {escape(str(output_path))}[/]")
