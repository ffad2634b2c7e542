"""CLI entry point for drift-insights."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import export, profile, users
from cli.config import load_config
from cli.logging_config import setup_logging
from cli.utils import console


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Drift log JSON file (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, data_path: Path):
    """Drift Insights - per-user drift log analytics."""
    try:
        config = load_config()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    level = "DEBUG" if verbose else config.logging.level
    source = data_path or config.source.url or config.source.path
    setup_logging(
        json_mode=config.logging.json_mode,
        level=level,
        source=str(source) if source else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["data_path"] = data_path


cli.add_command(users)
cli.add_command(profile)
cli.add_command(export)

if __name__ == "__main__":
    cli()
