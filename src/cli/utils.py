"""Shared CLI utilities."""

import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

console = Console()


def get_components(data_path: Optional[Path] = None, config=None):
    """Load config and the drift log snapshot.

    Args:
        data_path: Overrides the configured source (path and url)
        config: Already-loaded DriftConfig; loaded from disk when None
    """
    from cli.config import load_config
    from cli.retry import retry_options
    from driftlog.loader import load_entries

    if config is None:
        try:
            config = load_config()
        except ValueError as e:
            console.print(f"[red]Config error:[/] {e}")
            sys.exit(1)

    source = config.source
    if data_path:
        entries = load_entries(path=Path(data_path), key=source.key)
    else:
        entries = load_entries(
            path=source.path,
            url=source.url,
            key=source.key,
            timeout=source.timeout,
            **retry_options(config),
        )

    return {
        "config": config,
        "entries": entries,
    }
