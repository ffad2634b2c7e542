"""Configuration loading."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import DriftConfig


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "drift.yaml",
        Path.home() / ".drift" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> DriftConfig:
    """Load configuration as a validated model, falling back to defaults."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    try:
        return DriftConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")
