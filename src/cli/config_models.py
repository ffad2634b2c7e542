"""Pydantic configuration models for drift-insights."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from driftlog.loader import DEFAULT_KEY


class SourceConfig(BaseModel):
    """Where the drift log JSON comes from."""

    path: Path = Path("~/drift/mock_data.json")
    url: Optional[str] = None  # takes precedence over path
    key: str = DEFAULT_KEY
    timeout: float = 10.0

    @model_validator(mode="after")
    def expand_path(self):
        self.path = self.path.expanduser()
        return self

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got {v}")
        return v


class RetryConfig(BaseModel):
    """Retry/backoff configuration for HTTP sources."""

    max_attempts: int = 3
    min_wait: float = 2.0
    max_wait: float = 10.0


class DisplayConfig(BaseModel):
    """Terminal rendering defaults."""

    timeline_limit: int = 20
    include_time: bool = False
    include_weekday: bool = False

    @field_validator("timeline_limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"timeline_limit must be >= 1, got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class DriftConfig(BaseModel):
    """Main configuration model."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand a ${VAR} source url from the environment."""
        url = self.source.url
        if url and url.startswith("${") and url.endswith("}"):
            self.source.url = os.getenv(url[2:-1]) or None
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "DriftConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
