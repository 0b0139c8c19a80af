"""Configuration models.

The whole configuration is one pydantic model persisted as JSON by
ConfigService. Every section has defaults, so an empty or missing config
file yields a working local setup.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Local store configuration."""

    db_path: str | None = Field(
        default=None, description="SQLite database path (None: user data dir)"
    )


class RemoteConfig(BaseModel):
    """Simulated remote service configuration."""

    latency: float = Field(default=5.0, ge=0, description="Read latency in seconds")
    seed: bool = Field(
        default=True,
        description="Seed the sample tasks on every start (the remote keeps no state)",
    )
    available: bool = Field(default=True, description="False simulates an outage")


class RepositoryConfig(BaseModel):
    """Tasks repository configuration."""

    read_timeout: float | None = Field(
        default=None, gt=0, description="Per-read source timeout in seconds"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Main taskmirror configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
