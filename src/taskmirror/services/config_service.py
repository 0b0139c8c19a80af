"""Configuration service for taskmirror.

ConfigService is the single source of truth for configuration. It loads and
saves config.json under the platformdirs user config directory and exposes
dot-separated key access (``remote.latency``, ``storage.db_path``...).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from taskmirror.models import AppConfig
from taskmirror.utils.logger import get_logger


class ConfigService:
    """Service for loading, saving and editing the application configuration."""

    def __init__(self, config_dir: str | Path | None = None):
        """Initialize the config service.

        Args:
            config_dir: Directory holding config.json. If None, uses the
                platform user config directory.
        """
        self.config_dir = Path(config_dir or user_config_dir("taskmirror"))
        self.config_path = self.config_dir / "config.json"
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from config.json.

        A missing file yields the defaults. An unreadable or invalid file is
        logged and also yields the defaults.
        """
        if not self.config_path.exists():
            return AppConfig()

        try:
            return AppConfig.model_validate_json(
                self.config_path.read_text(encoding="utf-8")
            )
        except (OSError, ValueError, ValidationError) as e:
            get_logger().warning(
                "ignoring invalid config file %s: %s", self.config_path, e
            )
            return AppConfig()

    def save_config(self) -> None:
        """Save the current configuration to config.json."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(
            self.config.model_dump_json(indent=4), encoding="utf-8"
        )
        self.config_path.chmod(0o600)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not name a configuration field
            ValidationError: If the value is invalid for the field
        """
        self.get(key)
        config_dict = self.config.model_dump()

        parts = key.split(".")
        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or one key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        self.get(key)
        default_value: Any = AppConfig()
        for part in key.split("."):
            default_value = getattr(default_value, part)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        self.set(key, default_value)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    return ConfigService()
