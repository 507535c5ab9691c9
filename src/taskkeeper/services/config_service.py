"""Configuration service for taskkeeper.

Single source of truth for the CLI configuration. It handles:

- Loading and saving config.json under the platform config directory
- Creating a default config on first run
- Reading and writing individual values by dot-separated key
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from taskkeeper.models.config_models import AppConfig


class ConfigService:
    """Service for loading, saving and editing the application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("taskkeeper"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()
        return self._config

    def get_value(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration value
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set_value(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and persist it.

        Raises:
            KeyError: If the key does not name a configuration value
            ValueError: If the value is not valid for that key
        """
        current = self.get_value(key)
        if isinstance(current, BaseModel):
            raise KeyError(key)

        data = self.config.model_dump()
        *parents, leaf = key.split(".")
        target = data
        for part in parents:
            target = target[part]
        target[leaf] = value

        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {value!r}") from e
        self.save_config()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the shared ConfigService instance."""
    return ConfigService()
