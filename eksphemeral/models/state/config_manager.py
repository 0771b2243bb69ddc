"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from eksphemeral.constants.defaults import SETTINGS_PATH_DEFAULT
from eksphemeral.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and save :class:`AppSettings`."""

    @staticmethod
    def default_path() -> Path:
        return Path(SETTINGS_PATH_DEFAULT).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings from ``path`` (or the default location).

        A missing file yields default settings.

        Raises:
            ConfigLoadError: If the file cannot be read, is not valid YAML,
                or fails validation.
        """
        settings_path = path or cls.default_path()
        if not settings_path.exists():
            logger.debug(f"No settings file at {settings_path}, using defaults")
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read settings from {settings_path}: {e}") from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"Settings file {settings_path} must contain a mapping"
            )

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {e}") from e

        logger.info(f"Loaded settings from {settings_path}")
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings as YAML and return the path written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        settings_path = path or cls.default_path()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            settings_path.write_text(
                yaml.safe_dump(settings.model_dump(), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigSaveError(f"Cannot write settings to {settings_path}: {e}") from e
        return settings_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
