"""Settings file loading.

Settings are read from a YAML file. The lookup order is an explicit path,
then ``$NODE_MAINTAIN_CONFIG``, then ``~/.config/node-maintain/settings.yaml``.
Only the default location may be absent.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from nodemaint.constants.defaults import (
    CONFIG_DIR_NAME,
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
)
from nodemaint.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigManager:
    """Loads AppSettings from YAML."""

    @staticmethod
    def default_path() -> Path:
        config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        return Path(config_home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def resolve_path(cls, path: str | Path | None = None) -> tuple[Path, bool]:
        """Return the settings path and whether it was requested explicitly."""
        if path:
            return Path(path).expanduser(), True
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser(), True
        return cls.default_path(), False

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppSettings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            ConfigLoadError: explicit file missing, unreadable, not valid YAML,
                or holding invalid values.
        """
        settings_path, explicit = cls.resolve_path(path)
        if not settings_path.exists():
            if explicit:
                raise ConfigLoadError(f"settings file not found: {settings_path}")
            logger.debug("No settings file at %s; using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"failed to read settings file {settings_path}: {e}") from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"settings file {settings_path} must contain a mapping, got {type(raw).__name__}"
            )

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"invalid settings in {settings_path}: {e}") from e

        logger.info("Loaded settings from %s", settings_path)
        return settings


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
