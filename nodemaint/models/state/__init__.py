"""Settings models and loading."""

from nodemaint.models.state.app_settings import AppSettings
from nodemaint.models.state.config_manager import (
    ConfigError,
    ConfigLoadError,
    ConfigManager,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
