"""Config – settings and loaders."""

from flood_commons.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FloodSettings,
    Settings,
    SettingsLoader,
)
from flood_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FloodSettings",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
