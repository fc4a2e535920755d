"""Config settings – env-based configuration."""
from flood_commons.config.settings.base import FloodSettings, Settings
from flood_commons.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "FloodSettings", "Settings", "SettingsLoader"]
