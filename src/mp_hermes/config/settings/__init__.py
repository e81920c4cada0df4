"""Config settings – 12-factor env-based configuration."""
from mp_hermes.config.settings.base import Settings
from mp_hermes.config.settings.driver import DriverSettings
from mp_hermes.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "DriverSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
