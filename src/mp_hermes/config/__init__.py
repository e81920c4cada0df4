"""Config – 12-factor settings for the dispatch driver."""
from mp_hermes.config.settings import DotenvSettingsLoader, DriverSettings, EnvSettingsLoader, Settings, SettingsLoader
from mp_hermes.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "DriverSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
