"""Config – 12-factor engine settings and loaders."""

from factory_muffin.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FactorySettings,
    Settings,
    SettingsLoader,
)
from factory_muffin.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FactorySettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
