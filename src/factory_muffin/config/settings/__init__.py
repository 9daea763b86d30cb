"""Config settings – 12-factor env-based configuration."""
from factory_muffin.config.settings.base import FactorySettings, Settings
from factory_muffin.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "FactorySettings", "Settings", "SettingsLoader"]
