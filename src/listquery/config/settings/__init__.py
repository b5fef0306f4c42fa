"""Config settings – 12-factor env-based configuration."""
from listquery.config.settings.base import Settings
from listquery.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from listquery.config.settings.search import SearchSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
