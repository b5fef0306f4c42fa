"""Config – dataclass settings loaded from the environment."""

from listquery.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from listquery.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SearchSettings,
    Settings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SearchSettings",
    "Settings",
    "SettingsLoader",
]
