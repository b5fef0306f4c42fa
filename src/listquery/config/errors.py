"""Config errors."""
from __future__ import annotations

from listquery.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or are inconsistent."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} is required", env_key=env_key)
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            setting=setting_name,
            reason=reason,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
