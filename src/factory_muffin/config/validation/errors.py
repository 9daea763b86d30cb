"""Config errors: settings that are missing or unusable for the engine."""

from __future__ import annotations

from typing import Any

from factory_muffin.errors.base import FactoryMuffinError


class ConfigError(FactoryMuffinError):
    """Raised when engine settings cannot be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment value."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but the engine cannot use its value."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
