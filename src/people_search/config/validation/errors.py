"""Config validation errors."""
from __future__ import annotations

from people_search.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or do not describe a usable service."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No source provided a value for a setting without a default."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was provided but cannot be used (unparsable or out of range)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
