"""Config validation errors – raised while loading or checking settings."""
from __future__ import annotations

from kafka_rpc.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or are inconsistent."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no value in the environment."""
    default_code = "missing_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set and has no default", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. a non-numeric ``KAFKA_SESSION_TIMEOUT_MS``."""
    default_code = "invalid_setting"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} is invalid: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
