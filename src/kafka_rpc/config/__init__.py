"""Config – 12-factor settings and loaders."""

from kafka_rpc.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    KafkaSettings,
    Settings,
    SettingsLoader,
)
from kafka_rpc.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "KafkaSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
