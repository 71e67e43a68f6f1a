"""Config settings – 12-factor env-based configuration."""
from kafka_rpc.config.settings.base import Settings
from kafka_rpc.config.settings.kafka import KafkaSettings
from kafka_rpc.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "KafkaSettings", "Settings", "SettingsLoader"]
