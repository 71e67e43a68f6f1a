"""Config settings – KafkaSettings."""
from __future__ import annotations

import dataclasses
from typing import Any

from kafka_rpc.config.settings.base import Settings
from kafka_rpc.config.validation import InvalidSettingValueError

_OFFSET_RESETS = ("earliest", "latest", "none")


@dataclasses.dataclass
class KafkaSettings(Settings):
    """Broker connection and RPC runtime settings (``KAFKA_*`` environment variables)."""

    _prefix: dataclasses.ClassVar[str] = "KAFKA"

    bootstrap_servers: str = "localhost:9092"
    service_name: str = ""
    schema_registry_url: str | None = None

    auto_offset_reset: str = "earliest"
    enable_auto_commit: bool = True
    session_timeout_ms: int = 30_000
    max_poll_interval_ms: int = 120_000
    retry_backoff_ms: int = 100

    poll_interval_seconds: float = 0.5
    shutdown_timeout_seconds: float = 5.0
    request_timeout_seconds: float = 30.0

    topic_partitions: int = 1
    topic_replication_factor: int = 1

    def _validate(self) -> None:
        if not self.bootstrap_servers:
            raise InvalidSettingValueError("bootstrap_servers", self.bootstrap_servers, "must not be empty")
        if self.auto_offset_reset not in _OFFSET_RESETS:
            raise InvalidSettingValueError(
                "auto_offset_reset", self.auto_offset_reset, f"expected one of {', '.join(_OFFSET_RESETS)}"
            )
        self._require_positive(
            "session_timeout_ms",
            "max_poll_interval_ms",
            "poll_interval_seconds",
            "shutdown_timeout_seconds",
            "request_timeout_seconds",
            "topic_partitions",
            "topic_replication_factor",
        )
        if self.retry_backoff_ms < 0:
            raise InvalidSettingValueError("retry_backoff_ms", self.retry_backoff_ms, "must not be negative")

    def consumer_options(self) -> dict[str, Any]:
        """Keyword arguments shared by every consumer built from these settings."""
        return {
            "auto_offset_reset": self.auto_offset_reset,
            "enable_auto_commit": self.enable_auto_commit,
            "session_timeout_ms": self.session_timeout_ms,
            "max_poll_interval_ms": self.max_poll_interval_ms,
            "retry_backoff_ms": self.retry_backoff_ms,
        }

    def producer_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {"retry_backoff_ms": self.retry_backoff_ms}
        if self.service_name:
            options["client_id"] = self.service_name
        return options


__all__ = ["KafkaSettings"]
