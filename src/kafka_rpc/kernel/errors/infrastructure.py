"""Infrastructure errors – broker I/O and payload codec failures."""

from __future__ import annotations

from typing import Any

from kafka_rpc.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a usage rule violation."""

    default_code = "infrastructure_error"


class PublishError(InfrastructureError):
    """The broker rejected or failed to acknowledge a publish."""

    default_code = "publish_error"

    def __init__(self, topic: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Failed to publish to topic '{topic}'", **kwargs)
        self.topic = topic
        self.detail.setdefault("topic", topic)


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"


class DecodeError(SerializationError):
    """A message payload could not be decoded into the expected type."""

    default_code = "decode_error"


class TopicProvisioningError(InfrastructureError):
    """Creating a topic failed for a reason other than it already existing."""

    default_code = "topic_provisioning_error"

    def __init__(self, topic: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not provision topic '{topic}'", **kwargs)
        self.topic = topic
        self.detail.setdefault("topic", topic)


__all__ = [
    "DecodeError",
    "InfrastructureError",
    "PublishError",
    "SerializationError",
    "TopicProvisioningError",
]
