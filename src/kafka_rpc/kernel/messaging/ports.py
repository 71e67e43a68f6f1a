"""Kernel messaging – broker ports used by the RPC core."""
from __future__ import annotations

import abc
from typing import Iterable

from kafka_rpc.kernel.messaging.envelope import Envelope


class MessagePublisher(abc.ABC):
    """Port: append envelopes to a topic."""

    @abc.abstractmethod
    async def start(self) -> None: ...

    @abc.abstractmethod
    async def stop(self) -> None: ...

    @abc.abstractmethod
    async def publish(self, topic: str, envelope: Envelope) -> None:
        """Publish *envelope* to *topic* once the broker acknowledges it.

        Raises :class:`~kafka_rpc.kernel.errors.PublishError` on failure.
        """
        ...


class MessageSubscriber(abc.ABC):
    """Port: the single reader of one topic under one consumer group."""

    @property
    @abc.abstractmethod
    def topic(self) -> str: ...

    @property
    @abc.abstractmethod
    def group_id(self) -> str: ...

    @abc.abstractmethod
    async def start(self) -> None: ...

    @abc.abstractmethod
    async def stop(self) -> None: ...

    @abc.abstractmethod
    async def receive(self, timeout: float) -> Envelope | None:
        """Return the next envelope, or ``None`` when *timeout* seconds pass without one."""
        ...


class TopicProvisioner(abc.ABC):
    """Port: make sure topics exist before requestors/responders attach."""

    @abc.abstractmethod
    async def ensure_topics(self, names: Iterable[str]) -> None:
        """Create missing topics; existing ones are left alone.

        Raises :class:`~kafka_rpc.kernel.errors.TopicProvisioningError` on any
        other failure.
        """
        ...


__all__ = ["MessagePublisher", "MessageSubscriber", "TopicProvisioner"]
