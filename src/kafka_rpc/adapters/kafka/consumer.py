"""Kafka adapter – KafkaConsumer."""
from __future__ import annotations

from typing import Any

from kafka_rpc.kernel.messaging import Envelope, MessageSubscriber


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'aiokafka' to use the Kafka adapter") from exc


class KafkaConsumer(MessageSubscriber):
    """aiokafka-backed consumer of a single topic implementing ``MessageSubscriber``.

    ``receive`` takes one record per call. aiokafka prefetches in the background,
    but the consumed position, and so the auto-committed offset, never moves past
    a record the caller has not been handed.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        group_id: str,
        topic: str,
        **kwargs: Any,
    ) -> None:
        aiokafka = _require_aiokafka()
        self._topic = topic
        self._group_id = group_id
        self._consumer = aiokafka.AIOKafkaConsumer(
            topic,
            bootstrap_servers=bootstrap_servers,
            group_id=group_id,
            **kwargs,
        )
        self._started = False

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def group_id(self) -> str:
        return self._group_id

    async def start(self) -> None:
        if self._started:
            return
        await self._consumer.start()
        self._started = True

    async def stop(self) -> None:
        if not self._started:
            return
        await self._consumer.stop()
        self._started = False

    async def receive(self, timeout: float) -> Envelope | None:
        batches = await self._consumer.getmany(timeout_ms=int(timeout * 1000), max_records=1)
        for records in batches.values():
            for record in records:
                return Envelope.from_record(record.value, record.headers)
        return None

    async def __aenter__(self) -> "KafkaConsumer":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()


__all__ = ["KafkaConsumer"]
