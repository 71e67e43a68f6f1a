"""Kafka adapter – KafkaProducer."""
from __future__ import annotations

from typing import Any

from kafka_rpc.kernel.errors import PublishError
from kafka_rpc.kernel.messaging import Envelope, MessagePublisher
from kafka_rpc.observability.logging import get_logger

logger = get_logger(__name__)


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'aiokafka' to use the Kafka adapter") from exc


class KafkaProducer(MessagePublisher):
    """aiokafka-backed producer implementing ``MessagePublisher``.

    ``publish`` returns once the broker has acknowledged the record.
    """

    def __init__(self, bootstrap_servers: str, **producer_kwargs: Any) -> None:
        aiokafka = _require_aiokafka()
        self._producer = aiokafka.AIOKafkaProducer(bootstrap_servers=bootstrap_servers, **producer_kwargs)
        self._started = False

    async def start(self) -> None:
        if self._started:
            return
        await self._producer.start()
        self._started = True

    async def stop(self) -> None:
        if not self._started:
            return
        await self._producer.stop()
        self._started = False

    async def __aenter__(self) -> "KafkaProducer":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def publish(self, topic: str, envelope: Envelope) -> None:
        if not self._started:
            await self.start()
        try:
            metadata = await self._producer.send_and_wait(
                topic,
                value=envelope.payload,
                key=None,
                headers=envelope.to_headers(),
            )
        except Exception as exc:
            raise PublishError(topic, f"Failed to publish to topic '{topic}': {exc}", cause=exc) from exc
        logger.debug(
            "kafka.published",
            topic=topic,
            correlation_id=envelope.correlation_id,
            partition=getattr(metadata, "partition", None),
            offset=getattr(metadata, "offset", None),
        )


__all__ = ["KafkaProducer"]
