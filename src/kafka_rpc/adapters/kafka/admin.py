"""Kafka adapter – KafkaTopicProvisioner."""
from __future__ import annotations

from typing import Any, Iterable

from kafka_rpc.kernel.errors import TopicProvisioningError
from kafka_rpc.kernel.messaging import TopicProvisioner
from kafka_rpc.observability.logging import get_logger

logger = get_logger(__name__)


def _require_aiokafka_admin() -> Any:
    try:
        import aiokafka.admin  # type: ignore[import-untyped]
        import aiokafka.errors  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'aiokafka' to use the Kafka adapter") from exc


class KafkaTopicProvisioner(TopicProvisioner):
    """Idempotently creates topics through ``AIOKafkaAdminClient``.

    Topics are created one request at a time so that an existing topic
    never masks the outcome for the others.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        *,
        num_partitions: int = 1,
        replication_factor: int = 1,
        **admin_kwargs: Any,
    ) -> None:
        self._bootstrap_servers = bootstrap_servers
        self._num_partitions = num_partitions
        self._replication_factor = replication_factor
        self._admin_kwargs = admin_kwargs

    async def ensure_topics(self, names: Iterable[str]) -> None:
        topics = sorted(set(names))
        if not topics:
            return
        aiokafka = _require_aiokafka_admin()
        already_exists = aiokafka.errors.TopicAlreadyExistsError
        client = aiokafka.admin.AIOKafkaAdminClient(
            bootstrap_servers=self._bootstrap_servers,
            **self._admin_kwargs,
        )
        try:
            await client.start()
        except Exception as exc:
            raise TopicProvisioningError(
                ", ".join(topics), f"Could not reach the broker at {self._bootstrap_servers}", cause=exc
            ) from exc
        try:
            for topic in topics:
                new_topic = aiokafka.admin.NewTopic(
                    name=topic,
                    num_partitions=self._num_partitions,
                    replication_factor=self._replication_factor,
                )
                try:
                    await client.create_topics([new_topic])
                except already_exists:
                    logger.info("kafka.topic.exists", topic=topic)
                    continue
                except Exception as exc:
                    logger.error("kafka.topic.create_failed", topic=topic, error=repr(exc))
                    raise TopicProvisioningError(topic, cause=exc) from exc
                logger.info("kafka.topic.created", topic=topic)
        finally:
            await client.close()


__all__ = ["KafkaTopicProvisioner"]
