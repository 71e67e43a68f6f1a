"""Kafka adapter – KafkaRpcFactory: wires requestors, responders and provisioning from settings."""
from __future__ import annotations

from typing import Any, TypeVar

from kafka_rpc.adapters.kafka.admin import KafkaTopicProvisioner
from kafka_rpc.adapters.kafka.consumer import KafkaConsumer
from kafka_rpc.adapters.kafka.producer import KafkaProducer
from kafka_rpc.application.rpc import Handler, Requestor, Responder
from kafka_rpc.config import KafkaSettings
from kafka_rpc.contracts.topics import requestor_group_id, responder_group_id
from kafka_rpc.kernel.messaging import MessageSerializer

Req = TypeVar("Req")
Resp = TypeVar("Resp")


class KafkaRpcFactory:
    """Builds Kafka-backed RPC components.

    Every component gets its own producer and consumer; connections are never
    shared between instances.
    """

    def __init__(self, settings: KafkaSettings | None = None) -> None:
        self._settings = settings or KafkaSettings()

    @property
    def settings(self) -> KafkaSettings:
        return self._settings

    def producer(self) -> KafkaProducer:
        return KafkaProducer(self._settings.bootstrap_servers, **self._settings.producer_options())

    def consumer(self, topic: str, group_id: str) -> KafkaConsumer:
        return KafkaConsumer(
            self._settings.bootstrap_servers,
            group_id=group_id,
            topic=topic,
            **self._settings.consumer_options(),
        )

    def requestor(
        self,
        reply_topic: str,
        response_type: type[Resp],
        *,
        serializer: MessageSerializer[Any] | None = None,
    ) -> Requestor[Any, Resp]:
        return Requestor(
            self.producer(),
            self.consumer(reply_topic, requestor_group_id(reply_topic)),
            response_type,
            serializer=serializer,
            default_timeout=self._settings.request_timeout_seconds,
            poll_interval=self._settings.poll_interval_seconds,
            shutdown_timeout=self._settings.shutdown_timeout_seconds,
        )

    def responder(
        self,
        request_topic: str,
        request_type: type[Req],
        handler: Handler[Req, Resp],
        *,
        replies: bool = True,
        serializer: MessageSerializer[Any] | None = None,
    ) -> Responder[Req, Resp]:
        """Build a responder; ``replies=False`` skips the reply producer for fire-and-forget topics."""
        return Responder(
            self.consumer(request_topic, responder_group_id(request_topic)),
            handler,
            request_type,
            publisher=self.producer() if replies else None,
            serializer=serializer,
            poll_interval=self._settings.poll_interval_seconds,
        )

    def provisioner(self) -> KafkaTopicProvisioner:
        return KafkaTopicProvisioner(
            self._settings.bootstrap_servers,
            num_partitions=self._settings.topic_partitions,
            replication_factor=self._settings.topic_replication_factor,
        )


__all__ = ["KafkaRpcFactory"]
