"""Kernel messaging – envelope, serializer, broker ports and handler results."""
from kafka_rpc.kernel.messaging.envelope import (
    CORRELATION_ID_HEADER,
    EVENT_TYPE_HEADER,
    REPLY_TOPIC_HEADER,
    Envelope,
    RawHeaders,
)
from kafka_rpc.kernel.messaging.ports import (
    MessagePublisher,
    MessageSubscriber,
    TopicProvisioner,
)
from kafka_rpc.kernel.messaging.result import NO_REPLY, HandlerResult, NoReply, Reply
from kafka_rpc.kernel.messaging.serializer import JsonMessageSerializer, MessageSerializer

__all__ = [
    "CORRELATION_ID_HEADER",
    "EVENT_TYPE_HEADER",
    "NO_REPLY",
    "REPLY_TOPIC_HEADER",
    "Envelope",
    "HandlerResult",
    "JsonMessageSerializer",
    "MessagePublisher",
    "MessageSerializer",
    "MessageSubscriber",
    "NoReply",
    "RawHeaders",
    "Reply",
    "TopicProvisioner",
]
