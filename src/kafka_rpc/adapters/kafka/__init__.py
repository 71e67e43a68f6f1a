"""Kafka adapter – producer, consumer, topic provisioner and RPC factory."""
from kafka_rpc.adapters.kafka.admin import KafkaTopicProvisioner
from kafka_rpc.adapters.kafka.consumer import KafkaConsumer
from kafka_rpc.adapters.kafka.factory import KafkaRpcFactory
from kafka_rpc.adapters.kafka.producer import KafkaProducer

__all__ = ["KafkaConsumer", "KafkaProducer", "KafkaRpcFactory", "KafkaTopicProvisioner"]
