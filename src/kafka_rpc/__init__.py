"""
kafka_rpc – request/reply over Kafka topics.

Import path convention::

    from kafka_rpc.application.rpc import Requestor, Responder
    from kafka_rpc.kernel.messaging import Envelope, Reply, NO_REPLY
    from kafka_rpc.adapters.kafka import KafkaRpcFactory
    from kafka_rpc.config import KafkaSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
