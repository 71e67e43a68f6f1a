"""Application RPC – correlation registry, requestor and responder."""
from kafka_rpc.application.rpc.registry import CorrelationRegistry
from kafka_rpc.application.rpc.requestor import Requestor
from kafka_rpc.application.rpc.responder import Handler, Responder

__all__ = ["CorrelationRegistry", "Handler", "Requestor", "Responder"]
