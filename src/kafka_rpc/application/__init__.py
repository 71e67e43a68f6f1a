"""Application – request/reply orchestration over the kernel ports."""

from kafka_rpc.application.rpc import CorrelationRegistry, Handler, Requestor, Responder

__all__ = ["CorrelationRegistry", "Handler", "Requestor", "Responder"]
