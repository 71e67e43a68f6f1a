"""Observability – structured logging and correlation context."""
from kafka_rpc.observability.correlation import CorrelationContext, RequestContext
from kafka_rpc.observability.logging import CorrelationProcessor, configure_logging, get_logger

__all__ = [
    "CorrelationContext",
    "CorrelationProcessor",
    "RequestContext",
    "configure_logging",
    "get_logger",
]
