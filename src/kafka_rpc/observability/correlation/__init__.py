"""Observability – correlation context."""
from kafka_rpc.observability.correlation.context import CorrelationContext, RequestContext

__all__ = ["CorrelationContext", "RequestContext"]
