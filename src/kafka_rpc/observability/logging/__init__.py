"""Observability – structlog configuration and logger helpers."""
from kafka_rpc.observability.logging.factory import configure_logging
from kafka_rpc.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "configure_logging", "get_logger"]
