"""Observability – configure_logging."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from kafka_rpc.observability.logging.processors import CorrelationProcessor


def configure_logging(level: int = logging.INFO, *, json: bool = True) -> None:
    """Route structlog through the stdlib root logger.

    ``json=False`` renders with structlog's console renderer instead, which
    is easier on the eyes during local development.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        CorrelationProcessor(),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["configure_logging"]
