"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from kafka_rpc.observability.correlation import CorrelationContext


class CorrelationProcessor:
    """structlog processor that stamps events with the active request context.

    Adds ``correlation_id``, ``request_topic`` and ``event_type`` from
    :class:`CorrelationContext` when set; keys already bound on the event win.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        ctx = CorrelationContext.get()
        if ctx is None:
            return event_dict
        for key, value in ctx.log_fields().items():
            event_dict.setdefault(key, value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger for *name* with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["CorrelationProcessor", "get_logger"]
