"""Observability – ambient context of the request a responder is handling."""
from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar
from typing import Any, Iterator


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Identifiers of the inbound request currently being handled."""
    correlation_id: str | None
    topic: str | None = None
    event_type: str | None = None

    def log_fields(self) -> dict[str, Any]:
        """Non-``None`` identifiers keyed the way they appear in log events."""
        fields = {
            "correlation_id": self.correlation_id,
            "request_topic": self.topic,
            "event_type": self.event_type,
        }
        return {key: value for key, value in fields.items() if value is not None}


_current: ContextVar[RequestContext | None] = ContextVar("kafka_rpc_request_context", default=None)


class CorrelationContext:
    """Access to the :class:`RequestContext` of the running task.

    Each asyncio task sees its own value, so concurrent handlers never observe
    each other's context.
    """

    @staticmethod
    def get() -> RequestContext | None:
        return _current.get()

    @staticmethod
    def require() -> RequestContext:
        ctx = _current.get()
        if ctx is None:
            raise RuntimeError("Not inside a request scope")
        return ctx

    @staticmethod
    @contextlib.contextmanager
    def scope(ctx: RequestContext) -> Iterator[RequestContext]:
        """Install *ctx* for the ``with`` block and restore the outer value on exit."""
        token = _current.set(ctx)
        try:
            yield ctx
        finally:
            _current.reset(token)


__all__ = ["CorrelationContext", "RequestContext"]
