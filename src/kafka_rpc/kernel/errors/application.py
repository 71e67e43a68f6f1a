"""Application-layer errors – the outcomes an RPC caller can observe."""

from __future__ import annotations

from typing import Any

from kafka_rpc.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RpcError(ApplicationError):
    """Base for request/reply failures."""

    default_code = "rpc_error"


class RequestTimeoutError(RpcError):
    """No matching reply arrived within the caller's timeout."""

    default_code = "timeout"

    def __init__(
        self,
        correlation_id: str,
        *,
        topic: str | None = None,
        timeout_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"Request {correlation_id} timed out"
        if timeout_seconds is not None:
            message = f"Request {correlation_id} timed out after {timeout_seconds}s"
        super().__init__(
            message,
            detail={"correlation_id": correlation_id, "topic": topic, "timeout_seconds": timeout_seconds},
            **kwargs,
        )
        self.correlation_id = correlation_id
        self.topic = topic
        self.timeout_seconds = timeout_seconds


class RequestCancelledError(RpcError):
    """The call was still pending when its requestor shut down."""

    default_code = "cancelled"

    def __init__(self, correlation_id: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Request {correlation_id} cancelled by requestor shutdown",
            detail={"correlation_id": correlation_id},
            **kwargs,
        )
        self.correlation_id = correlation_id


class HandlerError(RpcError):
    """A responder handler raised or returned something other than a handler result."""

    default_code = "handler_error"


__all__ = [
    "ApplicationError",
    "HandlerError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "RpcError",
]
