"""Root error class for the kafka-rpc error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of every error raised by kafka-rpc.

    Each error has a machine-readable ``code`` (``default_code`` of its class
    unless overridden) and a human-readable ``message``. ``detail`` holds the
    identifiers needed to trace the failure, such as ``correlation_id`` or
    ``topic``. ``cause`` is the underlying exception, also chained as
    ``__cause__``.
    """

    default_code: ClassVar[str] = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or type(self).default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event.

        ``error_code`` and ``error`` come first, then every non-``None`` detail
        entry, so callers must not pass those keys again.
        """
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        fields.update((key, value) for key, value in self.detail.items() if value is not None)
        if self.cause is not None:
            fields["cause"] = repr(self.cause)
        return fields

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message})"


__all__ = ["BaseError"]
