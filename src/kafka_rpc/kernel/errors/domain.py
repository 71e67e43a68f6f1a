"""Domain errors – contract and invariant violations raised to the caller."""

from __future__ import annotations

from typing import Any

from kafka_rpc.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a usage rule or invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An internal invariant was violated (programming error)."""

    default_code = "invariant_violation"


class DuplicateCorrelationIdError(InvariantViolationError):
    """A correlation id was registered while already pending."""

    default_code = "duplicate_correlation_id"

    def __init__(self, correlation_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"Correlation id '{correlation_id}' is already pending",
            detail={"correlation_id": correlation_id},
            **kwargs,
        )
        self.correlation_id = correlation_id


class ValidationError(DomainError):
    """Call arguments do not meet the operation's preconditions.

    ``errors`` is a list of field-level failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = [
    "DomainError",
    "DuplicateCorrelationIdError",
    "InvariantViolationError",
    "ValidationError",
]
