"""Kernel – framework-agnostic building blocks (errors, envelope, ports)."""

from kafka_rpc.kernel.errors import (
    ApplicationError,
    BaseError,
    DecodeError,
    DomainError,
    HandlerError,
    InfrastructureError,
    PublishError,
    RequestCancelledError,
    RequestTimeoutError,
    TopicProvisioningError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DecodeError",
    "DomainError",
    "HandlerError",
    "InfrastructureError",
    "PublishError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "TopicProvisioningError",
]
