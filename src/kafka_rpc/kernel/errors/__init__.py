"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   │   └── DuplicateCorrelationIdError
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   └── RpcError
    │       ├── RequestTimeoutError
    │       ├── RequestCancelledError
    │       └── HandlerError
    └── InfrastructureError      (infrastructure.py)
        ├── PublishError
        ├── SerializationError
        │   └── DecodeError
        └── TopicProvisioningError
"""

from kafka_rpc.kernel.errors.application import (
    ApplicationError,
    HandlerError,
    RequestCancelledError,
    RequestTimeoutError,
    RpcError,
)
from kafka_rpc.kernel.errors.base import BaseError
from kafka_rpc.kernel.errors.domain import (
    DomainError,
    DuplicateCorrelationIdError,
    InvariantViolationError,
    ValidationError,
)
from kafka_rpc.kernel.errors.infrastructure import (
    DecodeError,
    InfrastructureError,
    PublishError,
    SerializationError,
    TopicProvisioningError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DecodeError",
    "DomainError",
    "DuplicateCorrelationIdError",
    "HandlerError",
    "InfrastructureError",
    "InvariantViolationError",
    "PublishError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "RpcError",
    "SerializationError",
    "TopicProvisioningError",
    "ValidationError",
]
