"""Contracts – topic catalog and consumer-group naming conventions."""
from __future__ import annotations

from uuid import uuid4


def responder_group_id(request_topic: str) -> str:
    """Group shared by every responder of *request_topic*, so they load-balance."""
    return f"{request_topic}-consumer-group"


def requestor_group_id(reply_topic: str) -> str:
    """A fresh group per requestor instance, so each one sees all of its replies."""
    return f"{reply_topic}-requestor-{uuid4()}"


class Topics:
    """Request/reply topic names, grouped by entity."""

    class Sample:
        CONSUMER_GROUP = "sample-service"

        WANTS_CREATE = "wants-create-sample"
        COMPLETED_CREATE = "completed-create-sample"

        WANTS_UPDATE = "wants-update-sample"
        COMPLETED_UPDATE = "completed-update-sample"

        WANTS_DELETE = "wants-delete-sample"
        COMPLETED_DELETE = "completed-delete-sample"

        WANTS_GET = "wants-get-sample"
        COMPLETED_GET = "completed-get-sample"

        WANTS_GET_ALL = "wants-get-samples"
        COMPLETED_GET_ALL = "completed-get-samples"

        @classmethod
        def all(cls) -> frozenset[str]:
            return frozenset(
                value
                for name, value in vars(cls).items()
                if name.startswith(("WANTS_", "COMPLETED_"))
            )


__all__ = ["Topics", "requestor_group_id", "responder_group_id"]
