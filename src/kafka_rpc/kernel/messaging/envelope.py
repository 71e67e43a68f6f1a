"""Kernel messaging – Envelope and its header codec."""
from __future__ import annotations

import dataclasses
from typing import Iterable

CORRELATION_ID_HEADER = "correlationId"
REPLY_TOPIC_HEADER = "replyTopic"
EVENT_TYPE_HEADER = "eventType"

type RawHeaders = Iterable[tuple[str, bytes | None]]


@dataclasses.dataclass(frozen=True)
class Envelope:
    """The wire unit: an opaque payload plus the routing headers.

    ``reply_topic`` is only set on requests that expect a reply.
    ``event_type`` is informational and never used for routing.
    """

    payload: bytes = b""
    correlation_id: str | None = None
    reply_topic: str | None = None
    event_type: str | None = None

    def to_headers(self) -> list[tuple[str, bytes]]:
        """Encode the present fields as ``(name, utf-8 bytes)`` header pairs."""
        headers: list[tuple[str, bytes]] = []
        for name, value in (
            (CORRELATION_ID_HEADER, self.correlation_id),
            (REPLY_TOPIC_HEADER, self.reply_topic),
            (EVENT_TYPE_HEADER, self.event_type),
        ):
            if value:
                headers.append((name, value.encode("utf-8")))
        return headers

    @classmethod
    def from_record(cls, payload: bytes | None, headers: RawHeaders | None) -> "Envelope":
        """Build an envelope from a raw broker record.

        The last occurrence of a repeated header wins, unknown headers are
        ignored and empty values are treated as absent.
        """
        decoded: dict[str, str] = {}
        for name, raw in headers or ():
            if raw is None:
                decoded.pop(name, None)
                continue
            value = raw.decode("utf-8", errors="replace")
            if value:
                decoded[name] = value
            else:
                decoded.pop(name, None)
        return cls(
            payload=payload or b"",
            correlation_id=decoded.get(CORRELATION_ID_HEADER),
            reply_topic=decoded.get(REPLY_TOPIC_HEADER),
            event_type=decoded.get(EVENT_TYPE_HEADER),
        )


__all__ = [
    "CORRELATION_ID_HEADER",
    "EVENT_TYPE_HEADER",
    "REPLY_TOPIC_HEADER",
    "Envelope",
    "RawHeaders",
]
