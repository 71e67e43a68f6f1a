"""Kernel messaging – handler result variants: Reply and NoReply."""

from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Reply(Generic[T]):
    """The handler produced a value that must be published back."""

    value: T


class NoReply:
    """The handler ran and nothing is published back (fire-and-forget)."""

    __slots__ = ()
    _instance: "NoReply | None" = None

    def __new__(cls) -> "NoReply":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_REPLY"


NO_REPLY = NoReply()

type HandlerResult[T] = Reply[T] | NoReply

__all__ = ["NO_REPLY", "HandlerResult", "NoReply", "Reply"]
