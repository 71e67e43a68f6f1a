"""Contracts – sample entity events and the client that calls its service."""
from __future__ import annotations

import asyncio
import dataclasses
from datetime import timedelta
from typing import Any, Callable

from kafka_rpc.application.rpc import Requestor
from kafka_rpc.contracts.topics import Topics

type Timeout = float | timedelta | None


@dataclasses.dataclass
class SampleData:
    id: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    count: int | None = None


@dataclasses.dataclass
class WantsCreateSampleEvent:
    name: str | None = None
    description: str | None = None
    type: str | None = None
    count: int | None = None


@dataclasses.dataclass
class CompletedCreateSampleEvent(SampleData):
    pass


@dataclasses.dataclass
class WantsUpdateSampleEvent(SampleData):
    pass


@dataclasses.dataclass
class CompletedUpdateSampleEvent(SampleData):
    pass


@dataclasses.dataclass
class WantsDeleteSampleEvent:
    id: str | None = None


@dataclasses.dataclass
class CompletedDeleteSampleEvent:
    id: str | None = None
    deleted: bool = False


@dataclasses.dataclass
class WantsGetSampleEvent:
    id: str | None = None


@dataclasses.dataclass
class CompletedGetSampleEvent(SampleData):
    pass


@dataclasses.dataclass
class WantsGetAllSampleEvent:
    page: int = 1
    page_size: int = 10
    search_field: str | None = None
    search_term: str | None = None


@dataclasses.dataclass
class CompletedGetAllSampleEvent:
    data: list[SampleData] = dataclasses.field(default_factory=list)
    current_page: int = 1
    page_size: int = 10
    total_pages: int = 0
    total_count: int = 0
    has_previous: bool = False
    has_next: bool = False


class SampleClient:
    """Typed calls against the sample service, one requestor per operation.

    Each operation listens on its own reply topic, so replies of different
    operations never share a reply loop.
    """

    def __init__(
        self,
        *,
        create: Requestor[WantsCreateSampleEvent, CompletedCreateSampleEvent],
        update: Requestor[WantsUpdateSampleEvent, CompletedUpdateSampleEvent],
        delete: Requestor[WantsDeleteSampleEvent, CompletedDeleteSampleEvent],
        get: Requestor[WantsGetSampleEvent, CompletedGetSampleEvent],
        get_all: Requestor[WantsGetAllSampleEvent, CompletedGetAllSampleEvent],
    ) -> None:
        self._create = create
        self._update = update
        self._delete = delete
        self._get = get
        self._get_all = get_all

    @classmethod
    def build(cls, make_requestor: Callable[[str, type[Any]], Requestor[Any, Any]]) -> "SampleClient":
        """Build every requestor with ``make_requestor(reply_topic, response_type)``."""
        return cls(
            create=make_requestor(Topics.Sample.COMPLETED_CREATE, CompletedCreateSampleEvent),
            update=make_requestor(Topics.Sample.COMPLETED_UPDATE, CompletedUpdateSampleEvent),
            delete=make_requestor(Topics.Sample.COMPLETED_DELETE, CompletedDeleteSampleEvent),
            get=make_requestor(Topics.Sample.COMPLETED_GET, CompletedGetSampleEvent),
            get_all=make_requestor(Topics.Sample.COMPLETED_GET_ALL, CompletedGetAllSampleEvent),
        )

    @property
    def _requestors(self) -> tuple[Requestor[Any, Any], ...]:
        return (self._create, self._update, self._delete, self._get, self._get_all)

    async def start(self) -> None:
        await asyncio.gather(*(r.start() for r in self._requestors))

    async def stop(self) -> None:
        await asyncio.gather(*(r.stop() for r in self._requestors))

    async def __aenter__(self) -> "SampleClient":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def create(self, event: WantsCreateSampleEvent, timeout: Timeout = None) -> CompletedCreateSampleEvent:
        return await self._create.call(Topics.Sample.WANTS_CREATE, event, timeout)

    async def update(self, event: WantsUpdateSampleEvent, timeout: Timeout = None) -> CompletedUpdateSampleEvent:
        return await self._update.call(Topics.Sample.WANTS_UPDATE, event, timeout)

    async def delete(self, event: WantsDeleteSampleEvent, timeout: Timeout = None) -> CompletedDeleteSampleEvent:
        return await self._delete.call(Topics.Sample.WANTS_DELETE, event, timeout)

    async def get(self, event: WantsGetSampleEvent, timeout: Timeout = None) -> CompletedGetSampleEvent:
        return await self._get.call(Topics.Sample.WANTS_GET, event, timeout)

    async def get_all(self, event: WantsGetAllSampleEvent, timeout: Timeout = None) -> CompletedGetAllSampleEvent:
        return await self._get_all.call(Topics.Sample.WANTS_GET_ALL, event, timeout)


__all__ = [
    "CompletedCreateSampleEvent",
    "CompletedDeleteSampleEvent",
    "CompletedGetAllSampleEvent",
    "CompletedGetSampleEvent",
    "CompletedUpdateSampleEvent",
    "SampleClient",
    "SampleData",
    "WantsCreateSampleEvent",
    "WantsDeleteSampleEvent",
    "WantsGetAllSampleEvent",
    "WantsGetSampleEvent",
    "WantsUpdateSampleEvent",
]
