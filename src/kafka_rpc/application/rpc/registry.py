"""Application RPC – CorrelationRegistry."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Generic, Iterator, TypeVar

from kafka_rpc.kernel.errors import DuplicateCorrelationIdError

T = TypeVar("T")


class CorrelationRegistry(Generic[T]):
    """Map of outstanding correlation ids to single-assignment completion slots.

    Each slot is an :class:`asyncio.Future`. None of the operations await, so
    on the owning event loop every call is atomic: an entry is removed and
    its slot completed in the same step, and at most one of
    :meth:`resolve`, :meth:`reject` or :meth:`cancel` wins for a given id.
    An absent id is the normal outcome of a lost race and is reported with
    ``False``, never an exception.
    """

    def __init__(self) -> None:
        self._pending: dict[str, asyncio.Future[T]] = {}

    def register(self, correlation_id: str) -> asyncio.Future[T]:
        if correlation_id in self._pending:
            raise DuplicateCorrelationIdError(correlation_id)
        slot: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._pending[correlation_id] = slot
        return slot

    def resolve(self, correlation_id: str, value: T) -> bool:
        slot = self._pending.pop(correlation_id, None)
        if slot is None or slot.done():
            return False
        slot.set_result(value)
        return True

    def reject(self, correlation_id: str, error: BaseException) -> bool:
        slot = self._pending.pop(correlation_id, None)
        if slot is None or slot.done():
            return False
        slot.set_exception(error)
        return True

    def cancel(self, correlation_id: str, error: BaseException | None = None) -> bool:
        """Remove *correlation_id* and complete its slot with *error*.

        Without *error* the future itself is cancelled, which is what a caller
        that is no longer waiting wants: no exception is left unretrieved.
        """
        slot = self._pending.pop(correlation_id, None)
        if slot is None or slot.done():
            return False
        if error is None:
            slot.cancel()
        else:
            slot.set_exception(error)
        return True

    def cancel_all(self, error_factory: Callable[[str], BaseException]) -> int:
        """Complete every pending slot with ``error_factory(correlation_id)``; return how many."""
        pending, self._pending = self._pending, {}
        cancelled = 0
        for correlation_id, slot in pending.items():
            if not slot.done():
                slot.set_exception(error_factory(correlation_id))
                cancelled += 1
        return cancelled

    def __contains__(self, correlation_id: Any) -> bool:
        return correlation_id in self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._pending))


__all__ = ["CorrelationRegistry"]
