"""Unit tests for CorrelationRegistry."""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from kafka_rpc.application.rpc import CorrelationRegistry
from kafka_rpc.kernel.errors import DuplicateCorrelationIdError, RequestCancelledError, RequestTimeoutError


class TestRegister:
    def test_register_adds_pending_entry(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            assert "a" in registry
            assert len(registry) == 1
            assert not slot.done()

        asyncio.run(run())

    def test_duplicate_id_raises(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            registry.register("a")
            with pytest.raises(DuplicateCorrelationIdError):
                registry.register("a")
            assert len(registry) == 1

        asyncio.run(run())

    def test_iteration_lists_pending_ids(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            registry.register("a")
            registry.register("b")
            assert sorted(registry) == ["a", "b"]

        asyncio.run(run())


class TestResolve:
    def test_resolve_completes_slot_and_removes_entry(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            assert registry.resolve("a", 42) is True
            assert "a" not in registry
            assert await slot == 42

        asyncio.run(run())

    def test_resolve_unknown_id_returns_false(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            assert registry.resolve("missing", 1) is False

        asyncio.run(run())

    def test_second_resolve_is_ignored(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            assert registry.resolve("a", 1) is True
            assert registry.resolve("a", 2) is False
            assert await slot == 1

        asyncio.run(run())

    def test_reject_sets_exception(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            assert registry.reject("a", ValueError("bad")) is True
            with pytest.raises(ValueError, match="bad"):
                await slot

        asyncio.run(run())


class TestCancel:
    def test_cancel_with_error(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            assert registry.cancel("a", RequestTimeoutError("a")) is True
            with pytest.raises(RequestTimeoutError):
                await slot

        asyncio.run(run())

    def test_cancel_without_error_cancels_future(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            assert registry.cancel("a") is True
            assert slot.cancelled()

        asyncio.run(run())

    def test_resolve_after_cancel_loses(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            registry.cancel("a", RequestTimeoutError("a"))
            assert registry.resolve("a", 5) is False
            with pytest.raises(RequestTimeoutError):
                await slot

        asyncio.run(run())

    def test_cancel_after_resolve_loses(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slot = registry.register("a")
            registry.resolve("a", 5)
            assert registry.cancel("a", RequestTimeoutError("a")) is False
            assert await slot == 5

        asyncio.run(run())

    def test_cancel_all_fails_every_pending_slot(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            slots = [registry.register(str(i)) for i in range(3)]
            assert registry.cancel_all(lambda cid: RequestCancelledError(cid)) == 3
            assert len(registry) == 0
            for i, slot in enumerate(slots):
                with pytest.raises(RequestCancelledError) as info:
                    await slot
                assert info.value.correlation_id == str(i)

        asyncio.run(run())

    def test_cancel_all_on_empty_registry(self) -> None:
        async def run() -> None:
            registry: CorrelationRegistry[int] = CorrelationRegistry()
            assert registry.cancel_all(RequestCancelledError) == 0

        asyncio.run(run())


# ---------------------------------------------------------------------------
# Property: exactly one completion wins per id
# ---------------------------------------------------------------------------

_operations = st.lists(st.sampled_from(["resolve", "reject", "cancel"]), min_size=1, max_size=6)


@settings(max_examples=50, deadline=None)
@given(ops=_operations)
def test_first_completion_wins(ops: list[str]) -> None:
    async def run() -> None:
        registry: CorrelationRegistry[str] = CorrelationRegistry()
        slot = registry.register("cid")
        outcomes = []
        for op in ops:
            if op == "resolve":
                outcomes.append(registry.resolve("cid", "value"))
            elif op == "reject":
                outcomes.append(registry.reject("cid", ValueError("rejected")))
            else:
                outcomes.append(registry.cancel("cid", RequestTimeoutError("cid")))
        assert outcomes.count(True) == 1
        assert outcomes[0] is True
        assert "cid" not in registry
        if ops[0] == "resolve":
            assert slot.result() == "value"
        else:
            assert slot.exception() is not None

    asyncio.run(run())
