"""Unit tests for the in-memory broker fake and its pytest fixture."""

from __future__ import annotations

import asyncio

import pytest

# Import the fixture so pytest recognises it in this module
from kafka_rpc.testing.fixtures import in_memory_broker  # noqa: F401
from kafka_rpc.kernel.errors import PublishError, TopicProvisioningError
from kafka_rpc.kernel.messaging import Envelope, MessagePublisher, MessageSubscriber, TopicProvisioner
from kafka_rpc.testing import InMemoryBroker


def _env(n: int) -> Envelope:
    return Envelope(payload=str(n).encode(), correlation_id=f"cid-{n}")


# ---------------------------------------------------------------------------
# Fixture
# ---------------------------------------------------------------------------


class TestInMemoryBrokerFixture:
    def test_returns_empty_broker(self, in_memory_broker: InMemoryBroker) -> None:
        assert isinstance(in_memory_broker, InMemoryBroker)
        assert in_memory_broker.topics == frozenset()

    def test_clients_implement_ports(self, in_memory_broker: InMemoryBroker) -> None:
        assert isinstance(in_memory_broker, TopicProvisioner)
        assert isinstance(in_memory_broker.publisher(), MessagePublisher)
        assert isinstance(in_memory_broker.subscriber("t", "g"), MessageSubscriber)


# ---------------------------------------------------------------------------
# Publishing and consuming
# ---------------------------------------------------------------------------


class TestInMemoryBroker:
    def test_publish_appends_in_order(self) -> None:
        async def run() -> InMemoryBroker:
            broker = InMemoryBroker()
            publisher = broker.publisher()
            for i in range(3):
                await publisher.publish("t", _env(i))
            return broker

        broker = asyncio.run(run())
        assert [m.correlation_id for m in broker.messages("t")] == ["cid-0", "cid-1", "cid-2"]
        assert broker.messages("unknown") == []

    def test_each_group_sees_every_message(self) -> None:
        async def run() -> tuple[list[Envelope | None], list[Envelope | None]]:
            broker = InMemoryBroker()
            a = broker.subscriber("t", "group-a")
            b = broker.subscriber("t", "group-b")
            await a.start()
            await b.start()
            await broker.append("t", _env(1))
            await broker.append("t", _env(2))
            return (
                [await a.receive(0.1), await a.receive(0.1)],
                [await b.receive(0.1), await b.receive(0.1)],
            )

        seen_a, seen_b = asyncio.run(run())
        assert [e.correlation_id for e in seen_a if e] == ["cid-1", "cid-2"]
        assert [e.correlation_id for e in seen_b if e] == ["cid-1", "cid-2"]

    def test_members_of_a_group_compete(self) -> None:
        async def run() -> tuple[Envelope | None, Envelope | None, Envelope | None]:
            broker = InMemoryBroker()
            first = broker.subscriber("t", "shared")
            second = broker.subscriber("t", "shared")
            await first.start()
            await second.start()
            await broker.append("t", _env(1))
            await broker.append("t", _env(2))
            return await first.receive(0.1), await second.receive(0.1), await first.receive(0.01)

        one, two, nothing = asyncio.run(run())
        assert (one.correlation_id, two.correlation_id) == ("cid-1", "cid-2")  # type: ignore[union-attr]
        assert nothing is None

    def test_latest_skips_existing_messages(self) -> None:
        async def run() -> Envelope | None:
            broker = InMemoryBroker()
            await broker.append("t", _env(1))
            late = broker.subscriber("t", "late", auto_offset_reset="latest")
            await late.start()
            assert await late.receive(0.01) is None
            await broker.append("t", _env(2))
            return await late.receive(0.1)

        assert asyncio.run(run()).correlation_id == "cid-2"  # type: ignore[union-attr]

    def test_receive_wakes_up_on_publish(self) -> None:
        async def run() -> Envelope | None:
            broker = InMemoryBroker()
            subscriber = broker.subscriber("t", "g")
            await subscriber.start()
            waiting = asyncio.create_task(subscriber.receive(1.0))
            await asyncio.sleep(0.01)
            await broker.append("t", _env(7))
            return await waiting

        assert asyncio.run(run()).correlation_id == "cid-7"  # type: ignore[union-attr]

    def test_offsets_are_tracked_per_group(self) -> None:
        async def run() -> InMemoryBroker:
            broker = InMemoryBroker()
            subscriber = broker.subscriber("t", "g")
            await subscriber.start()
            await broker.append("t", _env(1))
            await subscriber.receive(0.1)
            return broker

        broker = asyncio.run(run())
        assert broker.offset("t", "g") == 1
        assert broker.offset("t", "other") == 0


# ---------------------------------------------------------------------------
# Failure injection and provisioning
# ---------------------------------------------------------------------------


class TestInMemoryBrokerFailures:
    def test_publish_failure_for_one_topic(self) -> None:
        async def run() -> InMemoryBroker:
            broker = InMemoryBroker()
            broker.fail_publishes(RuntimeError("down"), topic="bad")
            with pytest.raises(PublishError) as info:
                await broker.publisher().publish("bad", _env(1))
            assert info.value.topic == "bad"
            await broker.publisher().publish("good", _env(2))
            broker.fail_publishes(None, topic="bad")
            await broker.publisher().publish("bad", _env(3))
            return broker

        broker = asyncio.run(run())
        assert len(broker.messages("good")) == 1
        assert [m.correlation_id for m in broker.messages("bad")] == ["cid-3"]

    def test_publish_to_empty_topic_fails(self) -> None:
        with pytest.raises(PublishError):
            asyncio.run(InMemoryBroker().append("", _env(1)))

    def test_ensure_topics_creates_topics(self) -> None:
        broker = InMemoryBroker()
        asyncio.run(broker.ensure_topics(["a", "b", "a"]))
        assert broker.topics == frozenset({"a", "b"})

    def test_provisioning_failure(self) -> None:
        broker = InMemoryBroker()
        broker.fail_provisioning("b", PermissionError("denied"))
        with pytest.raises(TopicProvisioningError) as info:
            asyncio.run(broker.ensure_topics(["a", "b"]))
        assert info.value.topic == "b"
