"""Testing fakes – in-memory doubles for the broker ports."""
from kafka_rpc.testing.fakes.broker import InMemoryBroker, InMemoryPublisher, InMemorySubscriber

__all__ = ["InMemoryBroker", "InMemoryPublisher", "InMemorySubscriber"]
