"""Testing support – in-memory broker fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["kafka_rpc.testing.fixtures"]
"""

from kafka_rpc.testing.fakes import InMemoryBroker, InMemoryPublisher, InMemorySubscriber

__all__ = ["InMemoryBroker", "InMemoryPublisher", "InMemorySubscriber"]
