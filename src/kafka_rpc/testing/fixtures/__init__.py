"""Testing fixtures – in_memory_broker.

Enable in your ``conftest.py``::

    pytest_plugins = ["kafka_rpc.testing.fixtures"]
"""
from kafka_rpc.testing.fixtures.broker import in_memory_broker

__all__ = ["in_memory_broker"]
