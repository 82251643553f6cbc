"""Shared fixtures for the Redis DAO tests.

The DAO inserts with a single MSETNX and reads both keys of a link through
`redis.pipeline(transaction=True)`. The mocked client serves as its own
pipeline so tests can set `execute`/`msetnx` results and assert on
`get`/`msetnx` calls on one object.
"""

from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def redis_client() -> MagicMock:
    """Redis client mock reporting redis.test:6379/0 in DataStoreError messages"""
    client = MagicMock(spec=redis.client.Pipeline)
    client.connection_pool = MagicMock(spec=redis.ConnectionPool)
    client.connection_pool.connection_kwargs = {'host': 'redis.test', 'port': 6379, 'db': 0}

    # `with client.pipeline(...) as pipe` yields the client itself
    client.pipeline.return_value = client
    client.__enter__.return_value = client
    return client
