"""Unit tests for the RedisKeySchema class.

Test coverage includes:

1. Key generation without prefix
2. Key generation with a custom prefix
3. Invalid prefix types
"""

import pytest

from shareup.dao.redis.redis_key_schema import RedisKeySchema


@pytest.mark.parametrize(
    'short_id, url_key, created_at_key',
    [
        ('abc123', 'links:abc123:url', 'links:abc123:created_at'),
        ('Xy_9-a', 'links:Xy_9-a:url', 'links:Xy_9-a:created_at'),
    ],
)
def test_keys_without_prefix(short_id, url_key, created_at_key):
    keys = RedisKeySchema()
    assert keys.link_url_key(short_id) == url_key
    assert keys.link_created_at_key(short_id) == created_at_key


def test_keys_with_prefix():
    keys = RedisKeySchema(prefix='shareup:dev')
    assert keys.link_url_key('abc123') == 'shareup:dev:links:abc123:url'
    assert keys.link_created_at_key('abc123') == 'shareup:dev:links:abc123:created_at'


@pytest.mark.parametrize('prefix', [123, ['shareup'], {'app': 'shareup'}])
def test_invalid_prefix_type(prefix):
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
