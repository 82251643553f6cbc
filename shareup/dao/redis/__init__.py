from shareup.dao.redis.redis_key_schema import RedisKeySchema
from shareup.dao.redis.short_link_redis_dao import ShortLinkRedisDAO
from shareup.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortLinkRedisDAO',
    'RedisClientMixin',
]
