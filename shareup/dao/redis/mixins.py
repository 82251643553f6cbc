"""Shared Redis client setup for Redis-backed DAOs.

Example:
    >>> class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    ...     pass
    ...
    >>> dao = ShortLinkRedisDAO(redis_host='redis.internal', prefix='shareup:prod')
    >>> dao._healthcheck()
    True
"""

import redis

from shareup.constants import Limits
from shareup.dao.redis.redis_key_schema import RedisKeySchema
from shareup.dao.redis.helpers import describe_connection
from shareup.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Give a DAO a Redis client (`self.redis`) and a key schema (`self.keys`)

    Connection parameters mirror the keys of the 'redis' AppConfig section,
    prefixed with `redis_` (host -> redis_host, ssl -> redis_ssl, ...).
    Ports and DB indexes may be given as strings. A pre-built `redis_client`
    takes precedence over all connection parameters.

    Every connect and command round-trip is bounded by `redis_socket_timeout`
    seconds, so an unreachable store fails the request instead of hanging it.

    The store is pinged on construction; DataStoreError is raised if it does
    not answer.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_ssl: bool = False,
        redis_socket_timeout: float = Limits.STORE_TIMEOUT_SECONDS,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                ssl=bool(redis_ssl),
                socket_timeout=redis_socket_timeout,
                socket_connect_timeout=redis_socket_timeout,
            )
        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis. Returns False on failure, or raises DataStoreError if `raise_error`"""
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if not raise_error:
                return False
            raise DataStoreError(
                f"Can't connect to Redis at {describe_connection(self.redis)}. Check the provided configuration parameters."
            ) from e
        return True
