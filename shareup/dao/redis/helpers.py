import functools
from collections.abc import Callable
from typing import Any

import redis

from shareup.dao.exceptions import DataStoreError


__all__ = ['describe_connection', 'handle_redis_connection_error']


def describe_connection(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis failures

    Connection errors and timeouts are reported as connectivity issues; any other
    Redis error (e.g. OOM, READONLY replica) is reported as a generic data store error.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on Redis failures.

    Example:
        >>> @handle_redis_connection_error
        ... def get_url(self, short_id):
        ...     return self.redis.get(short_id)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {describe_connection(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {describe_connection(self.redis)} failed: {e}') from e

    return wrapper
