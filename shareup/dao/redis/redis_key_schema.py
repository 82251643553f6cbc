"""Redis key layout for short links.

    [<prefix>:]links:<short id>:url         -> original URL
    [<prefix>:]links:<short id>:created_at  -> ISO 8601 creation time (UTC)

Neither key carries a TTL.
"""

import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']


def prefix_key(func: Callable[..., str]) -> Callable[..., str]:
    """Decorator: namespace a generated key with the schema's prefix"""

    @functools.wraps(func)
    def wrapper(self: 'RedisKeySchema', *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return key if self.prefix is None else f'{self.prefix}:{key}'

    return wrapper


class RedisKeySchema:
    """Build namespaced Redis keys for short link records

    Args:
        prefix (str | None):
            Namespace shared by every key, normally '<app name>:<app env>'
            (see utils.config.app_prefix), so that several environments can
            share one Redis database.
    """

    LINKS = 'links'

    def __init__(self, prefix: str | None = None):
        if not isinstance(prefix, str | None):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')
        self.prefix = prefix

    @prefix_key
    def link_url_key(self, short_id: str) -> str:
        return f'{self.LINKS}:{short_id}:url'

    @prefix_key
    def link_created_at_key(self, short_id: str) -> str:
        return f'{self.LINKS}:{short_id}:created_at'
