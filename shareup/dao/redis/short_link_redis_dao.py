"""Data Access Object (DAO) implementation for managing short links in Redis

This module provides a Redis-based implementation of ShortLinkBaseDAO for
insert-and-read operations with ShortLinkModel instances.

Responsibilities:
    - Insert short links only if their short ID is still free (MSETNX);
    - Retrieve short links together with their creation timestamp;
    - Translate Redis failures into DAO exceptions.

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> from shareup.models import ShortLinkModel
    >>> from shareup.dao.redis import ShortLinkRedisDAO

    >>> dao = ShortLinkRedisDAO(prefix="shareup:dev")

    >>> short_link = ShortLinkModel(
    ...     short_id="Xy_9-a",
    ...     original_url="https://files.example.com/public/notes-123-2025-10-15.md",
    ... )
    >>> dao.insert(short_link)
    <ShortLinkRedisDAO>

    >>> retrieved = dao.get("Xy_9-a")
    >>> retrieved.original_url
    'https://files.example.com/public/notes-123-2025-10-15.md'
    >>> retrieved.created_at
    datetime.datetime(2025, 10, 15, 12, 0, tzinfo=datetime.timezone.utc)
"""

from datetime import datetime, UTC

from beartype import beartype

from shareup.models import ShortLinkModel
from shareup.dao.base import ShortLinkBaseDAO
from shareup.dao.redis.mixins import RedisClientMixin
from shareup.dao.redis.helpers import handle_redis_connection_error
from shareup.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short link mappings

    This class implements the ShortLinkBaseDAO interface using Redis as a data store.
    Keys never expire: short links are kept for good.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            Insert a short link mapping and its creation timestamp.
            Raises ShortLinkAlreadyExistsError when the short ID is taken.
            Raises DataStoreError on connectivity issues with Redis.

        get(short_id: str, **kwargs) -> ShortLinkModel:
            Retrieve a short link mapping and its creation timestamp by short ID.
            Raises ShortLinkNotFoundError when the short ID doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Insert a short link mapping into Redis

        Both keys are written by a single MSETNX, which Redis runs atomically:
        either neither key existed and both are set, or nothing is written.
        A short ID with any key already present counts as taken.

        Args:
            short_link (ShortLinkModel):
                ShortLinkModel instance representing the short link mapping.
                If created_at is None, the current UTC time is stored.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkRedisDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a short link with the same short ID already exists.
            DataStoreError:
                If a Redis connection issue occurs during the write.

        Example:
            >>> dao.insert(ShortLinkModel(short_id='abc123', original_url='https://example.com'))
            <ShortLinkRedisDAO>
        """
        link_url_key = self.keys.link_url_key(short_link.short_id)
        link_created_at_key = self.keys.link_created_at_key(short_link.short_id)
        created_at = short_link.created_at or datetime.now(UTC)

        # NOTE: A plain EXISTS check followed by SET would let two concurrent
        #       inserts of the same short ID both pass the check:
        #
        #       (lambda 1): EXISTS <app>:links:<short_id>:url  => 0
        #       (lambda 2): EXISTS <app>:links:<short_id>:url  => 0
        #       (lambda 1): SET <app>:links:<short_id>:url <url 1>
        #       (lambda 2): SET <app>:links:<short_id>:url <url 2>  => url 1 silently lost
        #
        #       MSETNX makes Redis the only judge of uniqueness.
        was_set = self.redis.msetnx({link_url_key: short_link.original_url, link_created_at_key: created_at.isoformat()})

        if not was_set:
            raise ShortLinkAlreadyExistsError(f"Short link with ID '{short_link.short_id}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, short_id: str, **kwargs) -> ShortLinkModel:
        """Retrieve a stored short link mapping by short ID

        Args:
            short_id (str):
                The short ID of the short link.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkModel:
                The retrieved ShortLinkModel instance.

        Raises:
            ShortLinkNotFoundError:
                If the short link does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abc123')
            ShortLinkModel(short_id='abc123', original_url='https://example.com', created_at=...)
        """
        link_url_key = self.keys.link_url_key(short_id)
        link_created_at_key = self.keys.link_created_at_key(short_id)

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.get(link_url_key)
            pipe.get(link_created_at_key)
            original_url, created_at = pipe.execute()

        if original_url is None:
            raise ShortLinkNotFoundError(f"Short link with ID '{short_id}' not found.")

        return ShortLinkModel(
            short_id=short_id,
            original_url=original_url,
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )
