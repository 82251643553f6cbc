"""Abstract base class for short link data access objects (DAOs).

This class establishes a consistent contract for all short link DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, PostgreSQL).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortLinkModel objects.
    - Make the data store the single authority on short ID uniqueness.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shareup.models import ShortLinkModel
        >>> from shareup.dao.redis import ShortLinkRedisDAO

        >>> dao = ShortLinkRedisDAO(...)

        >>> short_link = ShortLinkModel(
        ...     short_id="a1B2-_",
        ...     original_url="https://files.example.com/public/report-123-2025-10-15.pdf",
        ... )
        >>> dao.insert(short_link)

        >>> retrieved = dao.get("a1B2-_")
        >>> print(retrieved.original_url)
        https://files.example.com/public/report-123-2025-10-15.pdf
"""

from abc import ABC, abstractmethod

from shareup.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for short link data access objects (DAOs).

    Records are append-only: once inserted, a short link is never updated
    or deleted, so the interface exposes neither operation.

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Atomically insert a new ShortLinkModel if its short ID is free.
            Raises ShortLinkAlreadyExistsError if the short ID already exists.
            Raises DataStoreError on connection or write failure.

        get(short_id: str, **kwargs) -> ShortLinkModel:
            Retrieve a ShortLinkModel from the data store by short ID.
            Raises ShortLinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortLinkRedisDAO) must
        extend this class and implement all abstract methods.
    """

    @abstractmethod
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Insert a new ShortLinkModel into the data store.

        The existence check and the write must be a single atomic operation,
        so that two concurrent inserts of the same short ID never overwrite
        each other's original URL.

        Args:
            short_link (ShortLinkModel):
                The ShortLinkModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a ShortLinkModel with the same short ID already exists

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, short_id: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel from the data store by its short ID.

        Args:
            short_id (str):
                The short ID of the ShortLinkModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel: The stored ShortLinkModel instance.

        Raises:
            ShortLinkNotFoundError:
                If no ShortLinkModel with the given short ID exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
