"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkNotFoundError:
        Raised when a ShortLinkModel is not found in the data store.

    ShortLinkAlreadyExistsError:
        Raised when inserting a ShortLinkModel whose short ID is already taken.

    ShortLinkCollisionError:
        Raised when no free short ID could be allocated within the attempt bound.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from shareup.dao.exceptions import ShortLinkNotFoundError
    >>> raise ShortLinkNotFoundError("Short link with ID 'abc123' not found.")
    Traceback (most recent call last):
        ...
    shareup.dao.exceptions.ShortLinkNotFoundError: Short link with ID 'abc123' not found.
"""

from shareup.exceptions import ShareUpError


class DAOError(ShareUpError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortLinkNotFoundError(DAOError):
    """Raised when a ShortLinkModel is not found in the data store."""

    error_code = 'dao:short_link_not_found_error'


class ShortLinkAlreadyExistsError(DAOError):
    """Raised when inserting a ShortLinkModel whose short ID already exists in the data store."""

    error_code = 'dao:short_link_already_exists_error'


class ShortLinkCollisionError(DAOError):
    """Raised when every generated short ID collided with an existing record."""

    error_code = 'dao:short_link_collision_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'
