"""Resolver service: look up a short ID and return its redirect target."""

from shareup.dao.base import ShortLinkBaseDAO
from shareup.exceptions import ValidationError
from shareup.utils.helpers import normalize_url


SHORT_ID_NOT_PROVIDED = 'Short ID not provided'


def resolve_short_link(short_id: str | None, *, dao: ShortLinkBaseDAO) -> str:
    """Return the normalized original URL for `short_id`

    Lookups never modify the record, so resolving the same short ID
    repeatedly always yields the same target.

    Raises:
        ValidationError:
            If short_id is missing or empty.
        ShortLinkNotFoundError:
            If no record exists for short_id.
        DataStoreError:
            If the data store fails.
    """
    if not short_id:
        raise ValidationError(SHORT_ID_NOT_PROVIDED)

    short_link = dao.get(short_id=short_id)
    return normalize_url(short_link.original_url)
