"""Shortener service: turn an original URL into a stored short link.

The data store is the single authority on short ID uniqueness. Each insert
attempt ends in one of three outcomes:

    created                      -> return the short URL
    ShortLinkAlreadyExistsError  -> regenerate the short ID and try again
    DataStoreError               -> give up immediately (propagated)

Collisions are retried at most `max_attempts` times in total before
ShortLinkCollisionError is raised.
"""

import logging
from collections.abc import Callable

from shareup.constants import ShortID, Limits
from shareup.models import ShortLinkModel
from shareup.dao.base import ShortLinkBaseDAO
from shareup.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkCollisionError
from shareup.exceptions import ValidationError
from shareup.utils.shortener import generate_short_id


logger = logging.getLogger(__name__)

PUBLIC_URL_NOT_PROVIDED = 'Public URL not provided'
PUBLIC_URL_TOO_LONG = 'Public URL too long'


def validate_original_url(original_url: object) -> str:
    """Return the stripped URL, or raise ValidationError if it is unusable

    Only presence and length are checked. Scheme-less URLs are accepted and
    normalized at redirect time.
    """
    if not isinstance(original_url, str) or not original_url.strip():
        raise ValidationError(PUBLIC_URL_NOT_PROVIDED)
    original_url = original_url.strip()
    if len(original_url) > Limits.MAX_URL_LENGTH:
        raise ValidationError(PUBLIC_URL_TOO_LONG)
    return original_url


def create_short_link(
    original_url: object,
    *,
    dao: ShortLinkBaseDAO,
    base_url: str,
    max_attempts: int = ShortID.MAX_ATTEMPTS,
    generate: Callable[[], str] = generate_short_id,
) -> str:
    """Store a new short link and return its fully-qualified short URL

    Args:
        original_url (object):
            URL to shorten. Anything but a non-empty string is rejected.
        dao (ShortLinkBaseDAO):
            Data store access, built once per process by the caller.
        base_url (str):
            Public base of this service, derived from the inbound request.
        max_attempts (int):
            Total number of short IDs tried before giving up on collisions.
        generate (Callable[[], str]):
            Short ID generator.

    Returns:
        str: e.g. 'https://share-up.example.com/V1StGX'

    Raises:
        ValidationError:
            If original_url is missing, empty, not a string or too long.
        ShortLinkCollisionError:
            If every generated short ID was already taken.
        DataStoreError:
            If the data store fails (not retried).
    """
    original_url = validate_original_url(original_url)

    for attempt in range(1, max_attempts + 1):
        short_id = generate()
        try:
            dao.insert(short_link=ShortLinkModel(short_id=short_id, original_url=original_url))
        except ShortLinkAlreadyExistsError:
            logger.warning(
                'Short ID collision (attempt %s of %s). Regenerating.',
                attempt,
                max_attempts,
                extra={'short_id': short_id, 'event': 'SHORT_ID_COLLISION'},
            )
            continue
        else:
            return f'{base_url.rstrip("/")}/{short_id}'

    raise ShortLinkCollisionError(f'could not allocate a unique short ID after {max_attempts} attempts')
