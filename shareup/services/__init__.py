from shareup.services.shortener import create_short_link, validate_original_url
from shareup.services.resolver import resolve_short_link


__all__ = [
    'create_short_link',
    'validate_original_url',
    'resolve_short_link',
]
