from dataclasses import dataclass
from datetime import datetime


# fmt: off
@dataclass(frozen=True)
class ShortLinkModel:
    short_id: str                       # Unique short identifier (final path segment of the short URL)
    original_url: str                   # URL the short link redirects to
    created_at: datetime | None = None  # Set by the data store on insert
# fmt: on
