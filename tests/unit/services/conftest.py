import threading

import pytest

from shareup.models import ShortLinkModel
from shareup.dao.base import ShortLinkBaseDAO
from shareup.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class InMemoryShortLinkDAO(ShortLinkBaseDAO):
    """Thread-safe dict-backed DAO enforcing short ID uniqueness like MSETNX."""

    def __init__(self):
        self.records: dict[str, ShortLinkModel] = {}
        self.insert_attempts = 0
        self._lock = threading.Lock()

    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'InMemoryShortLinkDAO':
        with self._lock:
            self.insert_attempts += 1
            if short_link.short_id in self.records:
                raise ShortLinkAlreadyExistsError(f"Short link with ID '{short_link.short_id}' already exists.")
            self.records[short_link.short_id] = short_link
        return self

    def get(self, short_id: str, **kwargs) -> ShortLinkModel:
        try:
            return self.records[short_id]
        except KeyError:
            raise ShortLinkNotFoundError(f"Short link with ID '{short_id}' not found.") from None


@pytest.fixture
def dao() -> InMemoryShortLinkDAO:
    return InMemoryShortLinkDAO()


@pytest.fixture
def base_url() -> str:
    return 'https://share-up.example.com'
