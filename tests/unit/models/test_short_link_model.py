"""Unit tests for the ShortLinkModel dataclass.

Test coverage includes:

1. Model creation (created_at is optional)
2. Equality semantics
3. Immutability
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, UTC

import pytest

from shareup.models import ShortLinkModel


def test_short_link_model_creation():
    created_at = datetime(2025, 10, 15, 12, 0, tzinfo=UTC)
    short_link = ShortLinkModel(short_id='abc123', original_url='https://example.com/file', created_at=created_at)

    assert short_link.short_id == 'abc123'
    assert short_link.original_url == 'https://example.com/file'
    assert short_link.created_at == created_at


def test_short_link_model_created_at_defaults_to_none():
    assert ShortLinkModel(short_id='abc123', original_url='https://example.com/file').created_at is None


def test_short_link_model_equality():
    assert ShortLinkModel('abc123', 'https://example.com') == ShortLinkModel('abc123', 'https://example.com')
    assert ShortLinkModel('abc123', 'https://example.com') != ShortLinkModel('abc124', 'https://example.com')
    assert ShortLinkModel('abc123', 'https://example.com') != ShortLinkModel('abc123', 'https://example.org')


@pytest.mark.parametrize('field, value', [('short_id', 'zzz999'), ('original_url', 'https://evil.example'), ('created_at', None)])
def test_short_link_model_is_immutable(field, value):
    short_link = ShortLinkModel(short_id='abc123', original_url='https://example.com')

    with pytest.raises(FrozenInstanceError):
        setattr(short_link, field, value)
