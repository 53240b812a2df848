"""Unit tests for RefreshTokenRepository."""

from __future__ import annotations

from datetime import timedelta

import pytest
from catalog.models.base import utcnow
from catalog.repositories.refresh_token import RefreshTokenRepository

from tests.factories.refresh_token import RefreshTokenFactory


@pytest.fixture()
def repo():
    return RefreshTokenRepository()


def test_find_active_by_raw_token(repo, session):
    row = RefreshTokenFactory(token="tok-1")
    found = repo.find_active("tok-1", now=utcnow())
    assert found is not None
    assert found.id == row.id
    assert repo.find_active("tok-unknown", now=utcnow()) is None


def test_find_active_ignores_revoked_and_expired(repo, session):
    RefreshTokenFactory(token="revoked", is_active=False)
    RefreshTokenFactory(token="expired", expires_at=utcnow() - timedelta(seconds=1))

    now = utcnow()
    assert repo.find_active("revoked", now=now) is None
    assert repo.find_active("expired", now=now) is None
    assert repo.find_by_token("revoked") is not None


def test_delete_expired(repo, session):
    RefreshTokenFactory(token="old", expires_at=utcnow() - timedelta(days=1))
    RefreshTokenFactory(token="fresh")

    removed = repo.delete_expired(now=utcnow())

    assert removed == 1
    assert repo.find_by_token("old") is None
    assert repo.find_by_token("fresh") is not None
