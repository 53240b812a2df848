"""Integration tests for the ledger maintenance CLI."""

from __future__ import annotations

from datetime import timedelta

from catalog.models.base import utcnow
from catalog.models.refresh_token import RefreshToken
from sqlalchemy import func, select

from tests.factories.refresh_token import RefreshTokenFactory


def test_purge_expired_removes_only_expired_rows(app, session) -> None:
    RefreshTokenFactory(expires_at=utcnow() - timedelta(days=1))
    RefreshTokenFactory(expires_at=utcnow() - timedelta(minutes=5))
    keep = RefreshTokenFactory()
    keep_id = keep.id

    result = app.test_cli_runner().invoke(args=["ledger", "purge-expired"])

    assert result.exit_code == 0, result.output
    assert "Purged 2 expired refresh token(s)." in result.output
    remaining = session.execute(select(RefreshToken.id)).scalars().all()
    assert remaining == [keep_id]


def test_purge_expired_with_nothing_to_do(app, session) -> None:
    RefreshTokenFactory()

    result = app.test_cli_runner().invoke(args=["ledger", "purge-expired"])

    assert result.exit_code == 0
    assert "Purged 0 expired refresh token(s)." in result.output
    assert session.execute(select(func.count(RefreshToken.id))).scalar_one() == 1
