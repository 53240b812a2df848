"""Refresh token ledger repository."""

from __future__ import annotations

from datetime import datetime
from typing import cast

from sqlalchemy import delete, select

from catalog.models.refresh_token import RefreshToken, token_digest
from catalog.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    """Persistence-only access to the refresh token ledger.

    Tokens are always looked up by digest; raw token values never reach SQL.
    """

    model = RefreshToken

    def find_active(self, token: str, *, now: datetime) -> RefreshToken | None:
        """Return the active, unexpired row for ``token``."""
        stmt = select(RefreshToken).where(
            RefreshToken.token_hash == token_digest(token),
            RefreshToken.is_active.is_(True),
            RefreshToken.expires_at > now,
        )
        return cast(RefreshToken | None, self.session.execute(stmt).scalars().first())

    def find_by_token(self, token: str) -> RefreshToken | None:
        """Return the row for ``token`` regardless of state."""
        stmt = select(RefreshToken).where(RefreshToken.token_hash == token_digest(token))
        return cast(RefreshToken | None, self.session.execute(stmt).scalars().first())

    def delete_expired(self, *, now: datetime) -> int:
        """Physically remove rows whose ``expires_at`` has passed."""
        result = self.session.execute(
            delete(RefreshToken)
            .where(RefreshToken.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        return int(result.rowcount or 0)
