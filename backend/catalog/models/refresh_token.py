"""Refresh token ledger rows."""

from __future__ import annotations

import hashlib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.extensions import db

from .base import ActiveFlagMixin, CreatedAtMixin, PKMixin, ReprMixin

if TYPE_CHECKING:  # pragma: no cover
    from .user import User


def token_digest(token: str) -> str:
    """Return the hex SHA-256 digest under which a refresh token is stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class RefreshToken(PKMixin, ReprMixin, CreatedAtMixin, ActiveFlagMixin, db.Model):
    """
    One issued refresh token.

    A row is usable while ``is_active`` is true and ``expires_at`` lies in
    the future. Logout flips ``is_active``; rows are kept for audit until they
    expire and get purged.

    Only the SHA-256 digest of the token is persisted.
    """

    __tablename__ = "refresh_tokens"

    token_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)

    user: Mapped[User] = relationship(back_populates="refresh_tokens", lazy="raise_on_sql")

    __table_args__ = (Index("ix_refresh_tokens_expires_at", "expires_at"),)
