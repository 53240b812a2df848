"""User repository for persistence and credential lookups."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from catalog.models.user import User
from catalog.repositories.base import BaseRepository, pk_in_range


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Lookups normalize email the same way the model does, which makes every
    email comparison case-insensitive. This repository never issues tokens.
    """

    model = User

    def _updatable_fields(self) -> set[str]:
        """Publicly allowed updatable fields (not including password)."""
        return {"name", "email", "avatar"}

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == normalize_email(email))
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def get_active(self, user_id: int) -> User | None:
        """Fetch a user by id only when the account is active."""
        if not pk_in_range(user_id):
            return None
        stmt = select(User).where(User.id == user_id, User.is_active.is_(True))
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def exists_by_email(self, email: str, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when another user already holds ``email``.

        :param email: Email address to normalise and search.
        :param exclude_id: User id ignored by the check (self-updates).
        :rtype: bool
        """
        stmt = select(User.id).where(User.email == normalize_email(email))
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        return self.session.execute(stmt.limit(1)).first() is not None

    def deactivate(self, user: User) -> User:
        """Soft-delete the account."""
        user.is_active = False
        self.flush()
        return user
