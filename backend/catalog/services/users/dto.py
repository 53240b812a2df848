"""
DTOs for UserService.

Data Transfer Objects (DTOs) isolate the service layer from ORM models,
ensuring clear input/output contracts and type safety.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from catalog.models.user import User

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserUpdateIn:
    """
    Input DTO for a partial profile update.

    Fields left as ``None`` are not touched.

    :param name: Optional new display name.
    :type name: str | None
    :param email: Optional new email (normalized to lowercase).
    :type email: str | None
    :param avatar: Optional new avatar URL.
    :type avatar: str | None
    """

    name: str | None = None
    email: str | None = None
    avatar: str | None = None

    def changes(self) -> dict[str, str]:
        """Return only the fields that were provided."""
        provided = {"name": self.name, "email": self.email, "avatar": self.avatar}
        return {k: v for k, v in provided.items() if v is not None}


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserProfileOut:
    """
    Public-safe view of a user; the password hash never leaves the model.

    :param id: User identifier.
    :param name: Display name.
    :param email: Normalized email.
    :param avatar: Optional avatar URL.
    :param is_active: Account flag.
    :param is_email_verified: Verification flag.
    :param created_at: Creation timestamp.
    :param updated_at: Last update timestamp.
    """

    id: int
    name: str
    email: str
    avatar: str | None
    is_active: bool
    is_email_verified: bool
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_model(cls, user: User) -> UserProfileOut:
        return cls(**user.to_public_view())


@dataclass(frozen=True, slots=True)
class UserStatsOut:
    """
    Account statistics.

    :param total_products: Products ever created (including deleted ones).
    :param active_products: Products not soft-deleted.
    :param member_since: Account creation timestamp.
    :param last_updated: Last profile update timestamp.
    """

    total_products: int
    active_products: int
    member_since: datetime | None
    last_updated: datetime | None
