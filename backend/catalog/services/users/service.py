"""
UserService
===========

Service managing the authenticated user's own account:
- Profile retrieval and partial updates (with email uniqueness)
- Account deactivation (soft delete)
- Account statistics
- Active-user resolution for the request authorizer
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from catalog.repositories.user import UserRepository
from catalog.services._shared.base import BaseService
from catalog.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    violates,
)
from catalog.services.users.dto import UserProfileOut, UserStatsOut, UserUpdateIn

log = logging.getLogger(__name__)

USER_ALREADY_EXISTS = "User with this email already exists"
INVALID_TOKEN = "Invalid or expired token"


class UserService(BaseService):
    """
    Application service for the `User` aggregate, scoped to ``ctx.actor_id``.
    """

    # --------------------------------------------------------------------- #
    # Authorizer support
    # --------------------------------------------------------------------- #

    def resolve_active_user(self, user_id: int | str) -> UserProfileOut:
        """
        Load the user named by a token subject and require an active account.

        :param user_id: Subject claim (``str`` in JWTs).
        :returns: Public-safe profile.
        :raises AuthenticationError: If the subject is malformed, unknown or inactive.
        """
        try:
            pk = int(user_id)
        except (TypeError, ValueError):
            raise AuthenticationError(INVALID_TOKEN) from None

        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_active(pk)
            if user is None:
                raise AuthenticationError(INVALID_TOKEN)
            return UserProfileOut.from_model(user)

    # --------------------------------------------------------------------- #
    # Profile
    # --------------------------------------------------------------------- #

    def get_profile(self) -> UserProfileOut:
        """
        Return the actor's profile.

        :raises NotFoundError: If the account is gone or inactive.
        """
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            user = uow.users.get_active(actor_id)
            if user is None:
                raise NotFoundError("User", actor_id)
            return UserProfileOut.from_model(user)

    def update_profile(self, dto: UserUpdateIn) -> UserProfileOut:
        """
        Apply a partial update to the actor's profile.

        :param dto: Fields to change.
        :returns: Updated profile.
        :raises NotFoundError: If the account is gone or inactive.
        :raises ConflictError: If the new email belongs to another user.
        """
        actor_id = self.require_actor()
        changes = dto.changes()

        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_active(actor_id)
            if user is None:
                raise NotFoundError("User", actor_id)

            if "email" in changes and repo.exists_by_email(changes["email"], exclude_id=user.id):
                raise ConflictError("User", USER_ALREADY_EXISTS)

            try:
                repo.assign_updates(user, changes)
            except IntegrityError as exc:
                if violates(exc, "uq_users_email") or violates(exc, "users.email"):
                    raise ConflictError("User", USER_ALREADY_EXISTS) from exc
                raise

            log.info("user.updated", extra=self.ctx.log_extra(event="user.updated"))
            return UserProfileOut.from_model(user)

    def deactivate(self) -> None:
        """
        Soft-delete the actor's account.

        Access tokens stop working on the next request because the authorizer
        only admits active users.

        :raises NotFoundError: If the account is already inactive.
        """
        actor_id = self.require_actor()
        with self.rw_uow() as uow:
            user = uow.users.get_active(actor_id)
            if user is None:
                raise NotFoundError("User", actor_id)
            uow.users.deactivate(user)
        log.info("user.deactivated", extra=self.ctx.log_extra(event="user.deactivated"))

    def stats(self) -> UserStatsOut:
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            user = uow.users.get_active(actor_id)
            if user is None:
                raise NotFoundError("User", actor_id)
            return UserStatsOut(
                total_products=uow.products.count_for_owner(actor_id),
                active_products=uow.products.count_for_owner(actor_id, active=True),
                member_since=user.created_at,
                last_updated=user.updated_at,
            )
