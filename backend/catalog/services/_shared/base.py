# catalog/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from catalog.core import errors as api_errors
from catalog.services._shared.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServiceError,
)
from catalog.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

if TYPE_CHECKING:  # pragma: no cover
    from catalog.services.users.dto import UserProfileOut


@dataclass(slots=True)
class ServiceContext:
    """
    Request-scoped data built once by the request authorizer.

    :param actor_id: Authenticated user identifier.
    :param request_id: Correlation id for logging/tracing.
    :param user: Resolved profile of the authenticated user.
    """

    actor_id: int | None = None
    request_id: str | None = None
    user: UserProfileOut | None = None

    def log_extra(self, **extra: Any) -> dict[str, Any]:
        """Return ``extra=`` kwargs for structured log records."""
        return {"user_id": self.actor_id, **extra}


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Centralize error translation.
    * Offer the shared ownership check.

    Notes
    -----
    Services never touch the global session directly; they always go through
    a Unit of Work.
    """

    DEFAULT_READ_ISOLATION = "READ COMMITTED"

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        return SQLAlchemyUnitOfWork()

    def ro_uow(
        self, *, isolation: str | None = None, enforce_db_readonly: bool = True
    ) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :param isolation: Transaction isolation level.
        :param enforce_db_readonly: Apply ``SET TRANSACTION READ ONLY`` when supported.
        :returns: Read-only UoW instance.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(
            isolation_level=isolation or self.DEFAULT_READ_ISOLATION,
            enforce_db_readonly=enforce_db_readonly,
        )

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(timezone.utc)

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :returns: Translated exception ready to be rendered.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ConflictError):
            return api_errors.Conflict(str(exc))

        if isinstance(exc, AuthenticationError):
            return api_errors.Unauthorized(str(exc))

        if isinstance(exc, AuthorizationError):
            return api_errors.Forbidden(str(exc))

        # Any other ServiceError subclass -> 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

        return exc

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the current actor owns the resource.

        :param owner_id: Owner recorded on the resource.
        :param msg: Optional custom error message.
        :raises AuthorizationError: If the actor is not the owner.
        """
        from catalog.services._shared.policies.common import is_owner

        if not is_owner(actor_id=self.ctx.actor_id, owner_id=owner_id):
            raise AuthorizationError(msg or "Forbidden")

    def require_actor(self) -> int:
        """Return the authenticated actor id.

        :raises AuthenticationError: When the service runs without an actor.
        """
        if self.ctx.actor_id is None:
            raise AuthenticationError("Access token not provided")
        return int(self.ctx.actor_id)
