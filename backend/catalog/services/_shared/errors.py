"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never depend on Flask or
HTTP. They are the stable contract between repositories, domain models and
application services.

The translation to HTTP responses is handled by ``catalog/core/errors.py``
via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name; SQLite reports the column list
    (``users.email``), so callers may pass either form.

    :param exc: The exception raised by SQLAlchemy during flush/commit.
    :param constraint_name: Constraint or ``table.column`` to look for.
    :returns: ``True`` if the error message mentions ``constraint_name``.
    :rtype: bool
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    These are *not* HTTP errors; the API layer translates them.
    """


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is missing (or soft-deleted).

    :param entity: Entity name (e.g., "Product").
    :param key: Identifier or search key (kept for logs, not shown to clients).
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found"


@dataclass(slots=True, eq=False)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :param detail: Short human-readable explanation returned to clients.
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return self.detail


class AuthenticationError(ServiceError):
    """Raised when credentials or tokens do not identify an active user."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class AuthorizationError(ServiceError):
    """Raised when an authenticated actor touches a resource it does not own."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)
