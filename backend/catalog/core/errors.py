"""Centralized JSON error handling using the API response envelope."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from catalog.core.logger import ensure_request_id

log = logging.getLogger(__name__)

# Stable client-facing messages
VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR = "Internal server error"
SERVICE_UNAVAILABLE = "Service temporarily unavailable"
RESOURCE_CONFLICT = "Resource conflict"


def flatten_validation_messages(messages: Any, prefix: str = "") -> list[dict[str, str]]:
    """
    Flatten marshmallow's nested error mapping into ``[{field, message}]``.

    Nested fields are joined with dots and list positions with their index,
    e.g. ``images.0``.

    :param messages: ``ValidationError.messages`` payload.
    :param prefix: Field path accumulated by recursive calls.
    :returns: One entry per failing field/message pair.
    :rtype: list[dict[str, str]]
    """
    if isinstance(messages, Mapping):
        errors: list[dict[str, str]] = []
        for key, value in messages.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(flatten_validation_messages(value, path))
        return errors
    if isinstance(messages, list | tuple):
        errors = []
        for item in messages:
            errors.extend(flatten_validation_messages(item, prefix))
        return errors
    return [{"field": prefix or "_schema", "message": str(messages)}]


def error_body(message: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """
    Build the failure envelope ``{success: false, message, errors?}``.

    :param message: Stable human-readable summary.
    :param errors: Optional per-field detail entries.
    :returns: JSON-serializable body.
    :rtype: dict
    """
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


def _error_response(
    status: int, message: str, errors: list[dict[str, Any]] | None = None
) -> tuple[Response, int]:
    resp = jsonify(error_body(message, errors))
    resp.headers.setdefault("X-Request-ID", ensure_request_id())
    return resp, status


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier used in logs. Defaults to
        ``"bad_request"``.
    errors : list[dict[str, Any]] | None, optional
        Optional per-field details included in the response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.errors = errors or []

    def to_body(self) -> dict[str, Any]:
        """Serialize into the failure envelope."""
        return error_body(self.message, self.errors or None)


# Domain conveniences
class ValidationFailed(APIError):
    """422 for malformed input."""

    def __init__(
        self, message: str = VALIDATION_FAILED, errors: list[dict[str, Any]] | None = None
    ) -> None:
        super().__init__(
            message,
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            code="validation_failed",
            errors=errors,
        )


class NotFound(APIError):
    """404 when resources are missing."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND, code="not_found")


class Conflict(APIError):
    """409 for uniqueness/constraint collisions."""

    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=HTTPStatus.CONFLICT, code="conflict")


class Unauthorized(APIError):
    """401 when authentication fails."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED, code="unauthorized")


class Forbidden(APIError):
    """403 when authorization denies access."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, status_code=HTTPStatus.FORBIDDEN, code="forbidden")


class Internal(APIError):
    """500 for storage failures and unexpected errors."""

    def __init__(self, message: str = INTERNAL_ERROR) -> None:
        super().__init__(
            message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, code="internal_error"
        )


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Every handled error renders the ``{success: false, ...}`` envelope.
    - Service-layer errors are translated through
      :meth:`catalog.services._shared.base.BaseService.translate_exceptions`.
    - 5xx are logged with ``exc_info``; 4xx as warnings without tracebacks.
    """
    from catalog.services._shared.errors import ServiceError

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s",
            err.code,
            err.status_code,
            err.message,
            extra={"status": err.status_code},
        )
        resp = jsonify(err.to_body())
        resp.headers.setdefault("X-Request-ID", ensure_request_id())
        return resp, err.status_code

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        from catalog.services._shared.base import BaseService

        translated = BaseService.translate_exceptions(err)
        if isinstance(translated, APIError):
            return handle_api_error(translated)
        return handle_unexpected_error(err)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = (err.description or HTTPStatus(status).phrase).strip()
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        level = log.error if status >= 500 else log.warning
        level("HTTPException: status=%s detail=%s", status, message, extra={"status": status})
        return _error_response(status, message)

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        errors = flatten_validation_messages(err.messages)
        log.warning("ValidationError: fields=%s", [e["field"] for e in errors])
        return _error_response(HTTPStatus.UNPROCESSABLE_ENTITY, VALIDATION_FAILED, errors)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        # Raw DB error is never returned to clients
        log.error("IntegrityError", exc_info=True)
        return _error_response(HTTPStatus.CONFLICT, RESOURCE_CONFLICT)

    @app.errorhandler(OperationalError)
    def handle_operational_error(err: OperationalError):
        log.error("OperationalError", exc_info=True)
        return _error_response(HTTPStatus.SERVICE_UNAVAILABLE, SERVICE_UNAVAILABLE)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error("Unhandled exception", exc_info=err)
        return _error_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
