"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, jsonify, request

from catalog.core.errors import Unauthorized
from catalog.core.logger import ensure_request_id
from catalog.schemas.common import ListQuerySchema
from catalog.services._shared.base import ServiceContext
from catalog.services._shared.dto import PaginationIn
from catalog.services._shared.errors import AuthenticationError
from catalog.services._shared.ports import RefreshTokenLedger, TokenProvider
from catalog.services.auth import AuthService, AuthTokenConfig, ClientInfo
from catalog.services.users import UserService

F = TypeVar("F", bound=Callable[..., Any])

TOKEN_PROVIDER_KEY = "catalog.token_provider"
LEDGER_KEY = "catalog.refresh_token_ledger"

ACCESS_TOKEN_MISSING = "Access token not provided"
ACCESS_TOKEN_INVALID = "Invalid or expired token"


# ------------------------------- Providers ---------------------------------


def get_token_provider() -> TokenProvider:
    """Return the token provider wired by the app factory."""
    return cast(TokenProvider, current_app.extensions[TOKEN_PROVIDER_KEY])


def get_ledger() -> RefreshTokenLedger:
    """Return the refresh token ledger wired by the app factory."""
    return cast(RefreshTokenLedger, current_app.extensions[LEDGER_KEY])


def build_auth_service(ctx: ServiceContext | None = None) -> AuthService:
    service = AuthService(
        token_provider=get_token_provider(),
        ledger=get_ledger(),
        token_cfg=AuthTokenConfig.from_mapping(current_app.config),
    )
    if ctx is not None:
        service.ctx = ctx
    return service


def client_info() -> ClientInfo:
    """Capture the client metadata stored next to issued refresh tokens."""
    return ClientInfo(
        ip_address=request.remote_addr,
        user_agent=request.headers.get("User-Agent"),
    )


# ----------------------------- Request parsing ------------------------------


def bearer_token() -> str | None:
    """Return the token of an ``Authorization: Bearer <token>`` header."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def parse_list_query() -> tuple[PaginationIn, str | None]:
    """Parse ``page``/``limit``/``search``/``sortBy``/``sortOrder`` from ``request.args``."""
    schema = ListQuerySchema(
        default_limit=int(current_app.config.get("PAGINATION_DEFAULT_LIMIT", 10)),
        max_limit=int(current_app.config.get("PAGINATION_MAX_LIMIT", 100)),
    )
    data = schema.load(request.args.to_dict())
    pagination = PaginationIn(
        page=data["page"],
        limit=data["limit"],
        sort_by=data["sort_by"],
        sort_order=data["sort_order"],
    )
    return pagination, data["search"]


# ------------------------------ Authorization -------------------------------


def authenticate_request() -> ServiceContext:
    """
    Resolve the bearer token of the current request into a service context.

    The token is verified and its subject re-loaded on every call, so a
    deactivated account loses access immediately.

    :raises Unauthorized: If the token is missing, invalid, expired or
        belongs to an inactive user.
    """
    token = bearer_token()
    if token is None:
        raise Unauthorized(ACCESS_TOKEN_MISSING)

    claims = get_token_provider().verify(token)
    if claims is None:
        raise Unauthorized(ACCESS_TOKEN_INVALID)

    try:
        user = UserService().resolve_active_user(claims["sub"])
    except AuthenticationError as exc:
        raise Unauthorized(str(exc)) from exc

    return ServiceContext(actor_id=user.id, request_id=ensure_request_id(), user=user)


def require_auth(func: F) -> F:
    """Protect a view and inject the caller's :class:`ServiceContext` as ``ctx``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        kwargs["ctx"] = authenticate_request()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_role(*roles: str) -> Callable[[F], F]:
    """Role guard placeholder.

    There is no role model yet: the guard authenticates the caller and then
    admits every authenticated user regardless of ``roles``.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            kwargs["ctx"] = authenticate_request()
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


# -------------------------------- Responses ---------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def success_response(
    data: Any = None,
    *,
    message: str = "OK",
    status: int = 200,
    meta: dict[str, Any] | None = None,
) -> Response:
    """Wrap ``data`` in the ``{"success": true, ...}`` envelope."""
    body: dict[str, Any] = {"success": True, "message": message, "data": data}
    if meta is not None:
        body["meta"] = meta
    return json_response(body, status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
