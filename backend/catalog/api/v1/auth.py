"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from catalog.api.deps import (
    build_auth_service,
    client_info,
    require_auth,
    success_response,
    timing,
)
from catalog.schemas import (
    AccessTokenSchema,
    AuthSessionSchema,
    LoginSchema,
    RegisterSchema,
    UserProfileSchema,
)
from catalog.services import LoginIn, RegisterIn, ServiceContext

bp = Blueprint("auth", __name__, url_prefix="/auth")

register_schema = RegisterSchema()
login_schema = LoginSchema()
session_schema = AuthSessionSchema()
access_schema = AccessTokenSchema()
profile_schema = UserProfileSchema()


def _cookie_name() -> str:
    return str(current_app.config.get("REFRESH_COOKIE_NAME", "refresh_token"))


def _set_refresh_cookie(response: Response, token: str) -> None:
    cfg = current_app.config
    response.set_cookie(
        _cookie_name(),
        token,
        max_age=int(cfg["JWT_REFRESH_TOKEN_EXPIRES"].total_seconds()),
        httponly=True,
        secure=bool(cfg.get("REFRESH_COOKIE_SECURE", True)),
        samesite=cfg.get("REFRESH_COOKIE_SAMESITE", "Lax"),
        path=cfg.get("REFRESH_COOKIE_PATH", "/"),
    )


def _clear_refresh_cookie(response: Response) -> None:
    cfg = current_app.config
    response.delete_cookie(
        _cookie_name(),
        path=cfg.get("REFRESH_COOKIE_PATH", "/"),
        httponly=True,
        secure=bool(cfg.get("REFRESH_COOKIE_SECURE", True)),
        samesite=cfg.get("REFRESH_COOKIE_SAMESITE", "Lax"),
    )


@bp.post("/register")
@timing
def register():
    """Create an account, open a session and set the refresh cookie."""

    payload = register_schema.load(request.get_json(silent=True) or {})
    session = build_auth_service().register(RegisterIn(**payload), client_info())
    response = success_response(
        session_schema.dump(session), message="User registered successfully", status=201
    )
    _set_refresh_cookie(response, session.refresh_token)
    return response


@bp.post("/login")
@timing
def login():
    """Authenticate credentials, open a session and set the refresh cookie."""

    payload = login_schema.load(request.get_json(silent=True) or {})
    session = build_auth_service().login(LoginIn(**payload), client_info())
    response = success_response(session_schema.dump(session), message="Login successful")
    _set_refresh_cookie(response, session.refresh_token)
    return response


@bp.post("/refresh")
@timing
def refresh():
    """Mint a new access token from the refresh cookie."""

    token = request.cookies.get(_cookie_name())
    result = build_auth_service().refresh(token)
    return success_response(access_schema.dump(result), message="Token refreshed successfully")


@bp.post("/logout")
@require_auth
@timing
def logout(ctx: ServiceContext):
    """Revoke the refresh cookie's ledger entry and clear the cookie."""

    build_auth_service(ctx).logout(request.cookies.get(_cookie_name()))
    response = success_response(None, message="Logout successful")
    _clear_refresh_cookie(response)
    return response


@bp.get("/me")
@require_auth
@timing
def me(ctx: ServiceContext):
    """Return the authenticated user profile."""

    return success_response(profile_schema.dump(ctx.user), message="User profile retrieved")
