"""Endpoints for the authenticated user's own account."""

from __future__ import annotations

from flask import Blueprint, request

from catalog.api.deps import require_auth, success_response, timing
from catalog.schemas import UserProfileSchema, UserStatsSchema, UserUpdateSchema
from catalog.services import ServiceContext, UserService, UserUpdateIn

bp = Blueprint("users", __name__, url_prefix="/users")

profile_schema = UserProfileSchema()
update_schema = UserUpdateSchema()
stats_schema = UserStatsSchema()


@bp.get("/me")
@require_auth
@timing
def get_me(ctx: ServiceContext):
    profile = UserService(ctx=ctx).get_profile()
    return success_response(profile_schema.dump(profile), message="User profile retrieved")


@bp.put("/me")
@require_auth
@timing
def update_me(ctx: ServiceContext):
    """Apply a partial profile update."""

    payload = update_schema.load(request.get_json(silent=True) or {})
    profile = UserService(ctx=ctx).update_profile(UserUpdateIn(**payload))
    return success_response(profile_schema.dump(profile), message="Profile updated successfully")


@bp.delete("/me")
@require_auth
@timing
def deactivate_me(ctx: ServiceContext):
    """Soft-delete the account; existing access tokens stop working."""

    UserService(ctx=ctx).deactivate()
    return success_response(None, message="Account deactivated successfully")


@bp.get("/me/stats")
@require_auth
@timing
def my_stats(ctx: ServiceContext):
    stats = UserService(ctx=ctx).stats()
    return success_response(stats_schema.dump(stats), message="User statistics retrieved")
