"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import AccessTokenSchema, AuthSessionSchema, LoginSchema, RegisterSchema
from .common import ListQuerySchema, MetaSchema, build_meta
from .product import (
    ProductCreateSchema,
    ProductSchema,
    ProductStatsSchema,
    ProductUpdateSchema,
)
from .user import UserProfileSchema, UserStatsSchema, UserUpdateSchema

__all__ = [
    "AccessTokenSchema",
    "AuthSessionSchema",
    "LoginSchema",
    "RegisterSchema",
    "ListQuerySchema",
    "MetaSchema",
    "build_meta",
    "ProductCreateSchema",
    "ProductSchema",
    "ProductStatsSchema",
    "ProductUpdateSchema",
    "UserProfileSchema",
    "UserStatsSchema",
    "UserUpdateSchema",
]
