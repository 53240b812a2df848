"""Service layer public API.

This package exposes the essential building blocks for the service layer so that
callers can import from :mod:`catalog.services` without knowing internal structure.

Re-exports
----------
- Base primitives (from ``catalog.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Shared DTOs (from ``catalog.services._shared.dto``)
    * :class:`PaginationIn`
    * :class:`PageOut`

- Auth service (from ``catalog.services.auth``)
    * :class:`AuthService`
    * DTOs: :class:`RegisterIn`, :class:`LoginIn`, :class:`ClientInfo`,
      :class:`AuthSessionOut`, :class:`AccessTokenOut`, :class:`AuthTokenConfig`

- User service (from ``catalog.services.users``)
    * :class:`UserService`
    * DTOs: :class:`UserUpdateIn`, :class:`UserProfileOut`, :class:`UserStatsOut`

- Product service (from ``catalog.services.products``)
    * :class:`ProductService`
    * DTOs: :class:`ProductCreateIn`, :class:`ProductUpdateIn`,
      :class:`ProductListIn`, :class:`ProductOut`, :class:`ProductStatsOut`
"""

from __future__ import annotations

# Base primitives (service base + request-scoped context)
from ._shared.base import BaseService, ServiceContext

# Shared DTOs
from ._shared.dto import PageOut, PaginationIn

# Auth service + DTOs
from .auth import (
    AccessTokenOut,
    AuthService,
    AuthSessionOut,
    AuthTokenConfig,
    ClientInfo,
    LoginIn,
    RegisterIn,
)

# Product service + DTOs
from .products import (
    ProductCreateIn,
    ProductListIn,
    ProductOut,
    ProductService,
    ProductStatsOut,
    ProductUpdateIn,
)

# User service + DTOs
from .users import UserProfileOut, UserService, UserStatsOut, UserUpdateIn

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Shared DTOs
    "PaginationIn",
    "PageOut",
    # Auth
    "AuthService",
    "AuthTokenConfig",
    "AuthSessionOut",
    "AccessTokenOut",
    "ClientInfo",
    "LoginIn",
    "RegisterIn",
    # Users
    "UserService",
    "UserUpdateIn",
    "UserProfileOut",
    "UserStatsOut",
    # Products
    "ProductService",
    "ProductCreateIn",
    "ProductUpdateIn",
    "ProductListIn",
    "ProductOut",
    "ProductStatsOut",
]
