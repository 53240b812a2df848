# catalog/services/auth/dto.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from catalog.services.users.dto import UserProfileOut

DEFAULT_ACCESS_EXPIRES = timedelta(minutes=15)
DEFAULT_REFRESH_EXPIRES = timedelta(days=7)

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class ClientInfo:
    """
    Client metadata stored next to an issued refresh token.

    :param ip_address: Remote address as seen by the app (after ProxyFix).
    :param user_agent: Raw ``User-Agent`` header.
    """

    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for registration.

    :param name: Display name.
    :param email: Email (normalized to lowercase by the model).
    :param password: Raw password to be hashed.
    """

    name: str
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email (any casing).
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthSessionOut:
    """
    Result of register/login.

    ``refresh_token`` is handed to the delivery layer for the HttpOnly cookie
    and is never serialized into the JSON body.

    :param access_token: Encoded access JWT.
    :param refresh_token: Encoded refresh JWT.
    :param user: Public-safe profile.
    """

    access_token: str
    refresh_token: str
    user: UserProfileOut


@dataclass(frozen=True, slots=True)
class AccessTokenOut:
    """
    Result of a refresh.

    :param access_token: Newly issued access JWT.
    """

    access_token: str


# ------------------------------ Config DTO -------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime (also the ledger TTL).
    :type refresh_expires: timedelta
    """

    access_expires: timedelta = DEFAULT_ACCESS_EXPIRES
    refresh_expires: timedelta = DEFAULT_REFRESH_EXPIRES

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> AuthTokenConfig:
        """Read lifetimes from a Flask config mapping."""
        return cls(
            access_expires=config.get("JWT_ACCESS_TOKEN_EXPIRES") or DEFAULT_ACCESS_EXPIRES,
            refresh_expires=config.get("JWT_REFRESH_TOKEN_EXPIRES") or DEFAULT_REFRESH_EXPIRES,
        )
