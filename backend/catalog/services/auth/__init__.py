"""Authentication lifecycle: register, login, refresh and logout."""

from .dto import (
    AccessTokenOut,
    AuthSessionOut,
    AuthTokenConfig,
    ClientInfo,
    LoginIn,
    RegisterIn,
)
from .service import AuthService

__all__ = [
    "AuthService",
    "AuthTokenConfig",
    "AuthSessionOut",
    "AccessTokenOut",
    "ClientInfo",
    "LoginIn",
    "RegisterIn",
]
