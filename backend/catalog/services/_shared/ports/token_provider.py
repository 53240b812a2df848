from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class TokenProvider(Protocol):
    """Port for issuing and verifying signed tokens.

    Access and refresh tokens are signed with distinct secrets. ``verify``
    reports every failure (bad signature, expiry, malformed input, wrong
    token class) as ``None`` and never raises.
    """

    def create_access_token(
        self,
        *,
        identity: int | str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...

    def create_refresh_token(
        self,
        *,
        identity: int | str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...

    def verify(self, token: str | None, *, refresh: bool = False) -> dict[str, Any] | None: ...
