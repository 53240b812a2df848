# catalog/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, cast
from uuid import uuid4

import jwt
from flask_jwt_extended.exceptions import JWTExtendedException

from catalog.services._shared.ports import ACCESS_TOKEN_TYPE, REFRESH_TOKEN_TYPE, TokenProvider

log = logging.getLogger(__name__)

DEFAULT_REFRESH_EXPIRES = timedelta(days=7)


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Token adapter with one signing secret per token class.

    * Access tokens go through Flask-JWT-Extended (``JWT_SECRET_KEY``,
      ``JWT_ACCESS_TOKEN_EXPIRES``).
    * Refresh tokens are signed with PyJWT using ``refresh_secret``.

    .. note::
       Access-token operations require an active Flask app context.
    """

    refresh_secret: str
    algorithm: str = "HS256"
    refresh_expires: timedelta = DEFAULT_REFRESH_EXPIRES

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> JWTTokenProvider:
        """Build the provider from a Flask config mapping."""
        refresh_expires = config.get("JWT_REFRESH_TOKEN_EXPIRES") or DEFAULT_REFRESH_EXPIRES
        return cls(
            refresh_secret=str(config["JWT_REFRESH_SECRET_KEY"]),
            algorithm=str(config.get("JWT_ALGORITHM", "HS256")),
            refresh_expires=refresh_expires,
        )

    def create_access_token(
        self,
        *,
        identity: int | str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        from flask_jwt_extended import create_access_token as _create_access

        return cast(
            str,
            _create_access(
                identity=str(identity),
                additional_claims=dict(additional_claims or {}),
                expires_delta=expires_delta,
            ),
        )

    def create_refresh_token(
        self,
        *,
        identity: int | str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        exp = now + (expires_delta or self.refresh_expires)
        claims: dict[str, Any] = dict(additional_claims or {})
        # Registered claims win over caller-provided ones
        claims.update(
            {
                "sub": str(identity),
                "type": REFRESH_TOKEN_TYPE,
                "jti": uuid4().hex,
                "iat": int(now.timestamp()),
                "exp": int(exp.timestamp()),
            }
        )
        return jwt.encode(claims, self.refresh_secret, algorithm=self.algorithm)

    def verify(self, token: str | None, *, refresh: bool = False) -> dict[str, Any] | None:
        """
        Check signature, expiry and token class.

        :param token: Encoded token (``None``/empty is treated as invalid).
        :param refresh: Verify against the refresh secret instead of the access one.
        :returns: Decoded claims, or ``None`` on any failure.
        """
        if not token:
            return None
        try:
            if refresh:
                claims = jwt.decode(
                    token,
                    self.refresh_secret,
                    algorithms=[self.algorithm],
                    options={"require": ["exp", "iat", "sub", "jti"]},
                )
            else:
                from flask_jwt_extended import decode_token

                claims = cast(dict[str, Any], decode_token(token))
        except (jwt.PyJWTError, JWTExtendedException) as exc:
            log.debug("Token rejected: %s", exc.__class__.__name__)
            return None

        expected = REFRESH_TOKEN_TYPE if refresh else ACCESS_TOKEN_TYPE
        if claims.get("type") != expected or not claims.get("sub"):
            return None
        return claims
