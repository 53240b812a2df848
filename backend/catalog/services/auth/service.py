# catalog/services/auth/service.py
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from catalog.core import security
from catalog.models.user import User
from catalog.repositories.user import UserRepository
from catalog.services._shared.base import BaseService
from catalog.services._shared.errors import AuthenticationError, ConflictError, violates
from catalog.services._shared.ports import RefreshTokenLedger, TokenProvider
from catalog.services.auth.dto import (
    AccessTokenOut,
    AuthSessionOut,
    AuthTokenConfig,
    ClientInfo,
    LoginIn,
    RegisterIn,
)
from catalog.services.users.dto import UserProfileOut

log = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
REFRESH_TOKEN_INVALID = "Invalid or expired refresh token"
USER_ALREADY_EXISTS = "User with this email already exists"


class AuthService(BaseService):
    """
    Authentication lifecycle service (register / login / refresh / logout).

    Session states: ``Anonymous -> Authenticated -> (Refreshed)* -> LoggedOut``.

    Tokens come from a pluggable :class:`TokenProvider`; every issued refresh
    token is written to the :class:`RefreshTokenLedger` exactly once, and only
    refresh tokens with an active, unexpired ledger entry can mint new access
    tokens. Refresh tokens are not rotated: the same token keeps working until
    it expires or is logged out.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        ledger: RefreshTokenLedger,
        token_cfg: AuthTokenConfig | None = None,
    ) -> None:
        """
        :param token_provider: Adapter issuing/verifying JWTs.
        :param ledger: Persisted record of issued refresh tokens.
        :param token_cfg: Access/Refresh lifetime configuration.
        """
        super().__init__()
        self.tokens = token_provider
        self.ledger = ledger
        self.cfg = token_cfg or AuthTokenConfig()

    # ------------------------------------------------------------------ #
    # Register
    # ------------------------------------------------------------------ #

    def register(self, dto: RegisterIn, client: ClientInfo | None = None) -> AuthSessionOut:
        """
        Create an account and open its first session.

        The user row and the ledger row are written in separate transactions;
        if the ledger write fails the account exists without a session and the
        client simply logs in again.

        :raises ConflictError: If the email (in any casing) is taken. Nothing
            is persisted in that case.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            if repo.exists_by_email(dto.email):
                raise ConflictError("User", USER_ALREADY_EXISTS)
            try:
                user = repo.add(User(name=dto.name, email=dto.email, password=dto.password))
            except IntegrityError as exc:
                # Concurrent registration with the same email
                if violates(exc, "uq_users_email") or violates(exc, "users.email"):
                    raise ConflictError("User", USER_ALREADY_EXISTS) from exc
                raise
            profile = UserProfileOut.from_model(user)

        session = self._open_session(profile, client)
        log.info("auth.register", extra={"event": "auth.register", "user_id": profile.id})
        return session

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn, client: ClientInfo | None = None) -> AuthSessionOut:
        """
        Authenticate credentials and open a session.

        Unknown email, inactive account and wrong password all fail with the
        same :class:`AuthenticationError` message.
        """
        with self.ro_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get_by_email(dto.email)
            if user is None:
                valid = security.verify_dummy_password(dto.password)
            else:
                # bcrypt runs on every path
                valid = user.verify_password(dto.password) and user.is_active
            if not valid:
                log.warning("auth.login.failed", extra={"event": "auth.login.failed"})
                raise AuthenticationError(INVALID_CREDENTIALS)
            profile = UserProfileOut.from_model(user)

        session = self._open_session(profile, client)
        log.info("auth.login", extra={"event": "auth.login", "user_id": profile.id})
        return session

    # ------------------------------------------------------------------ #
    # Refresh (no rotation)
    # ------------------------------------------------------------------ #

    def refresh(self, refresh_token: str | None) -> AccessTokenOut:
        """
        Mint a new access token from a ledger-backed refresh token.

        :raises AuthenticationError: If the token is missing, fails
            verification, has no active unexpired ledger entry, or its owner is
            no longer active.
        """
        claims = self.tokens.verify(refresh_token, refresh=True)
        if claims is None or refresh_token is None:
            raise AuthenticationError(REFRESH_TOKEN_INVALID)

        entry = self.ledger.find_active(refresh_token, now=self.now_utc())
        if entry is None or str(entry.user_id) != str(claims["sub"]):
            raise AuthenticationError(REFRESH_TOKEN_INVALID)

        with self.ro_uow() as uow:
            user = uow.users.get_active(entry.user_id)
            if user is None:
                raise AuthenticationError(REFRESH_TOKEN_INVALID)
            access = self._issue_access(user.id, user.email)

        log.info("auth.refresh", extra={"event": "auth.refresh", "user_id": entry.user_id})
        return AccessTokenOut(access_token=access)

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, refresh_token: str | None) -> None:
        """
        Revoke the ledger entry of ``refresh_token`` when one is supplied.

        Never fails: an absent, unknown or already revoked token is a no-op.
        """
        revoked = bool(refresh_token) and self.ledger.deactivate(refresh_token or "")
        log.info(
            "auth.logout",
            extra={"event": "auth.logout", "user_id": self.ctx.actor_id, "status": int(revoked)},
        )

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _claims(self, email: str) -> dict[str, Any]:
        return {"email": email}

    def _issue_access(self, user_id: int, email: str) -> str:
        return self.tokens.create_access_token(
            identity=user_id,
            additional_claims=self._claims(email),
            expires_delta=self.cfg.access_expires,
        )

    def _open_session(self, profile: UserProfileOut, client: ClientInfo | None) -> AuthSessionOut:
        """Issue the token pair and write its single ledger row."""
        client = client or ClientInfo()
        access = self._issue_access(profile.id, profile.email)
        refresh = self.tokens.create_refresh_token(
            identity=profile.id,
            additional_claims=self._claims(profile.email),
            expires_delta=self.cfg.refresh_expires,
        )
        self.ledger.record(
            token=refresh,
            user_id=profile.id,
            expires_at=self.now_utc() + self.cfg.refresh_expires,
            ip_address=client.ip_address,
            user_agent=client.user_agent,
        )
        return AuthSessionOut(access_token=access, refresh_token=refresh, user=profile)
