# catalog/infra/sqlalchemy/refresh_token_ledger.py
from __future__ import annotations

from datetime import datetime, timezone

from catalog.models.refresh_token import RefreshToken, token_digest
from catalog.services._shared.ports import LedgerEntry, RefreshTokenLedger
from catalog.uow.sqlalchemy_uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork


def _to_entry(row: RefreshToken) -> LedgerEntry:
    return LedgerEntry(
        user_id=row.user_id,
        expires_at=row.expires_at,
        is_active=row.is_active,
        ip_address=row.ip_address,
        user_agent=row.user_agent,
    )


class SQLAlchemyRefreshTokenLedger(RefreshTokenLedger):
    """
    Ledger adapter persisting to the ``refresh_tokens`` table.

    Each call runs in its own Unit of Work, so a ledger write never shares a
    transaction with the user write that preceded it.
    """

    def record(
        self,
        *,
        token: str,
        user_id: int,
        expires_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        with SQLAlchemyUnitOfWork() as uow:
            uow.refresh_tokens.add(
                RefreshToken(
                    token_hash=token_digest(token),
                    user_id=user_id,
                    expires_at=expires_at,
                    ip_address=ip_address[:45] if ip_address else None,
                    user_agent=user_agent[:500] if user_agent else None,
                )
            )

    def find_active(self, token: str, *, now: datetime | None = None) -> LedgerEntry | None:
        with SQLAlchemyReadOnlyUnitOfWork() as uow:
            row = uow.refresh_tokens.find_active(token, now=now or datetime.now(timezone.utc))
            return _to_entry(row) if row is not None else None

    def deactivate(self, token: str) -> bool:
        with SQLAlchemyUnitOfWork() as uow:
            row = uow.refresh_tokens.find_by_token(token)
            if row is None or not row.is_active:
                return False
            row.is_active = False
            uow.refresh_tokens.flush()
            return True

    def purge_expired(self, *, now: datetime | None = None) -> int:
        with SQLAlchemyUnitOfWork() as uow:
            return uow.refresh_tokens.delete_expired(now=now or datetime.now(timezone.utc))
