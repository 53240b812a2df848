from __future__ import annotations

import hashlib
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Protocol


@dataclass(frozen=True)
class LedgerEntry:
    """
    Read-model for one issued refresh token.

    :ivar user_id: Owning user id.
    :ivar expires_at: Absolute expiration (UTC).
    :ivar is_active: ``False`` once revoked by logout.
    :ivar ip_address: Client address seen at issuance.
    :ivar user_agent: Client user agent seen at issuance.
    """

    user_id: int
    expires_at: datetime
    is_active: bool
    ip_address: str | None = None
    user_agent: str | None = None


class RefreshTokenLedger(Protocol):
    """
    Persisted record of issued refresh tokens.

    Every write touches a single entry. An entry is usable while it is active
    and ``now < expires_at``.
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
        """Persist a freshly issued refresh token."""

    def find_active(self, token: str, *, now: datetime | None = None) -> LedgerEntry | None:
        """Return the usable entry for ``token`` or ``None``."""

    def deactivate(self, token: str) -> bool:
        """Revoke ``token``. :returns: ``True`` if an active entry changed."""

    def purge_expired(self, *, now: datetime | None = None) -> int:
        """Drop entries past their expiry. :returns: Number of entries removed."""


def _utc(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


class InMemoryRefreshTokenLedger(RefreshTokenLedger):
    """
    Process-local ledger used by unit tests.

    .. note::
       Keys by SHA-256 digest like the SQL adapter, and guards mutations with
       a lock.
    """

    def __init__(self) -> None:
        self._entries: dict[str, LedgerEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def record(
        self,
        *,
        token: str,
        user_id: int,
        expires_at: datetime,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        with self._lock:
            self._entries[self._key(token)] = LedgerEntry(
                user_id=user_id,
                expires_at=_utc(expires_at),
                is_active=True,
                ip_address=ip_address,
                user_agent=user_agent,
            )

    def find_active(self, token: str, *, now: datetime | None = None) -> LedgerEntry | None:
        now = _utc(now or datetime.now(timezone.utc))
        entry = self._entries.get(self._key(token))
        if entry is None or not entry.is_active or entry.expires_at <= now:
            return None
        return entry

    def deactivate(self, token: str) -> bool:
        with self._lock:
            key = self._key(token)
            entry = self._entries.get(key)
            if entry is None or not entry.is_active:
                return False
            self._entries[key] = replace(entry, is_active=False)
            return True

    def purge_expired(self, *, now: datetime | None = None) -> int:
        now = _utc(now or datetime.now(timezone.utc))
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.expires_at <= now]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def get(self, token: str) -> LedgerEntry | None:
        """Return the entry for ``token`` whatever its state (test inspection)."""
        return self._entries.get(self._key(token))

    def __len__(self) -> int:
        return len(self._entries)
