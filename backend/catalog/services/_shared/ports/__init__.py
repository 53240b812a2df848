"""
catalog.services._shared.ports
==============================

*Ports* (hexagonal interfaces) for the authentication infrastructure.

Modules
-------
- :mod:`token_provider`:
    :class:`~.TokenProvider`, issuing and verifying access/refresh tokens.

- :mod:`refresh_token_ledger`:
    :class:`~.RefreshTokenLedger` and :class:`~.LedgerEntry`, the persisted
    record of issued refresh tokens, plus an in-memory adapter for tests.

Concrete adapters live under ``catalog.infra``.
"""

from __future__ import annotations

from .refresh_token_ledger import (
    InMemoryRefreshTokenLedger,
    LedgerEntry,
    RefreshTokenLedger,
)
from .token_provider import ACCESS_TOKEN_TYPE, REFRESH_TOKEN_TYPE, TokenProvider

__all__ = [
    "ACCESS_TOKEN_TYPE",
    "REFRESH_TOKEN_TYPE",
    "InMemoryRefreshTokenLedger",
    "LedgerEntry",
    "RefreshTokenLedger",
    "TokenProvider",
]
