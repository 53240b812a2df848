"""SQLAlchemy-backed adapters for service ports."""

from .refresh_token_ledger import SQLAlchemyRefreshTokenLedger

__all__ = ["SQLAlchemyRefreshTokenLedger"]
