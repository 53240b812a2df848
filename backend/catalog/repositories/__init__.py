"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from catalog.repositories.base import BaseRepository, Page, Pagination
from catalog.repositories.product import ProductRepository
from catalog.repositories.refresh_token import RefreshTokenRepository
from catalog.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "Page",
    "Pagination",
    "ProductRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
