"""Product model owned by a single user."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, CheckConstraint, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from catalog.core.extensions import db

from .base import ActiveFlagMixin, PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from .user import User


class Product(PKMixin, ReprMixin, TimestampMixin, ActiveFlagMixin, db.Model):
    """
    Catalog entry scoped to its owner.

    Fields
    ------
    name : str
        Product title.
    description : str | None
        Free text searched together with ``name``.
    price : Decimal
        Non-negative price with two decimals.
    images : list[str]
        Image URLs in display order.
    user_id : int
        Owner id; every read and write is filtered by it.
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    owner: Mapped[User] = relationship(back_populates="products", lazy="raise_on_sql")

    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        Index("ix_products_user_id_is_active", "user_id", "is_active"),
    )

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Product name is required.")
        return value.strip()

    @validates("price")
    def _validate_price(self, key: str, value: Any) -> Decimal:
        amount = Decimal(str(value))
        if amount < 0:
            raise ValueError("Price must be greater than or equal to 0.")
        return amount

    @validates("images")
    def _validate_images(self, key: str, value: list[str] | None) -> list[str]:
        items = list(value or [])
        if not all(isinstance(item, str) for item in items):
            raise ValueError("Images must be a list of strings.")
        return items
