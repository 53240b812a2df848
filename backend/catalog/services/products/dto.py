"""
DTOs for ProductService.

Prices travel as :class:`~decimal.Decimal` inside the service layer; the
API schemas decide how they are rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from catalog.services._shared.dto import PaginationIn

if TYPE_CHECKING:  # pragma: no cover
    from catalog.models.product import Product

# Public sort keys -> repository sort fields
SORTABLE_FIELDS: dict[str, str] = {
    "name": "name",
    "price": "price",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

# ------------------------------ Input DTOs -------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductCreateIn:
    """
    Input DTO for product creation.

    :param name: Product title.
    :param price: Non-negative price.
    :param description: Optional free text.
    :param images: Image URLs in display order.
    """

    name: str
    price: Decimal
    description: str | None = None
    images: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ProductUpdateIn:
    """
    Input DTO for a partial product update.

    Only keys present in ``fields`` are applied, so a client can explicitly
    clear ``description`` by sending ``null``.

    :param fields: Mapping of model attribute -> new value.
    """

    fields: dict[str, Any]


@dataclass(frozen=True, slots=True)
class ProductListIn(PaginationIn):
    """
    Listing input: pagination plus an optional search term.

    :param search: Case-insensitive substring over name or description.
    """

    search: str | None = None

    def sort_tokens(self) -> list[str]:
        column = SORTABLE_FIELDS.get(self.sort_by, "created_at")
        prefix = "-" if self.sort_order.upper() == "DESC" else ""
        return [f"{prefix}{column}"]


# ------------------------------ Output DTOs ------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductOut:
    """Public projection of a product."""

    id: int
    name: str
    description: str | None
    price: Decimal
    images: list[str]
    user_id: int
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_model(cls, product: Product) -> ProductOut:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=Decimal(product.price),
            images=list(product.images or []),
            user_id=product.user_id,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass(frozen=True, slots=True)
class ProductStatsOut:
    """
    Per-owner product counters.

    :param total_products: All products ever created by the owner.
    :param active_products: Products not soft-deleted.
    :param inactive_products: Soft-deleted products.
    """

    total_products: int
    active_products: int
    inactive_products: int
