"""Product repository with owner-scoped search, sorting and counters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from sqlalchemy import func, or_, select
from sqlalchemy.orm import InstrumentedAttribute

from catalog.models.product import Product
from catalog.repositories.base import BaseRepository, Page, Pagination, pk_in_range


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductRepository(BaseRepository[Product]):
    """Persistence-only repository for :class:`Product`.

    Ownership rules live in the service layer; this class only offers the
    owner-filtered queries the service needs.
    """

    model = Product

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        return {
            "name": Product.name,
            "price": Product.price,
            "created_at": Product.created_at,
            "updated_at": Product.updated_at,
        }

    def _updatable_fields(self) -> set[str]:
        return {"name", "description", "price", "images", "is_active"}

    def get_active(self, product_id: int) -> Product | None:
        """Fetch a product by id, ignoring soft-deleted rows."""
        if not pk_in_range(product_id):
            return None
        stmt = select(Product).where(Product.id == product_id, Product.is_active.is_(True))
        return cast(Product | None, self.session.execute(stmt).scalars().first())

    def search_for_owner(
        self,
        owner_id: int,
        pagination: Pagination,
        *,
        search: str | None = None,
    ) -> Page[Product]:
        """List active products of ``owner_id``.

        :param owner_id: Owning user id.
        :param pagination: Page/limit and sort tokens (e.g. ``["-created_at"]``).
        :param search: Case-insensitive substring matched against name or
            description; ``%`` and ``_`` are matched literally.
        :returns: Requested page with the total match count.
        """
        criteria: list[Any] = [Product.user_id == owner_id, Product.is_active.is_(True)]
        term = (search or "").strip()
        if term:
            pattern = f"%{_escape_like(term)}%"
            criteria.append(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        return self.paginate_where(pagination, *criteria)

    def count_for_owner(self, owner_id: int, *, active: bool | None = None) -> int:
        """Count products of ``owner_id``, optionally filtered by active flag."""
        stmt = select(func.count(Product.id)).where(Product.user_id == owner_id)
        if active is not None:
            stmt = stmt.where(Product.is_active.is_(active))
        return int(self.session.execute(stmt).scalar_one())

    def soft_delete(self, product: Product) -> Product:
        """Mark the product inactive instead of removing the row."""
        product.is_active = False
        self.flush()
        return product
