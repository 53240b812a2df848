"""
ProductService
==============

Owner-scoped product catalog:
- Create products for the authenticated actor
- Search/paginate/sort the actor's active products
- Read, partially update and soft delete a single product
- Per-owner counters
"""

from __future__ import annotations

import logging

from catalog.models.product import Product
from catalog.repositories.base import Pagination
from catalog.repositories.product import ProductRepository
from catalog.services._shared.base import BaseService
from catalog.services._shared.dto import PageOut
from catalog.services._shared.errors import NotFoundError
from catalog.services.products.dto import (
    ProductCreateIn,
    ProductListIn,
    ProductOut,
    ProductStatsOut,
    ProductUpdateIn,
)

log = logging.getLogger(__name__)

FORBIDDEN_PRODUCT = "You do not have permission to access this product"


class ProductService(BaseService):
    """
    Application service for the `Product` aggregate.

    Every operation requires ``ctx.actor_id``. Missing and soft-deleted
    products both surface as :class:`NotFoundError`; products of another
    owner raise :class:`AuthorizationError`.
    """

    # --------------------------------------------------------------------- #
    # Helpers
    # --------------------------------------------------------------------- #

    def _load_owned(self, repo: ProductRepository, product_id: int) -> Product:
        product = repo.get_active(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        self.ensure_owner(product.user_id, msg=FORBIDDEN_PRODUCT)
        return product

    # --------------------------------------------------------------------- #
    # Commands
    # --------------------------------------------------------------------- #

    def create(self, dto: ProductCreateIn) -> ProductOut:
        """
        Create a product owned by the actor.

        :param dto: Validated creation payload.
        :returns: The persisted product.
        """
        actor_id = self.require_actor()
        with self.rw_uow() as uow:
            product = uow.products.add(
                Product(
                    name=dto.name,
                    description=dto.description,
                    price=dto.price,
                    images=list(dto.images),
                    user_id=actor_id,
                )
            )
            out = ProductOut.from_model(product)
        log.info(
            "product.created",
            extra=self.ctx.log_extra(event="product.created", product_id=out.id),
        )
        return out

    def update(self, product_id: int, dto: ProductUpdateIn) -> ProductOut:
        """
        Apply a partial update to one of the actor's products.

        :raises NotFoundError: If the product is missing or inactive.
        :raises AuthorizationError: If the product belongs to someone else.
        """
        self.require_actor()
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            product = self._load_owned(repo, product_id)
            repo.assign_updates(product, dto.fields)
            out = ProductOut.from_model(product)
        log.info(
            "product.updated",
            extra=self.ctx.log_extra(event="product.updated", product_id=product_id),
        )
        return out

    def delete(self, product_id: int) -> None:
        """
        Soft delete one of the actor's products.

        A deleted product disappears from listings and further reads return
        :class:`NotFoundError`.
        """
        self.require_actor()
        with self.rw_uow() as uow:
            repo: ProductRepository = uow.products
            repo.soft_delete(self._load_owned(repo, product_id))
        log.info(
            "product.deleted",
            extra=self.ctx.log_extra(event="product.deleted", product_id=product_id),
        )

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    def get(self, product_id: int) -> ProductOut:
        self.require_actor()
        with self.ro_uow() as uow:
            return ProductOut.from_model(self._load_owned(uow.products, product_id))

    def list(self, dto: ProductListIn) -> PageOut[ProductOut]:
        """
        List the actor's active products.

        :param dto: Page, limit, sort and optional search term.
        :returns: Page of products with ``total`` and ``total_pages``.
        """
        actor_id = self.require_actor()
        pagination = Pagination(page=dto.page, limit=dto.limit, sort=dto.sort_tokens())
        with self.ro_uow() as uow:
            page = uow.products.search_for_owner(actor_id, pagination, search=dto.search)
            items = [ProductOut.from_model(p) for p in page.items]
        return PageOut(
            items=items,
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )

    def stats(self) -> ProductStatsOut:
        actor_id = self.require_actor()
        with self.ro_uow() as uow:
            total = uow.products.count_for_owner(actor_id)
            active = uow.products.count_for_owner(actor_id, active=True)
        return ProductStatsOut(
            total_products=total,
            active_products=active,
            inactive_products=total - active,
        )
