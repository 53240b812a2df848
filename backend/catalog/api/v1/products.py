"""Owner-scoped product endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from catalog.api.deps import parse_list_query, require_auth, success_response, timing
from catalog.schemas import (
    ProductCreateSchema,
    ProductSchema,
    ProductStatsSchema,
    ProductUpdateSchema,
    build_meta,
)
from catalog.services import (
    ProductCreateIn,
    ProductListIn,
    ProductService,
    ProductUpdateIn,
    ServiceContext,
)

bp = Blueprint("products", __name__, url_prefix="/products")

product_schema = ProductSchema()
product_list_schema = ProductSchema(many=True)
create_schema = ProductCreateSchema()
update_schema = ProductUpdateSchema()
stats_schema = ProductStatsSchema()


@bp.post("")
@require_auth
@timing
def create_product(ctx: ServiceContext):
    """Create a product owned by the caller."""

    payload = create_schema.load(request.get_json(silent=True) or {})
    product = ProductService(ctx=ctx).create(ProductCreateIn(**payload))
    return success_response(
        product_schema.dump(product), message="Product created successfully", status=201
    )


@bp.get("")
@require_auth
@timing
def list_products(ctx: ServiceContext):
    """Return the caller's active products, paginated."""

    pagination, search = parse_list_query()
    page = ProductService(ctx=ctx).list(
        ProductListIn(
            page=pagination.page,
            limit=pagination.limit,
            sort_by=pagination.sort_by,
            sort_order=pagination.sort_order,
            search=search,
        )
    )
    meta = build_meta(
        total=page.total, page=page.page, limit=page.limit, total_pages=page.total_pages
    )
    return success_response(
        product_list_schema.dump(page.items), message="Products retrieved successfully", meta=meta
    )


@bp.get("/stats/overview")
@require_auth
@timing
def product_stats(ctx: ServiceContext):
    stats = ProductService(ctx=ctx).stats()
    return success_response(stats_schema.dump(stats), message="Product statistics retrieved")


@bp.get("/<int:product_id>")
@require_auth
@timing
def get_product(product_id: int, ctx: ServiceContext):
    product = ProductService(ctx=ctx).get(product_id)
    return success_response(product_schema.dump(product), message="Product retrieved successfully")


@bp.put("/<int:product_id>")
@require_auth
@timing
def update_product(product_id: int, ctx: ServiceContext):
    """Apply a partial update to one of the caller's products."""

    payload = update_schema.load(request.get_json(silent=True) or {})
    product = ProductService(ctx=ctx).update(product_id, ProductUpdateIn(fields=payload))
    return success_response(product_schema.dump(product), message="Product updated successfully")


@bp.delete("/<int:product_id>")
@require_auth
@timing
def delete_product(product_id: int, ctx: ServiceContext):
    """Soft delete one of the caller's products."""

    ProductService(ctx=ctx).delete(product_id)
    return success_response(None, message="Product deleted successfully")
