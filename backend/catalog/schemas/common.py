"""Common Marshmallow schemas shared across resources."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load, validate

SORT_FIELDS = ("name", "price", "createdAt", "updatedAt")
SORT_ORDERS = ("ASC", "DESC")
# Largest value a signed 32-bit INTEGER column accepts
MAX_INT = 2**31 - 1


class ListQuerySchema(Schema):
    """Validate list query parameters with configurable defaults.

    ``limit`` values above ``max_limit`` are clamped instead of rejected;
    values below 1 fail validation.
    """

    class Meta:
        unknown = EXCLUDE

    def __init__(self, *, default_limit: int = 10, max_limit: int = 100, **kwargs: Any) -> None:
        self._default_limit = default_limit
        self._max_limit = max_limit
        super().__init__(**kwargs)

    page = fields.Integer(load_default=1, validate=validate.Range(min=1, max=MAX_INT))
    limit = fields.Integer(validate=validate.Range(min=1))
    search = fields.String(load_default=None)
    sort_by = fields.String(
        data_key="sortBy", load_default="createdAt", validate=validate.OneOf(SORT_FIELDS)
    )
    sort_order = fields.String(
        data_key="sortOrder", load_default="DESC", validate=validate.OneOf(SORT_ORDERS)
    )

    @pre_load
    def normalize_order(self, data: Any, **_: Any) -> Any:
        raw = data.get("sortOrder") if hasattr(data, "get") else None
        if isinstance(raw, str):
            data = dict(data)
            data["sortOrder"] = raw.strip().upper()
        return data

    @post_load
    def apply_defaults(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        limit = data.get("limit", self._default_limit)
        data["limit"] = min(limit, self._max_limit)
        search = (data.get("search") or "").strip()
        data["search"] = search or None
        return data


class MetaSchema(Schema):
    """Metadata block for paginated responses."""

    page = fields.Integer(required=True)
    limit = fields.Integer(required=True)
    total = fields.Integer(required=True)
    total_pages = fields.Integer(data_key="totalPages", required=True)


def build_meta(*, total: int, page: int, limit: int, total_pages: int) -> dict[str, int]:
    """Return a ``meta`` mapping for paginated responses."""

    return MetaSchema().dump(
        {"total": int(total), "page": int(page), "limit": int(limit), "total_pages": total_pages}
    )
