"""Product resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from .user import NOT_BLANK

PRODUCT_NAME_LENGTH = validate.Length(min=2, max=255)
NON_NEGATIVE = validate.Range(min=0)
PRODUCT_NAME_RULES = [PRODUCT_NAME_LENGTH, NOT_BLANK]


class ProductCreateSchema(Schema):
    """Payload for creating a product."""

    name = fields.String(required=True, validate=PRODUCT_NAME_RULES)
    description = fields.String(load_default=None, allow_none=True)
    price = fields.Decimal(required=True, places=2, allow_nan=False, validate=NON_NEGATIVE)
    images = fields.List(fields.String(), load_default=list)


class ProductUpdateSchema(Schema):
    """Partial product update; omitted fields are left untouched."""

    name = fields.String(validate=PRODUCT_NAME_RULES)
    description = fields.String(allow_none=True)
    price = fields.Decimal(places=2, allow_nan=False, validate=NON_NEGATIVE)
    images = fields.List(fields.String())
    is_active = fields.Boolean(data_key="isActive")

    @validates_schema
    def require_any(self, data: dict[str, Any], **_: Any) -> None:
        if not data:
            raise ValidationError("At least one field must be provided.")


class ProductSchema(Schema):
    """Public representation of a product."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    description = fields.String(allow_none=True)
    price = fields.Float(required=True)
    images = fields.List(fields.String())
    user_id = fields.Integer(data_key="userId")
    is_active = fields.Boolean(data_key="isActive")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class ProductStatsSchema(Schema):
    total_products = fields.Integer(data_key="totalProducts")
    active_products = fields.Integer(data_key="activeProducts")
    inactive_products = fields.Integer(data_key="inactiveProducts")
