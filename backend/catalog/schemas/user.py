"""User resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

NAME_LENGTH = validate.Length(min=2, max=100)
REGISTER_NAME_LENGTH = validate.Length(min=1, max=100)
# Rejects empty or whitespace-only strings
NOT_BLANK = validate.Regexp(r"\s*\S", error="Must not be blank.")
PASSWORD_MIN_LENGTH = validate.Length(min=6)
# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72


def validate_password_bytes(value: str) -> None:
    """Reject passwords whose UTF-8 encoding exceeds the bcrypt input limit."""
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes.")


PASSWORD_RULES = [PASSWORD_MIN_LENGTH, validate_password_bytes]


class UserProfileSchema(Schema):
    """Public representation of a user; the password hash is never dumped."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    email = fields.Email(required=True)
    avatar = fields.String(allow_none=True)
    is_active = fields.Boolean(data_key="isActive")
    is_email_verified = fields.Boolean(data_key="isEmailVerified")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class UserUpdateSchema(Schema):
    """Partial profile update; at least one field is required."""

    name = fields.String(validate=[NAME_LENGTH, NOT_BLANK])
    email = fields.Email(validate=validate.Length(max=254))
    avatar = fields.String(validate=validate.Length(max=500))

    @validates_schema
    def require_any(self, data: dict[str, Any], **_: Any) -> None:
        if not data:
            raise ValidationError("At least one field must be provided.")


class UserStatsSchema(Schema):
    total_products = fields.Integer(data_key="totalProducts")
    active_products = fields.Integer(data_key="activeProducts")
    member_since = fields.DateTime(data_key="memberSince")
    last_updated = fields.DateTime(data_key="lastUpdated")
