"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from .user import NOT_BLANK, PASSWORD_RULES, REGISTER_NAME_LENGTH, UserProfileSchema


class RegisterSchema(Schema):
    """Input payload for account registration."""

    name = fields.String(required=True, validate=[REGISTER_NAME_LENGTH, NOT_BLANK])
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, load_only=True, validate=PASSWORD_RULES)


class LoginSchema(Schema):
    """Input payload for authenticating a user."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


class AccessTokenSchema(Schema):
    """Response payload carrying a fresh access token."""

    access_token = fields.String(data_key="accessToken", required=True)


class AuthSessionSchema(AccessTokenSchema):
    """Response payload for register/login; the refresh token travels in a cookie."""

    user = fields.Nested(UserProfileSchema, required=True)
