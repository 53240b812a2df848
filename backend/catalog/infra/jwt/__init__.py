"""JWT adapters for the token provider port."""

from .flask_jwt_token_provider import JWTTokenProvider

__all__ = ["JWTTokenProvider"]
