from catalog.models.product import Product
from catalog.models.refresh_token import RefreshToken, token_digest
from catalog.models.user import User

__all__ = [
    "Product",
    "RefreshToken",
    "User",
    "token_digest",
]
