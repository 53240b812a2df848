from .dto import (
    SORTABLE_FIELDS,
    ProductCreateIn,
    ProductListIn,
    ProductOut,
    ProductStatsOut,
    ProductUpdateIn,
)
from .service import ProductService

__all__ = [
    "SORTABLE_FIELDS",
    "ProductCreateIn",
    "ProductListIn",
    "ProductOut",
    "ProductService",
    "ProductStatsOut",
    "ProductUpdateIn",
]
