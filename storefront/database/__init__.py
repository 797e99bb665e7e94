# Database modules

from .products import product_catalog, ProductCatalog, PRODUCTS

__all__ = [
    "product_catalog",
    "ProductCatalog",
    "PRODUCTS",
]
