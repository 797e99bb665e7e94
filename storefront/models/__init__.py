# Storefront Models

from .product import Product, ProductSearchResponse
from .cart import (
    MAX_LINE_QUANTITY,
    Cart,
    CartLine,
    CartError,
    CartLineNotFoundError,
    QuantityLimitExceededError,
    AddToCartRequest,
    UpdateQuantityRequest,
    CartResponse,
)
from .bill import Bill, BillLine
from .contact import ContactMessage

__all__ = [
    "Product",
    "ProductSearchResponse",
    "MAX_LINE_QUANTITY",
    "Cart",
    "CartLine",
    "CartError",
    "CartLineNotFoundError",
    "QuantityLimitExceededError",
    "AddToCartRequest",
    "UpdateQuantityRequest",
    "CartResponse",
    "Bill",
    "BillLine",
    "ContactMessage",
]
