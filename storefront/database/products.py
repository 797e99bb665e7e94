"""Static product catalog"""

from decimal import Decimal
from typing import Optional

from ..models.product import Product

# Default catalog shown before any search
PRODUCTS: dict[str, Product] = {
    "1": Product(
        id="1",
        name="Classic Leather Wallet",
        price=Decimal("799"),
        image="https://images.unsplash.com/photo-1627123424574-724758594e93?w=400",
    ),
    "2": Product(
        id="2",
        name="Wireless Earbuds",
        price=Decimal("2499"),
        image="https://images.unsplash.com/photo-1590658268037-6bf12165a8df?w=400",
    ),
    "3": Product(
        id="3",
        name="Running Shoes",
        price=Decimal("3299"),
        image="https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=400",
    ),
    "4": Product(
        id="4",
        name="Analog Wrist Watch",
        price=Decimal("1999"),
        image="https://images.unsplash.com/photo-1524592094714-0f0654e20314?w=400",
    ),
    "5": Product(
        id="5",
        name="Cotton Hoodie",
        price=Decimal("1499"),
        image="https://images.unsplash.com/photo-1556821840-3a63f95609a7?w=400",
    ),
    "6": Product(
        id="6",
        name="Canvas Backpack",
        price=Decimal("1199"),
        image="https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=400",
    ),
    "7": Product(
        id="7",
        name="Aviator Sunglasses",
        price=Decimal("899"),
        image="https://images.unsplash.com/photo-1511499767150-a48a237f0083?w=400",
    ),
    "8": Product(
        id="8",
        name="Ceramic Coffee Mug",
        price=Decimal("349"),
        image="https://images.unsplash.com/photo-1514228742587-6b1558fcca3d?w=400",
    ),
    "9": Product(
        id="9",
        name="Desk Lamp",
        price=Decimal("1299"),
        image="https://images.unsplash.com/photo-1507473885765-e6ed057f782c?w=400",
    ),
}


class ProductCatalog:
    """In-memory product catalog"""

    def __init__(self, products: Optional[dict[str, Product]] = None):
        self.products = dict(PRODUCTS if products is None else products)

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())


# Singleton instance
product_catalog = ProductCatalog()
