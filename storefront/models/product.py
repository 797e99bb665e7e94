"""Product models for the storefront"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product shown in the catalog or returned by an image search"""
    id: str
    name: str
    price: Decimal = Field(gt=0)
    image: str

    class Config:
        frozen = True


class ProductSearchResponse(BaseModel):
    """Products currently displayed to the visitor"""
    products: list[Product]
    total: int
    query: Optional[str] = None
    from_search: bool = False
