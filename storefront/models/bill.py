"""Bill models for the storefront"""

from decimal import Decimal

from pydantic import BaseModel

from .product import Product


class BillLine(BaseModel):
    """One cart line priced on the bill"""
    product: Product
    quantity: int
    line_total: Decimal


class Bill(BaseModel):
    """Line totals and grand total for a cart at a point in time"""
    lines: list[BillLine] = []
    grand_total: Decimal = Decimal(0)

    @property
    def is_empty(self) -> bool:
        return not self.lines
