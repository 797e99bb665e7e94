"""Cart models for the storefront"""

from typing import Optional

from pydantic import BaseModel, Field

from .product import Product

MAX_LINE_QUANTITY = 5


class CartError(Exception):
    """Base exception for cart operations"""
    pass


class CartLineNotFoundError(CartError):
    """The product has no line in the cart"""

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} is not in the cart")
        self.product_id = product_id


class QuantityLimitExceededError(CartError):
    """Raised when a line is already at the maximum quantity"""

    def __init__(self, product_id: str, limit: int = MAX_LINE_QUANTITY):
        super().__init__(f"Limit Exceeded! You can only add up to {limit} items.")
        self.product_id = product_id
        self.limit = limit


class CartLine(BaseModel):
    """A product and the quantity requested for purchase"""
    product: Product
    quantity: int = Field(default=1, ge=0, le=MAX_LINE_QUANTITY)

    class Config:
        validate_assignment = True

    @property
    def can_increment(self) -> bool:
        return self.quantity < MAX_LINE_QUANTITY

    @property
    def can_decrement(self) -> bool:
        return self.quantity > 0


class Cart(BaseModel):
    """
    Shopping cart.

    Lines keep the order in which products were first added and are
    never removed; a line at quantity 0 stays in the cart.
    """
    lines: list[CartLine] = []

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def get_line(self, product_id: str) -> Optional[CartLine]:
        """Get the line for a product"""
        return next(
            (line for line in self.lines if line.product.id == product_id),
            None,
        )

    def add_product(self, product: Product) -> CartLine:
        """Add a product with quantity 1, or return its existing line"""
        existing_line = self.get_line(product.id)
        if existing_line:
            return existing_line

        line = CartLine(product=product, quantity=1)
        self.lines.append(line)
        return line

    def update_quantity(self, product_id: str, delta: int) -> CartLine:
        """
        Step a line's quantity up or down by one.

        Args:
            product_id: Product whose line is updated
            delta: +1 to increment, -1 to decrement

        Returns:
            The updated line

        Raises:
            ValueError: If delta is not +1 or -1
            CartLineNotFoundError: If the product is not in the cart
            QuantityLimitExceededError: If the line is already at the limit
        """
        if delta not in (-1, 1):
            raise ValueError(f"Quantity delta must be +1 or -1, got {delta}")

        line = self.get_line(product_id)
        if line is None:
            raise CartLineNotFoundError(product_id)

        if delta > 0:
            if not line.can_increment:
                raise QuantityLimitExceededError(product_id)
            line.quantity += 1
        elif line.can_decrement:
            line.quantity -= 1

        return line


class AddToCartRequest(BaseModel):
    """Request to add a product to the cart"""
    product_id: str


class UpdateQuantityRequest(BaseModel):
    """Request to step a line's quantity"""
    delta: int = Field(ge=-1, le=1)


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    line_count: int
    message: Optional[str] = None
