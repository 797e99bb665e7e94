"""Bill aggregation"""

from decimal import Decimal

from ..models.bill import Bill, BillLine
from ..models.cart import Cart


def compute_bill(cart: Cart) -> Bill:
    """
    Price every cart line and total them.

    Zero-quantity lines are kept on the bill with a zero line total.
    The bill is derived from the cart on every call and never stored.
    """
    lines = [
        BillLine(
            product=line.product,
            quantity=line.quantity,
            line_total=line.product.price * line.quantity,
        )
        for line in cart.lines
    ]
    return Bill(
        lines=lines,
        grand_total=sum((line.line_total for line in lines), Decimal(0)),
    )
