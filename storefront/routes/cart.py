"""Cart API routes"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..core.session import UserSession
from ..models.bill import Bill
from ..models.cart import (
    AddToCartRequest,
    UpdateQuantityRequest,
    CartResponse,
    CartLineNotFoundError,
    QuantityLimitExceededError,
)
from ..services.bill import compute_bill
from ..services.catalog import CatalogService
from .deps import get_api_session, get_catalog_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _cart_response(session: UserSession, message: Optional[str] = None) -> CartResponse:
    return CartResponse(
        cart=session.cart,
        line_count=session.cart.line_count,
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(session: UserSession = Depends(get_api_session)):
    """Get the session's cart"""
    return _cart_response(session)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: UserSession = Depends(get_api_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Add a product to the cart"""
    product = catalog.find_product(request.product_id, session.storage)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    already_in_cart = session.cart.get_line(product.id) is not None
    session.cart.add_product(product)

    if already_in_cart:
        return _cart_response(session, message=f"{product.name} is already in the cart")
    return _cart_response(session, message=f"Added {product.name} to cart")


@router.patch("/items/{product_id}", response_model=CartResponse)
async def update_quantity(
    product_id: str,
    request: UpdateQuantityRequest,
    session: UserSession = Depends(get_api_session),
):
    """Step a cart line's quantity by +1 or -1"""
    try:
        line = session.cart.update_quantity(product_id, request.delta)
    except CartLineNotFoundError:
        raise HTTPException(status_code=404, detail="Item not in cart")
    except QuantityLimitExceededError as e:
        logger.info(f"Quantity limit reached for {product_id} in session {session.session_id}")
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _cart_response(session, message=f"Quantity is now {line.quantity}")


@router.get("/bill", response_model=Bill)
async def generate_bill(session: UserSession = Depends(get_api_session)):
    """Generate the bill for the current cart"""
    return compute_bill(session.cart)
