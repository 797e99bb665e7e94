# Routes

from .products import router as products_router
from .cart import router as cart_router
from .contact import router as contact_router
from .pages import router as pages_router

__all__ = ["products_router", "cart_router", "contact_router", "pages_router"]
