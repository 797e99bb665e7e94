"""Product API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..core.session import UserSession
from ..models.product import Product, ProductSearchResponse
from ..services.catalog import CatalogService
from .deps import get_api_session, get_catalog_service

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def list_products(
    query: Optional[str] = Query(None, description="Image search query"),
    session: UserSession = Depends(get_api_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    List the products displayed to this session.

    With a query, runs an image search first. A failed search keeps the
    previously displayed products.
    """
    products, from_search = await catalog.search_listing(query or "", session.storage)

    return ProductSearchResponse(
        products=products,
        total=len(products),
        query=query,
        from_search=from_search,
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    session: UserSession = Depends(get_api_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Get a product from the catalog or the session's search results"""
    product = catalog.find_product(product_id, session.storage)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
