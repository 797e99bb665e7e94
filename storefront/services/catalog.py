"""
Catalog Service

Decides which products a visitor sees: the static catalog, or the
results of their last successful image search.
"""

import logging
from typing import Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..core.storage import KeyValueStore
from ..database.products import ProductCatalog
from ..models.product import Product
from .image_search import ImageSearchClient, ImageSearchError

logger = logging.getLogger(__name__)

SEARCH_RESULTS_KEY = "searchResults"

_product_list = TypeAdapter(list[Product])


class CatalogService:
    """Product listing and search for one storefront"""

    def __init__(self, catalog: ProductCatalog, search_client: ImageSearchClient):
        self.catalog = catalog
        self.search_client = search_client

    def cached_results(self, storage: KeyValueStore) -> Optional[list[Product]]:
        """Get the last successful search results stored for the session"""
        raw = storage.get(SEARCH_RESULTS_KEY)
        if raw is None:
            return None

        try:
            return _product_list.validate_json(raw)
        except ValidationError:
            logger.warning("Discarding unreadable cached search results")
            return None

    def current_listing(self, storage: KeyValueStore) -> tuple[list[Product], bool]:
        """
        Products currently shown and whether they come from a search.

        Returns:
            Tuple of (cached search results or the default catalog, from_search)
        """
        results = self.cached_results(storage)
        if results is None:
            return self.catalog.get_all_products(), False
        return results, True

    def displayed_products(self, storage: KeyValueStore) -> list[Product]:
        """Products currently shown: cached search results or the default catalog"""
        products, _ = self.current_listing(storage)
        return products

    async def search_listing(
        self,
        query: str,
        storage: KeyValueStore,
    ) -> tuple[list[Product], bool]:
        """
        Run an image search and make its results the displayed products.

        A blank query does nothing. A failed search is logged and leaves
        the displayed products unchanged; it never raises. The query is
        sent and used as the product name exactly as typed.

        Returns:
            Tuple of (products displayed after the search, from_search)
        """
        if not query.strip():
            return self.current_listing(storage)

        try:
            results = await self.search_client.search(query)
        except (httpx.HTTPError, ImageSearchError) as e:
            logger.error(f"Error fetching search results for {query!r}: {e}")
            return self.current_listing(storage)

        storage.set(SEARCH_RESULTS_KEY, _product_list.dump_json(results).decode())
        return results, True

    async def search(self, query: str, storage: KeyValueStore) -> list[Product]:
        """Run an image search and return the products displayed after it"""
        products, _ = await self.search_listing(query, storage)
        return products

    def find_product(self, product_id: str, storage: KeyValueStore) -> Optional[Product]:
        """Look a product up in the catalog, then in the cached search results"""
        product = self.catalog.get_product(product_id)
        if product:
            return product

        return next(
            (p for p in self.cached_results(storage) or [] if p.id == product_id),
            None,
        )
