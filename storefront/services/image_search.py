"""
Image Search Client

HTTP client for an Unsplash-compatible photo search API.
Turns search results into purchasable products.
"""

import random
import logging
from decimal import Decimal
from typing import Optional, Any

import httpx
from pydantic import ValidationError

from ..models.product import Product

logger = logging.getLogger(__name__)


class ImageSearchError(Exception):
    """The search response could not be turned into products"""
    pass


class ImageSearchClient:
    """
    Client for the image search API.

    Every result becomes a product named after the query, priced with a
    random whole amount and shown with the result's small thumbnail.
    """

    def __init__(
        self,
        base_url: str,
        access_key: Optional[str] = None,
        rng: Optional[random.Random] = None,
        price_min: int = 500,
        price_max: int = 1000,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize image search client.

        Args:
            base_url: Base URL of the search API
            access_key: Client access key sent with every request
            rng: Random source for prices, seed it for repeatable results
            price_min: Lowest generated price (inclusive)
            price_max: Highest generated price (inclusive)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.access_key = access_key
        self.rng = rng or random.Random()
        self.price_min = price_min
        self.price_max = price_max
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

        if not access_key:
            logger.warning("No image search access key configured - searches will be rejected")

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def search(self, query: str) -> list[Product]:
        """
        Search photos and build products from the results.

        Raises:
            httpx.HTTPError: On network failure or an error status
            ImageSearchError: If the response body is not a search result
        """
        url = f"{self.base_url}/search/photos"
        params = {"query": query}
        if self.access_key:
            params["client_id"] = self.access_key

        logger.debug(f"Searching images for {query!r}")
        response = await self._http_client.get(url, params=params)

        if response.status_code >= 400:
            logger.error(f"Image search failed: {response.status_code} - {response.text}")
            response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise ImageSearchError("Image search returned invalid JSON") from e

        return self._build_products(query, payload)

    def _build_products(self, query: str, payload: Any) -> list[Product]:
        """Convert a search payload into products"""
        if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
            raise ImageSearchError("Image search response has no results list")

        products = []
        for index, item in enumerate(payload["results"]):
            try:
                thumbnail = item["urls"]["small"]
            except (KeyError, TypeError) as e:
                raise ImageSearchError(f"Result {index} has no thumbnail URL") from e

            try:
                product = Product(
                    id=f"api-{index}",
                    name=query,
                    price=Decimal(self.rng.randint(self.price_min, self.price_max)),
                    image=thumbnail,
                )
            except ValidationError as e:
                raise ImageSearchError(f"Result {index} has an invalid thumbnail URL") from e

            products.append(product)

        logger.info(f"Image search for {query!r} returned {len(products)} products")
        return products
