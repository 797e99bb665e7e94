# Storefront services

from .bill import compute_bill
from .catalog import CatalogService, SEARCH_RESULTS_KEY
from .email import EmailClient, EmailDeliveryError
from .image_search import ImageSearchClient, ImageSearchError

__all__ = [
    "compute_bill",
    "CatalogService",
    "SEARCH_RESULTS_KEY",
    "EmailClient",
    "EmailDeliveryError",
    "ImageSearchClient",
    "ImageSearchError",
]
