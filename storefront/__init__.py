"""Storefront: product listing, cart and bill"""

__version__ = "1.0.0"
