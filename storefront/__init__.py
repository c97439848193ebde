"""Storefront catalog API.

Read-only HTTP API over the marketplace product and seller catalog.
"""

__version__ = "0.1.0"
