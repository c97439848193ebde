"""API layer module.

Contains FastAPI routers, dependencies and response schemas.
"""

from storefront.api.health import router as health_router
from storefront.api.products import router as products_router
from storefront.api.sellers import router as sellers_router

__all__ = [
    "health_router",
    "products_router",
    "sellers_router",
]
