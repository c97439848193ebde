"""FastAPI dependencies.

The store is resolved through ``get_catalog_store`` so tests can swap
it with ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from storefront.catalog.repository import CatalogRepository, CatalogStore
from storefront.catalog.sellers import SellerService
from storefront.catalog.service import CatalogService
from storefront.infrastructure.database import async_session_factory


def get_catalog_store() -> CatalogStore:
    """Get the catalog store backed by the application database."""
    return CatalogRepository(async_session_factory)


def get_catalog_service(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> CatalogService:
    """Get catalog service bound to the request's store."""
    return CatalogService(store)


def get_seller_service(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> SellerService:
    """Get seller service bound to the request's store."""
    return SellerService(store)
