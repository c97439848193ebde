"""Seller listings."""

import structlog

from storefront.catalog.dto import SellerListItem, build_seller_list_item
from storefront.catalog.repository import CatalogStore
from storefront.infrastructure.config import settings

logger = structlog.get_logger()


class SellerService:
    """Service for seller read operations."""

    def __init__(self, store: CatalogStore) -> None:
        """Initialize service.

        Args:
            store: Catalog data store.
        """
        self.store = store

    async def get_featured_sellers(self, limit: int | None = None) -> list[SellerListItem]:
        """Get the sellers shown on the storefront home page.

        Args:
            limit: Maximum sellers; defaults to the configured count.

        Returns:
            Seller cards, possibly empty.

        Raises:
            UpstreamQueryError: If the seller query fails.
        """
        limit = limit or settings.featured_sellers_limit
        rows = await self.store.list_sellers(limit)

        if not rows:
            logger.warning("No sellers found")
            return []

        logger.info("Featured sellers retrieved", count=len(rows))
        return [build_seller_list_item(r) for r in rows]
