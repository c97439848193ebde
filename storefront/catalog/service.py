"""Catalog service for product listings.

Every listing follows the same pipeline: resolve the filter, count the
matching rows, fetch one page, normalize each row into a product card
and wrap the page in a PaginatedResult.
"""

import asyncio
from collections.abc import Sequence

import structlog

from storefront.catalog.brands import BrandResolver
from storefront.catalog.dto import (
    ProductDetail,
    ProductVariant,
    SimplifiedProduct,
    build_product_detail,
    build_product_variant,
    build_simplified_product,
)
from storefront.catalog.models import ProductTag
from storefront.catalog.pagination import PaginatedResult, PaginationParams, paginate
from storefront.catalog.repository import CatalogStore, ProductFilter
from storefront.domain.exceptions import BrandNotFoundError, UpstreamQueryError

logger = structlog.get_logger()

ProductPage = PaginatedResult[SimplifiedProduct]


class CatalogService:
    """Service for catalog read operations.

    Example usage:
        service = CatalogService(CatalogRepository(async_session_factory))

        product = await service.get_product(product_id)
        page = await service.get_latest_products(PaginationParams(page=1, limit=12))
        by_brand = await service.get_top_selling_by_brands(
            ["Acme", "1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed"],
            PaginationParams(),
        )
    """

    def __init__(
        self,
        store: CatalogStore,
        brand_resolver: BrandResolver | None = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Catalog data store.
            brand_resolver: Resolver for brand tokens; built from the
                store when omitted.
        """
        self.store = store
        self.brand_resolver = brand_resolver or BrandResolver(store)

    # ------------------------------------------------------------------
    # Product detail
    # ------------------------------------------------------------------

    async def get_product(self, product_id: str) -> ProductDetail | None:
        """Get a product with its color variants expanded.

        Args:
            product_id: Product ID.

        Returns:
            Product detail, or None if the product does not exist.

        Raises:
            UpstreamQueryError: If the product query fails.
        """
        row = await self.store.get_product(product_id)
        if row is None:
            logger.info("Product not found", product_id=product_id)
            return None

        variants = await self._resolve_variants(product_id, row.get("color_variants"))
        return build_product_detail(row, variants)

    async def _resolve_variants(
        self,
        product_id: str,
        variant_ids: Sequence[str] | None,
    ) -> list[ProductVariant] | None:
        if not variant_ids:
            return None

        try:
            rows = await self.store.get_products_by_ids(list(variant_ids))
        except UpstreamQueryError as e:
            logger.warning(
                "Failed to fetch color variants",
                product_id=product_id,
                variant_count=len(variant_ids),
                error=str(e),
            )
            return None

        return [build_product_variant(r) for r in rows]

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    async def get_latest_products(self, params: PaginationParams) -> ProductPage:
        """List active products, newest first."""
        return await self._list_products(
            ProductFilter(is_active=True),
            params,
            sort_by="created_at",
            sort_order="desc",
            with_created_at=True,
        )

    async def get_products_by_tag(
        self,
        tag: ProductTag,
        params: PaginationParams,
    ) -> ProductPage:
        """List products carrying a merchandising tag, by name.

        Args:
            tag: Tag to filter on.
            params: Pagination parameters.

        Returns:
            Page of product cards.
        """
        return await self._list_products(
            ProductFilter(tag=tag),
            params,
            sort_by="name",
            sort_order="asc",
        )

    async def get_trending_products(self, params: PaginationParams) -> ProductPage:
        """List products tagged TRENDING."""
        return await self.get_products_by_tag(ProductTag.TRENDING, params)

    async def get_recommended_products(self, params: PaginationParams) -> ProductPage:
        """List products tagged RECOMMENDED."""
        return await self.get_products_by_tag(ProductTag.RECOMMENDED, params)

    async def get_top_selling_products(self, params: PaginationParams) -> ProductPage:
        """List active products by sales, best sellers first."""
        return await self._list_top_selling(ProductFilter(is_active=True), params)

    async def get_top_selling_by_seller(
        self,
        seller_id: str,
        params: PaginationParams,
    ) -> ProductPage:
        """List a seller's active products by sales.

        Args:
            seller_id: Seller ID.
            params: Pagination parameters.

        Returns:
            Page of product cards.
        """
        return await self._list_top_selling(
            ProductFilter(is_active=True, seller_id=seller_id),
            params,
        )

    async def get_top_selling_by_brand(
        self,
        brand: str,
        params: PaginationParams,
    ) -> ProductPage:
        """List a brand's active products by sales.

        Args:
            brand: Brand UUID or brand name.
            params: Pagination parameters.

        Returns:
            Page of product cards.

        Raises:
            BrandNotFoundError: If the brand cannot be resolved.
            UpstreamQueryError: If the count or page query fails.
        """
        brand_id = await self.brand_resolver.resolve(brand)
        return await self._list_top_selling(
            ProductFilter(is_active=True, brand_id=brand_id),
            params,
        )

    async def get_top_selling_by_brands(
        self,
        brands: Sequence[str],
        params: PaginationParams,
    ) -> dict[str, ProductPage] | ProductPage:
        """List top sellers for several brands at once.

        Each brand runs its own resolve, count and fetch concurrently. A
        brand that cannot be resolved gets an empty page without affecting
        the others. A failing count or page query fails the whole listing,
        since an empty page would misreport that brand. With no brands
        this is the overall top-selling listing.

        Args:
            brands: Brand tokens (UUIDs or names), used as result keys.
            params: Pagination parameters applied to every brand.

        Returns:
            Mapping of brand token to page, or a single page when no
            brands were given.

        Raises:
            UpstreamQueryError: If any brand's count or page query fails.
        """
        tokens = list(dict.fromkeys(brands))
        if not tokens:
            return await self.get_top_selling_products(params)

        results = await asyncio.gather(
            *(self.get_top_selling_by_brand(token, params) for token in tokens),
            return_exceptions=True,
        )

        pages: dict[str, ProductPage] = {}
        for token, result in zip(tokens, results):
            if isinstance(result, BrandNotFoundError):
                pages[token] = PaginatedResult.empty(params)
            elif isinstance(result, BaseException):
                logger.warning(
                    "Failed to list top sellers for brand",
                    brand=token,
                    error=str(result),
                )
                raise result
            else:
                pages[token] = result

        logger.info(
            "Top sellers by brand listed",
            brand_count=len(tokens),
            empty=[t for t, p in pages.items() if p.total == 0],
        )
        return pages

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    async def _list_top_selling(
        self,
        filters: ProductFilter,
        params: PaginationParams,
    ) -> ProductPage:
        return await self._list_products(
            filters,
            params,
            sort_by="sales_till_date",
            sort_order="desc",
            with_sales=True,
        )

    async def _list_products(
        self,
        filters: ProductFilter,
        params: PaginationParams,
        sort_by: str,
        sort_order: str,
        with_created_at: bool = False,
        with_sales: bool = False,
    ) -> ProductPage:
        total = await self.store.count_products(filters)
        if total == 0:
            return PaginatedResult.empty(params)

        rows = await self.store.find_products(
            filters,
            sort_by=sort_by,
            sort_order=sort_order,
            limit=params.limit,
            offset=params.offset,
        )
        items = [
            build_simplified_product(
                row,
                with_created_at=with_created_at,
                with_sales=with_sales,
            )
            for row in rows
        ]

        logger.debug(
            "Products listed",
            filters=filters,
            page=params.page,
            limit=params.limit,
            total=total,
            returned=len(items),
        )
        return paginate(params, total, items)
