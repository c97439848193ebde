"""Catalog data access.

Defines the store interface the catalog services depend on and its
SQLAlchemy implementation against the hosted Postgres database.
"""

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Protocol

import structlog
from sqlalchemy import Select, and_, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from storefront.catalog.models import Brand, Product, ProductTag, Seller
from storefront.domain.exceptions import UpstreamQueryError
from storefront.domain.identifiers import is_uuid_shaped

logger = structlog.get_logger()

RawRow = dict[str, Any]


@dataclass(frozen=True)
class ProductFilter:
    """Filter shared by the count and data queries of a listing.

    Attributes:
        is_active: Filter by listing status.
        seller_id: Filter by seller.
        brand_id: Filter by brand.
        tag: Only products whose tags contain this tag.
    """

    is_active: bool | None = None
    seller_id: str | None = None
    brand_id: str | None = None
    tag: ProductTag | None = None


class CatalogStore(Protocol):
    """Read interface of the catalog data store.

    Rows are plain mappings. Product rows carry their seller and brand
    under the "seller" and "brand" keys. Errors are raised as
    UpstreamQueryError; "nothing found" is None, [] or 0.
    """

    async def get_product(self, product_id: str) -> RawRow | None: ...

    async def get_products_by_ids(self, product_ids: Sequence[str]) -> list[RawRow]: ...

    async def count_products(self, filters: ProductFilter) -> int: ...

    async def find_products(
        self,
        filters: ProductFilter,
        sort_by: str = "created_at",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
    ) -> list[RawRow]: ...

    async def find_brand_ids_by_name(self, name: str, limit: int = 2) -> list[str]: ...

    async def list_sellers(self, limit: int) -> list[RawRow]: ...

    async def ping(self) -> None: ...


class CatalogRepository:
    """SQLAlchemy implementation of CatalogStore.

    Each call opens its own session from the factory, so independent
    calls can run concurrently.

    Example usage:
        repo = CatalogRepository(async_session_factory)
        total = await repo.count_products(ProductFilter(is_active=True))
        rows = await repo.find_products(
            ProductFilter(is_active=True),
            sort_by="sales_till_date",
            limit=10,
        )
    """

    SORT_COLUMNS = {
        "created_at": Product.created_at,
        "name": Product.name,
        "price": Product.price,
        "sales_till_date": Product.sales_till_date,
    }

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory producing async SQLAlchemy sessions.
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error("Catalog query failed", operation=operation, error=str(e))
            raise UpstreamQueryError(operation, str(e)) from e

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def get_product(self, product_id: str) -> RawRow | None:
        """Get a product with its seller and brand.

        Args:
            product_id: Product ID.

        Returns:
            Product row if found, None otherwise.
        """
        if not is_uuid_shaped(product_id):
            return None

        query = (
            select(Product)
            .where(Product.id == product_id)
            .options(selectinload(Product.seller), selectinload(Product.brand))
        )

        async with self._session("get_product") as session:
            result = await session.execute(query)
            product = result.scalar_one_or_none()
            return self._to_row(product) if product else None

    async def get_products_by_ids(self, product_ids: Sequence[str]) -> list[RawRow]:
        """Get id, color and images for a batch of products.

        Args:
            product_ids: Product IDs; non-UUID values are ignored.

        Returns:
            Rows for the products that exist, in store order.
        """
        ids = [pid for pid in product_ids if is_uuid_shaped(pid)]
        if not ids:
            return []

        query = select(Product.id, Product.color, Product.images).where(Product.id.in_(ids))

        async with self._session("get_products_by_ids") as session:
            result = await session.execute(query)
            return [
                {"id": row.id, "color": row.color, "images": row.images}
                for row in result.all()
            ]

    async def count_products(self, filters: ProductFilter) -> int:
        """Count products matching filters.

        Args:
            filters: Listing filter.

        Returns:
            Count of matching products.
        """
        if not self._filter_is_satisfiable(filters):
            return 0

        async with self._session("count_products") as session:
            result = await session.execute(self.build_count_query(filters))
            return int(result.scalar_one())

    async def find_products(
        self,
        filters: ProductFilter,
        sort_by: str = "created_at",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
    ) -> list[RawRow]:
        """Find products with filtering, sorting, and pagination.

        Args:
            filters: Listing filter.
            sort_by: Sort field (created_at, name, price, sales_till_date).
            sort_order: Sort order (asc, desc).
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Product rows with embedded seller and brand.
        """
        if not self._filter_is_satisfiable(filters):
            return []

        query = self.build_find_query(filters, sort_by, sort_order, limit, offset)

        async with self._session("find_products") as session:
            result = await session.execute(query)
            return [self._to_row(p) for p in result.scalars().all()]

    def build_count_query(self, filters: ProductFilter) -> Select:
        """Build the COUNT query for a filter."""
        query = select(func.count(Product.id))
        conditions = self._conditions(filters)
        if conditions:
            query = query.where(and_(*conditions))
        return query

    def build_find_query(
        self,
        filters: ProductFilter,
        sort_by: str = "created_at",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
    ) -> Select:
        """Build the page query for a filter."""
        query = select(Product)

        conditions = self._conditions(filters)
        if conditions:
            query = query.where(and_(*conditions))

        sort_column = self.SORT_COLUMNS.get(sort_by, Product.created_at)
        if sort_order.lower() == "desc":
            query = query.order_by(sort_column.desc())
        else:
            query = query.order_by(sort_column.asc())

        return (
            query.limit(limit)
            .offset(offset)
            .options(selectinload(Product.seller), selectinload(Product.brand))
        )

    # ------------------------------------------------------------------
    # Brands and sellers
    # ------------------------------------------------------------------

    async def find_brand_ids_by_name(self, name: str, limit: int = 2) -> list[str]:
        """Find brands whose name matches case-insensitively.

        The name is used as an ILIKE pattern, so a plain name is an exact
        case-insensitive match.

        Args:
            name: Brand name or pattern.
            limit: Maximum IDs to return.

        Returns:
            Matching brand IDs.
        """
        query = select(Brand.id).where(Brand.name.ilike(name)).limit(limit)

        async with self._session("find_brand_ids_by_name") as session:
            result = await session.execute(query)
            return [str(brand_id) for brand_id in result.scalars().all()]

    async def list_sellers(self, limit: int) -> list[RawRow]:
        """List sellers.

        Args:
            limit: Maximum sellers to return.

        Returns:
            Seller rows with the public seller fields.
        """
        query = select(Seller).limit(limit)

        async with self._session("list_sellers") as session:
            result = await session.execute(query)
            return [s.to_dict() for s in result.scalars().all()]

    async def ping(self) -> None:
        """Check database connectivity."""
        async with self._session("ping") as session:
            await session.execute(text("SELECT 1"))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _filter_is_satisfiable(filters: ProductFilter) -> bool:
        # uuid columns reject malformed ids, and no row can match one anyway
        for value in (filters.seller_id, filters.brand_id):
            if value is not None and not is_uuid_shaped(value):
                return False
        return True

    @staticmethod
    def _conditions(filters: ProductFilter) -> list[Any]:
        conditions: list[Any] = []

        if filters.is_active is not None:
            conditions.append(Product.is_active == filters.is_active)

        if filters.seller_id is not None:
            conditions.append(Product.seller_id == filters.seller_id)

        if filters.brand_id is not None:
            conditions.append(Product.brand_id == filters.brand_id)

        if filters.tag is not None:
            conditions.append(Product.tags.isnot(None))
            conditions.append(Product.tags.contains([filters.tag.value]))

        return conditions

    @staticmethod
    def _to_row(product: Product) -> RawRow:
        row = product.to_dict()
        row["seller"] = (
            {
                "id": product.seller.id,
                "store_name": product.seller.store_name,
                "logo_url": product.seller.logo_url,
            }
            if product.seller
            else None
        )
        row["brand"] = (
            {
                "id": product.brand.id,
                "name": product.brand.name,
                "logo_url": product.brand.logo_url,
            }
            if product.brand
            else None
        )
        return row
