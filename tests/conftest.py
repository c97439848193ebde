"""Shared fixtures.

Provides an in-memory catalog store that implements the CatalogStore
interface, plus sample brands, sellers and products.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any
from uuid import uuid4

import pytest

from storefront.catalog.repository import ProductFilter
from storefront.domain.exceptions import UpstreamQueryError


# ============================================================================
# Fake Store
# ============================================================================


class FakeCatalogStore:
    """In-memory CatalogStore.

    Records every call, can embed relations as single-element lists and
    can be told to fail specific operations or brands.
    """

    def __init__(
        self,
        products: list[dict[str, Any]] | None = None,
        brands: list[dict[str, Any]] | None = None,
        sellers: list[dict[str, Any]] | None = None,
        embed_as_list: bool = False,
    ) -> None:
        self.products = products or []
        self.brands = brands or []
        self.sellers = sellers or []
        self.embed_as_list = embed_as_list
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.failing_operations: set[str] = set()
        self.failing_brand_ids: set[str] = set()

    def calls_to(self, operation: str) -> list[tuple[Any, ...]]:
        return [args for op, args in self.calls if op == operation]

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, args))
        if operation in self.failing_operations:
            raise UpstreamQueryError(operation, "simulated failure")

    def _embed(self, record: dict[str, Any] | None) -> Any:
        if record is None:
            return [] if self.embed_as_list else None
        return [record] if self.embed_as_list else record

    def _with_relations(self, product: dict[str, Any]) -> dict[str, Any]:
        seller = next((s for s in self.sellers if s["id"] == product.get("seller_id")), None)
        brand = next((b for b in self.brands if b["id"] == product.get("brand_id")), None)
        row = dict(product)
        row["seller"] = self._embed(
            {"id": seller["id"], "store_name": seller["store_name"], "logo_url": seller.get("logo_url")}
            if seller
            else None
        )
        row["brand"] = self._embed(
            {"id": brand["id"], "name": brand["name"], "logo_url": brand.get("logo_url")}
            if brand
            else None
        )
        return row

    def _matches(self, product: dict[str, Any], filters: ProductFilter) -> bool:
        if filters.is_active is not None and product["is_active"] != filters.is_active:
            return False
        if filters.seller_id is not None and product.get("seller_id") != filters.seller_id:
            return False
        if filters.brand_id is not None and product.get("brand_id") != filters.brand_id:
            return False
        if filters.tag is not None:
            tags = product.get("tags")
            if tags is None or filters.tag.value not in tags:
                return False
        return True

    def _check_brand(self, operation: str, filters: ProductFilter) -> None:
        if filters.brand_id in self.failing_brand_ids:
            raise UpstreamQueryError(operation, f"simulated failure for {filters.brand_id}")

    async def get_product(self, product_id: str) -> dict[str, Any] | None:
        self._record("get_product", product_id)
        product = next((p for p in self.products if p["id"] == product_id), None)
        return self._with_relations(product) if product else None

    async def get_products_by_ids(self, product_ids: Sequence[str]) -> list[dict[str, Any]]:
        self._record("get_products_by_ids", list(product_ids))
        return [
            {"id": p["id"], "color": p.get("color"), "images": p.get("images")}
            for p in self.products
            if p["id"] in product_ids
        ]

    async def count_products(self, filters: ProductFilter) -> int:
        self._record("count_products", filters)
        self._check_brand("count_products", filters)
        return sum(1 for p in self.products if self._matches(p, filters))

    async def find_products(
        self,
        filters: ProductFilter,
        sort_by: str = "created_at",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        self._record("find_products", filters, sort_by, sort_order, limit, offset)
        self._check_brand("find_products", filters)
        matching = [p for p in self.products if self._matches(p, filters)]
        matching.sort(key=lambda p: p[sort_by], reverse=sort_order == "desc")
        return [self._with_relations(p) for p in matching[offset : offset + limit]]

    async def find_brand_ids_by_name(self, name: str, limit: int = 2) -> list[str]:
        self._record("find_brand_ids_by_name", name)
        return [b["id"] for b in self.brands if b["name"].lower() == name.lower()][:limit]

    async def list_sellers(self, limit: int) -> list[dict[str, Any]]:
        self._record("list_sellers", limit)
        return [
            {k: s.get(k) for k in ("id", "store_name", "logo_url", "preview_image", "city", "state")}
            for s in self.sellers[:limit]
        ]

    async def ping(self) -> None:
        self._record("ping")


# ============================================================================
# Sample Data
# ============================================================================


BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_brand(name: str, **overrides: Any) -> dict[str, Any]:
    """Create a brand row."""
    brand = {
        "id": str(uuid4()),
        "name": name,
        "logo_url": f"https://cdn.example.com/brands/{name.lower()}.png",
    }
    brand.update(overrides)
    return brand


def make_seller(store_name: str, **overrides: Any) -> dict[str, Any]:
    """Create a seller row."""
    slug = store_name.lower().replace(" ", "-")
    seller = {
        "id": str(uuid4()),
        "store_name": store_name,
        "logo_url": f"https://cdn.example.com/sellers/{slug}.png",
        "preview_image": f"https://cdn.example.com/sellers/{slug}-preview.jpg",
        "city": "Pune",
        "state": "Maharashtra",
    }
    seller.update(overrides)
    return seller


def make_product(name: str, **overrides: Any) -> dict[str, Any]:
    """Create a product row."""
    slug = name.lower().replace(" ", "-")
    product = {
        "id": str(uuid4()),
        "name": name,
        "brand_id": None,
        "model_name": f"{name} Model",
        "images": [f"https://cdn.example.com/products/{slug}-1.jpg"],
        "seller_id": None,
        "color": "Black",
        "size_quantity": {"S": 3, "M": 5},
        "price": Decimal("49.99"),
        "color_variants": None,
        "tags": None,
        "is_active": True,
        "sales_till_date": 0,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    product.update(overrides)
    return product


@pytest.fixture
def acme() -> dict[str, Any]:
    return make_brand("Acme")


@pytest.fixture
def globex() -> dict[str, Any]:
    return make_brand("Globex")


@pytest.fixture
def initech() -> dict[str, Any]:
    return make_brand("Initech")


@pytest.fixture
def seller() -> dict[str, Any]:
    return make_seller("Urban Threads")


@pytest.fixture
def other_seller() -> dict[str, Any]:
    return make_seller("Sole Society", city="Mumbai")


@pytest.fixture
def products(acme, globex, initech, seller, other_seller) -> list[dict[str, Any]]:
    """A small catalog spread over three brands and two sellers."""
    return [
        make_product(
            "Court Sneaker",
            brand_id=acme["id"],
            seller_id=seller["id"],
            sales_till_date=120,
            tags=["TRENDING"],
            created_at=BASE_TIME + timedelta(days=1),
        ),
        make_product(
            "Canvas Tote",
            brand_id=acme["id"],
            seller_id=other_seller["id"],
            sales_till_date=45,
            tags=["RECOMMENDED", "TRENDING"],
            created_at=BASE_TIME + timedelta(days=2),
        ),
        make_product(
            "Aviator Jacket",
            brand_id=globex["id"],
            seller_id=seller["id"],
            sales_till_date=300,
            tags=["RECOMMENDED"],
            created_at=BASE_TIME + timedelta(days=3),
        ),
        make_product(
            "Denim Overshirt",
            brand_id=initech["id"],
            seller_id=seller["id"],
            sales_till_date=80,
            created_at=BASE_TIME + timedelta(days=4),
        ),
        make_product(
            "Retired Loafer",
            brand_id=acme["id"],
            seller_id=seller["id"],
            sales_till_date=999,
            is_active=False,
            tags=["TRENDING"],
            created_at=BASE_TIME + timedelta(days=5),
        ),
    ]


@pytest.fixture
def store(products, acme, globex, initech, seller, other_seller) -> FakeCatalogStore:
    """Fake store seeded with the sample catalog."""
    return FakeCatalogStore(
        products=products,
        brands=[acme, globex, initech],
        sellers=[seller, other_seller],
    )


@pytest.fixture
def store_factory() -> type[FakeCatalogStore]:
    """The fake store class, for tests that build their own catalog."""
    return FakeCatalogStore


@pytest.fixture
def product_factory():
    """Factory for product rows."""
    return make_product
