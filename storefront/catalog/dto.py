"""Client-facing catalog projections.

Builders in this module turn raw store rows into the denormalized shapes
returned by the API. Missing seller or brand data is replaced with fixed
fallbacks so clients never see nulls for those fields.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from storefront.catalog.joins import Row, embedded, first_image

UNKNOWN_SELLER = "Unknown Seller"
UNKNOWN_BRAND = "Unknown Brand"


# ============================================================================
# Projections
# ============================================================================


@dataclass(frozen=True)
class ProductVariant:
    """Another color of the same product model."""

    id: str
    color: str
    image: str


@dataclass(frozen=True)
class SimplifiedProduct:
    """Product card used by every list endpoint.

    Attributes:
        id: Product ID.
        name: Product name.
        brand_name: Resolved brand name or "Unknown Brand".
        brand_logo: Resolved brand logo or "".
        seller_id: Seller ID.
        seller_name: Resolved store name or "Unknown Seller".
        seller_logo: Resolved store logo or "".
        image: Representative image or "".
        price: Unit price.
        created_at: Only set by the latest-products listing.
        sales_till_date: Only set by the top-selling listings.
    """

    id: str
    name: str
    brand_name: str
    brand_logo: str
    seller_id: str
    seller_name: str
    seller_logo: str
    image: str
    price: float
    created_at: datetime | None = None
    sales_till_date: int | None = None


@dataclass(frozen=True)
class ProductDetail:
    """Full product view with seller, brand and resolved color variants."""

    id: str
    name: str
    brand_id: str | None
    brand_name: str
    brand_logo: str
    model_name: str | None
    images: list[str]
    seller_id: str
    seller_name: str
    seller_logo: str
    color: str | None
    size_quantity: dict[str, int]
    price: float
    color_variants: list[ProductVariant] | None
    tags: list[str] | None
    is_active: bool
    sales_till_date: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SellerListItem:
    """Seller card shown in seller listings."""

    id: str
    store_name: str
    logo_url: str | None = None
    preview_image: str | None = None
    city: str | None = None
    state: str | None = None


@dataclass(frozen=True)
class _Parties:
    seller_id: str
    seller_name: str
    seller_logo: str
    brand_name: str
    brand_logo: str


# ============================================================================
# Builders
# ============================================================================


def _price(value: Any) -> float:
    if value is None:
        return 0.0
    return float(value)


def _parties(row: Row) -> _Parties:
    seller = embedded(row, "seller") or {}
    brand = embedded(row, "brand") or {}
    return _Parties(
        seller_id=str(row.get("seller_id") or seller.get("id") or ""),
        seller_name=seller.get("store_name") or UNKNOWN_SELLER,
        seller_logo=seller.get("logo_url") or "",
        brand_name=brand.get("name") or UNKNOWN_BRAND,
        brand_logo=brand.get("logo_url") or "",
    )


def build_simplified_product(
    row: Row,
    *,
    with_created_at: bool = False,
    with_sales: bool = False,
) -> SimplifiedProduct:
    """Build a product card from a raw product row.

    Args:
        row: Product row with optional embedded "seller" and "brand".
        with_created_at: Include the creation timestamp.
        with_sales: Include the sales-to-date counter.

    Returns:
        Denormalized product card.
    """
    parties = _parties(row)
    return SimplifiedProduct(
        id=str(row["id"]),
        name=row.get("name") or "",
        brand_name=parties.brand_name,
        brand_logo=parties.brand_logo,
        seller_id=parties.seller_id,
        seller_name=parties.seller_name,
        seller_logo=parties.seller_logo,
        image=first_image(row.get("images")),
        price=_price(row.get("price")),
        created_at=row.get("created_at") if with_created_at else None,
        sales_till_date=int(row.get("sales_till_date") or 0) if with_sales else None,
    )


def build_product_variant(row: Row) -> ProductVariant:
    """Build a color variant from an (id, color, images) row."""
    return ProductVariant(
        id=str(row["id"]),
        color=row.get("color") or "",
        image=first_image(row.get("images")),
    )


def build_product_detail(
    row: Row,
    variants: list[ProductVariant] | None,
) -> ProductDetail:
    """Build the product detail view.

    Args:
        row: Product row with optional embedded "seller" and "brand".
        variants: Resolved color variants, or None when there are none.

    Returns:
        Denormalized product detail.
    """
    parties = _parties(row)
    tags = row.get("tags")
    return ProductDetail(
        id=str(row["id"]),
        name=row.get("name") or "",
        brand_id=row.get("brand_id"),
        brand_name=parties.brand_name,
        brand_logo=parties.brand_logo,
        model_name=row.get("model_name"),
        images=list(row.get("images") or []),
        seller_id=parties.seller_id,
        seller_name=parties.seller_name,
        seller_logo=parties.seller_logo,
        color=row.get("color"),
        size_quantity={str(k): int(v) for k, v in (row.get("size_quantity") or {}).items()},
        price=_price(row.get("price")),
        color_variants=variants,
        tags=list(tags) if tags is not None else None,
        is_active=bool(row.get("is_active", True)),
        sales_till_date=int(row.get("sales_till_date") or 0),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def build_seller_list_item(row: Row) -> SellerListItem:
    """Project a seller row onto the seller card fields."""
    return SellerListItem(
        id=str(row["id"]),
        store_name=row.get("store_name") or "",
        logo_url=row.get("logo_url"),
        preview_image=row.get("preview_image"),
        city=row.get("city"),
        state=row.get("state"),
    )
