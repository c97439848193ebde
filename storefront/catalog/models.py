"""SQLAlchemy models for the marketplace catalog.

Maps the brands, sellers and products tables of the hosted database.
The service only reads these tables; schema changes are managed outside
this repository.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.infrastructure.database import Base


class ProductTag(str, Enum):
    """Merchandising tags a product can carry."""

    TRENDING = "TRENDING"
    RECOMMENDED = "RECOMMENDED"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Brand(Base):
    """Brand entity.

    Attributes:
        id: Unique brand identifier (UUID).
        name: Display name, matched case-insensitively by brand lookups.
        logo_url: Brand logo URL.
        description: Free-text description.
        website_url: Brand website.
        created_at: Creation timestamp.
    """

    __tablename__ = "brands"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    logo_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Brand(id={self.id}, name={self.name})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "logo_url": self.logo_url,
            "description": self.description,
            "website_url": self.website_url,
            "created_at": self.created_at,
        }


class Seller(Base):
    """Seller (store) entity.

    Attributes:
        id: Unique seller identifier (UUID).
        store_name: Public store name.
        logo_url: Store logo URL.
        preview_image: Image shown on seller cards.
        city: Store city.
        state: Store state.
    """

    __tablename__ = "sellers"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    store_name: Mapped[str] = mapped_column(String(200), nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    gallery_images: Mapped[list[str] | None] = mapped_column(ARRAY(String), nullable=True)
    instagram_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    twitter_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    mobile: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    banner_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    preview_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Seller(id={self.id}, store_name={self.store_name})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation of the public seller fields.
        """
        return {
            "id": self.id,
            "store_name": self.store_name,
            "logo_url": self.logo_url,
            "preview_image": self.preview_image,
            "city": self.city,
            "state": self.state,
        }


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID).
        name: Product name.
        brand_id: Owning brand.
        model_name: Manufacturer model name.
        images: Ordered image URLs; the first one represents the product.
        seller_id: Seller offering the product.
        color: Color of this product.
        size_quantity: Stock count per size.
        price: Unit price.
        color_variants: IDs of the same model in other colors.
        tags: Merchandising tags (see ProductTag).
        is_active: Whether the product is listed.
        sales_till_date: Units sold so far.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    brand_id: Mapped[str | None] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("brands.id"),
        nullable=True,
        index=True,
    )
    model_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    images: Mapped[list[str] | None] = mapped_column(ARRAY(String), nullable=True)
    seller_id: Mapped[str | None] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("sellers.id"),
        nullable=True,
        index=True,
    )
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    size_quantity: Mapped[dict[str, int] | None] = mapped_column(JSONB, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    color_variants: Mapped[list[str] | None] = mapped_column(
        ARRAY(UUID(as_uuid=False)), nullable=True
    )
    tags: Mapped[list[str] | None] = mapped_column(ARRAY(String), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    sales_till_date: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    # Relationships
    seller: Mapped["Seller"] = relationship("Seller")
    brand: Mapped["Brand"] = relationship("Brand")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Relations are not included; the repository embeds them.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "brand_id": self.brand_id,
            "model_name": self.model_name,
            "images": list(self.images) if self.images is not None else None,
            "seller_id": self.seller_id,
            "color": self.color,
            "size_quantity": dict(self.size_quantity) if self.size_quantity else {},
            "price": self.price,
            "color_variants": (
                list(self.color_variants) if self.color_variants is not None else None
            ),
            "tags": list(self.tags) if self.tags is not None else None,
            "is_active": self.is_active,
            "sales_till_date": self.sales_till_date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
