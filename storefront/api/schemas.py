"""API schemas for the storefront API.

Pydantic models for response serialization. Every response is wrapped
in a status envelope: ``{"status": "success", "data": ...}`` or
``{"status": "error", "message": ...}``.
"""

from datetime import datetime
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


# ============================================================================
# Envelopes
# ============================================================================


class SuccessResponse(BaseModel, Generic[DataT]):
    """Successful response envelope."""

    status: Literal["success"] = Field(default="success", description="Response status")
    data: DataT = Field(..., description="Response payload")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    status: Literal["error"] = Field(default="error", description="Response status")
    message: str = Field(..., description="Human-readable error message")
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductVariantSchema(BaseModel):
    """Another color of the same product model."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Variant product identifier")
    color: str = Field(..., description="Variant color")
    image: str = Field(..., description="Representative image URL, or empty")


class SimplifiedProductSchema(BaseModel):
    """Product card returned by list endpoints."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    brand_name: str = Field(..., description="Brand name")
    brand_logo: str = Field(..., description="Brand logo URL, or empty")
    seller_id: str = Field(..., description="Seller identifier")
    seller_name: str = Field(..., description="Seller store name")
    seller_logo: str = Field(..., description="Seller logo URL, or empty")
    image: str = Field(..., description="Representative image URL, or empty")
    price: float = Field(..., ge=0, description="Unit price")
    created_at: datetime | None = Field(default=None, description="Creation time")
    sales_till_date: int | None = Field(default=None, description="Units sold so far")


class ProductDetailSchema(BaseModel):
    """Full product detail."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    brand_id: str | None = Field(default=None, description="Brand identifier")
    brand_name: str = Field(..., description="Brand name")
    brand_logo: str = Field(..., description="Brand logo URL, or empty")
    model_name: str | None = Field(default=None, description="Model name")
    images: list[str] = Field(default_factory=list, description="Image URLs")
    seller_id: str = Field(..., description="Seller identifier")
    seller_name: str = Field(..., description="Seller store name")
    seller_logo: str = Field(..., description="Seller logo URL, or empty")
    color: str | None = Field(default=None, description="Product color")
    size_quantity: dict[str, int] = Field(
        default_factory=dict, description="Stock count per size"
    )
    price: float = Field(..., ge=0, description="Unit price")
    color_variants: list[ProductVariantSchema] | None = Field(
        default=None, description="Same model in other colors"
    )
    tags: list[str] | None = Field(default=None, description="Merchandising tags")
    is_active: bool = Field(..., description="Whether the product is listed")
    sales_till_date: int = Field(..., description="Units sold so far")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")


class PaginatedProductsSchema(BaseModel):
    """One page of product cards."""

    model_config = ConfigDict(populate_by_name=True)

    data: list[SimplifiedProductSchema] = Field(..., description="Products on this page")
    total: int = Field(..., description="Total number of matching products")
    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    total_pages: int = Field(..., alias="totalPages", description="Total number of pages")


# ============================================================================
# Seller Schemas
# ============================================================================


class SellerSchema(BaseModel):
    """Seller card."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Seller identifier")
    store_name: str = Field(..., description="Store name")
    logo_url: str | None = Field(default=None, description="Store logo URL")
    preview_image: str | None = Field(default=None, description="Preview image URL")
    city: str | None = Field(default=None, description="City")
    state: str | None = Field(default=None, description="State")


class FeaturedSellersResponse(BaseModel):
    """Featured sellers listing."""

    status: Literal["success"] = Field(default="success", description="Response status")
    count: int = Field(..., description="Number of sellers returned")
    data: list[SellerSchema] = Field(..., description="Featured sellers")
