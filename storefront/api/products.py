"""Product API endpoints.

Provides product detail and the paginated product listings.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import (
    ErrorResponse,
    PaginatedProductsSchema,
    ProductDetailSchema,
    SimplifiedProductSchema,
    SuccessResponse,
)
from storefront.catalog.dto import SimplifiedProduct
from storefront.catalog.pagination import (
    MAX_PAGE,
    MAX_PAGE_SIZE,
    PaginatedResult,
    PaginationParams,
)
from storefront.catalog.service import CatalogService
from storefront.domain.exceptions import UpstreamQueryError

logger = structlog.get_logger()

router = APIRouter(tags=["Products"])

ListResponses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

MAX_BRANDS = 10

Page = Annotated[int, Query(ge=1, le=MAX_PAGE, description="Page number (1-based)")]


def page_size(default: int):
    """Build the ``limit`` query parameter with an endpoint default."""
    return Query(default, ge=1, le=MAX_PAGE_SIZE, description="Items per page")


# ============================================================================
# Converters
# ============================================================================


def page_to_response(result: PaginatedResult[SimplifiedProduct]) -> PaginatedProductsSchema:
    """Convert a product page to its response schema."""
    return PaginatedProductsSchema(
        data=[SimplifiedProductSchema.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
    )


def parse_brands(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated brand parameters.

    Blank entries are dropped and duplicates collapsed, keeping the first
    occurrence.
    """
    tokens: list[str] = []
    for value in values or []:
        for part in value.split(","):
            part = part.strip()
            if part and part not in tokens:
                tokens.append(part)
    return tokens


def upstream_failure(message: str) -> HTTPException:
    """Build the generic 500 error returned when the store fails."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/product/{product_id}",
    response_model=SuccessResponse[ProductDetailSchema],
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product details",
    description="Get a product with seller, brand and color variants.",
)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> SuccessResponse[ProductDetailSchema]:
    """Get a product by ID.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        Product details.

    Raises:
        HTTPException: If product not found or the store fails.
    """
    try:
        product = await service.get_product(product_id)
    except UpstreamQueryError as e:
        raise upstream_failure("An error occurred while fetching the product") from e

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return SuccessResponse[ProductDetailSchema](
        data=ProductDetailSchema.model_validate(product)
    )


@router.get(
    "/products/trending",
    response_model=SuccessResponse[PaginatedProductsSchema],
    response_model_exclude_none=True,
    responses=ListResponses,
    summary="List trending products",
)
async def get_trending_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: Page = 1,
    limit: int = page_size(10),
) -> SuccessResponse[PaginatedProductsSchema]:
    """List products tagged as trending, sorted by name."""
    try:
        result = await service.get_trending_products(PaginationParams(page, limit))
    except UpstreamQueryError as e:
        raise upstream_failure("An error occurred while fetching trending products") from e

    return SuccessResponse[PaginatedProductsSchema](data=page_to_response(result))


@router.get(
    "/products/recommended",
    response_model=SuccessResponse[PaginatedProductsSchema],
    response_model_exclude_none=True,
    responses=ListResponses,
    summary="List recommended products",
)
async def get_recommended_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: Page = 1,
    limit: int = page_size(10),
) -> SuccessResponse[PaginatedProductsSchema]:
    """List products tagged as recommended, sorted by name."""
    try:
        result = await service.get_recommended_products(PaginationParams(page, limit))
    except UpstreamQueryError as e:
        raise upstream_failure(
            "An error occurred while fetching recommended products"
        ) from e

    return SuccessResponse[PaginatedProductsSchema](data=page_to_response(result))


@router.get(
    "/products/latest",
    response_model=SuccessResponse[PaginatedProductsSchema],
    response_model_exclude_none=True,
    responses=ListResponses,
    summary="List latest products",
)
async def get_latest_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: Page = 1,
    limit: int = page_size(12),
) -> SuccessResponse[PaginatedProductsSchema]:
    """List active products, newest first."""
    try:
        result = await service.get_latest_products(PaginationParams(page, limit))
    except UpstreamQueryError as e:
        raise upstream_failure("An error occurred while fetching latest products") from e

    return SuccessResponse[PaginatedProductsSchema](data=page_to_response(result))


@router.get(
    "/products/top-selling",
    response_model=SuccessResponse[PaginatedProductsSchema | dict[str, PaginatedProductsSchema]],
    response_model_exclude_none=True,
    responses=ListResponses,
    summary="List top-selling products",
    description=(
        "List active products by sales. With `brands` (repeated or "
        "comma-separated, names or IDs) the result is keyed by brand."
    ),
)
async def get_top_selling_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: Page = 1,
    limit: int = page_size(10),
    brands: Annotated[
        list[str] | None,
        Query(description="Brand names or IDs"),
    ] = None,
) -> SuccessResponse[PaginatedProductsSchema | dict[str, PaginatedProductsSchema]]:
    """List top-selling products, overall or per brand."""
    tokens = parse_brands(brands)
    if len(tokens) > MAX_BRANDS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many brands. At most {MAX_BRANDS} brands can be requested.",
        )
    params = PaginationParams(page, limit)

    try:
        result = await service.get_top_selling_by_brands(tokens, params)
    except UpstreamQueryError as e:
        raise upstream_failure(
            "An error occurred while fetching top selling products"
        ) from e

    if isinstance(result, PaginatedResult):
        data: PaginatedProductsSchema | dict[str, PaginatedProductsSchema] = (
            page_to_response(result)
        )
    else:
        data = {token: page_to_response(p) for token, p in result.items()}

    return SuccessResponse[PaginatedProductsSchema | dict[str, PaginatedProductsSchema]](
        data=data
    )


@router.get(
    "/products/{seller_id}/top-selling",
    response_model=SuccessResponse[PaginatedProductsSchema],
    response_model_exclude_none=True,
    responses=ListResponses,
    summary="List a seller's top-selling products",
)
async def get_top_selling_products_by_seller(
    seller_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    page: Page = 1,
    limit: int = page_size(8),
) -> SuccessResponse[PaginatedProductsSchema]:
    """List a seller's active products by sales."""
    try:
        result = await service.get_top_selling_by_seller(
            seller_id, PaginationParams(page, limit)
        )
    except UpstreamQueryError as e:
        raise upstream_failure(
            "An error occurred while fetching top selling products by seller"
        ) from e

    return SuccessResponse[PaginatedProductsSchema](data=page_to_response(result))
