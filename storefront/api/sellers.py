"""Seller API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.dependencies import get_seller_service
from storefront.api.schemas import ErrorResponse, FeaturedSellersResponse, SellerSchema
from storefront.catalog.sellers import SellerService
from storefront.domain.exceptions import UpstreamQueryError

router = APIRouter(prefix="/sellers", tags=["Sellers"])


@router.get(
    "/featured",
    response_model=FeaturedSellersResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List featured sellers",
)
async def get_featured_sellers(
    service: Annotated[SellerService, Depends(get_seller_service)],
) -> FeaturedSellersResponse:
    """List the sellers featured on the home page.

    Args:
        service: Seller service.

    Returns:
        Featured sellers with their count.

    Raises:
        HTTPException: If the store fails.
    """
    try:
        sellers = await service.get_featured_sellers()
    except UpstreamQueryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve featured sellers",
        ) from e

    return FeaturedSellersResponse(
        count=len(sellers),
        data=[SellerSchema.model_validate(s) for s in sellers],
    )
