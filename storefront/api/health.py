"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.api.dependencies import get_catalog_store
from storefront.catalog.repository import CatalogStore
from storefront.domain.exceptions import UpstreamQueryError
from storefront.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.api_version,
    )


@router.get("/ready", response_model=None)
async def readiness_check(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> dict[str, str] | JSONResponse:
    """Check if the service can reach its database.

    Returns:
        Readiness status; 503 when the database is unreachable.
    """
    try:
        await store.ping()
    except UpstreamQueryError as e:
        logger.warning("Readiness check failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return {"status": "ready"}
