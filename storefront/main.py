"""Storefront API main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers, exception handlers and the
startup/shutdown lifecycle.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.api.health import router as health_router
from storefront.api.middleware import setup_middleware
from storefront.api.products import router as products_router
from storefront.api.sellers import router as sellers_router
from storefront.catalog.pagination import MAX_PAGE, MAX_PAGE_SIZE
from storefront.infrastructure.config import settings
from storefront.infrastructure.database import dispose_engine
from storefront.infrastructure.logging import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

PAGINATION_PARAMS = {"page", "limit"}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting storefront API",
        version=settings.api_version,
        debug=settings.debug,
        api_prefix=settings.api_prefix,
    )

    yield

    logger.info("Shutting down storefront API")
    await dispose_engine()


app = FastAPI(
    title="Storefront API",
    description="Product and seller catalog for the marketplace storefront",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, security headers, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix=settings.api_prefix)
app.include_router(sellers_router, prefix=settings.api_prefix)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "message": message,
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with the error envelope."""
    return _error(request, exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject invalid request parameters as a client error."""
    fields = {str(err["loc"][-1]) for err in exc.errors() if err.get("loc")}

    logger.info(
        "Request validation failed",
        path=request.url.path,
        fields=sorted(fields),
    )

    if fields & PAGINATION_PARAMS:
        message = (
            f"Invalid pagination parameters. Page must be between 1 and {MAX_PAGE} "
            f"and limit must be between 1 and {MAX_PAGE_SIZE}."
        )
    else:
        message = "Invalid request parameters"

    return _error(request, status.HTTP_400_BAD_REQUEST, message)
