"""Database configuration and session management.

Provides the async SQLAlchemy engine and session factory for the hosted
Postgres instance that backs the catalog.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from storefront.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=settings.database_pool_size,
    connect_args={"statement_cache_size": settings.database_statement_cache_size},
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


async def dispose_engine() -> None:
    """Close all pooled connections."""
    await engine.dispose()
