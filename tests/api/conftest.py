"""Shared fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from storefront.api.dependencies import get_catalog_store
from storefront.main import app


@pytest.fixture
def client(store) -> Iterator[TestClient]:
    """Create test client backed by the fake catalog store."""
    app.dependency_overrides[get_catalog_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def api_prefix() -> str:
    """Mount point of the catalog routes."""
    from storefront.infrastructure.config import settings

    return settings.api_prefix
