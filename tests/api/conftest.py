"""Shared fixtures for API tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from storefront.api.categories import get_catalog_service
from storefront.catalog.service import CatalogService
from storefront.infrastructure.storefront_client import StorefrontClient
from storefront.main import app


@pytest.fixture
def storefront_client(root_record, build_collection, raw_products) -> MagicMock:
    """Mock storefront client serving the fixture catalog."""
    fasteners = root_record["subCategories"]["references"]["nodes"][0]
    bolts = fasteners["subCategories"]["references"]["nodes"][0]
    records = {
        "hardware": root_record,
        "fasteners": fasteners,
        "bolts": bolts,
        "broken": {"id": "gid://shopify/Metaobject/broken"},
    }

    client = MagicMock(spec=StorefrontClient)
    client.fetch_category = AsyncMock(side_effect=lambda handle: records.get(handle))
    client.fetch_collection = AsyncMock(
        side_effect=lambda handle, pagination=None: build_collection(handle, raw_products)
    )
    return client


@pytest.fixture
def client(storefront_client):
    """Create test client with the catalog service wired to the mock."""
    app.dependency_overrides[get_catalog_service] = lambda: CatalogService(
        storefront_client, root_handle="hardware"
    )
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
