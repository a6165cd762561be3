"""Tests for health check endpoints."""

import pytest
from fastapi.testclient import TestClient

from storefront.api.health import readiness_checks
from storefront.infrastructure.config import Settings, settings
from storefront.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


def test_health_check(client: TestClient) -> None:
    """Health reports the service and the storefront API version in use."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "storefront-catalog"
    assert data["storefront_api_version"] == settings.storefront_api_version


def test_ready_with_default_settings(client: TestClient) -> None:
    """Default settings point at a usable storefront."""
    response = client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert all(data["checks"].values())


def test_not_ready_without_metaobject_type(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A blank metaobject type makes the service not ready."""
    monkeypatch.setattr(settings, "category_metaobject_type", "")

    response = client.get("/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["checks"]["category_metaobject_type"] is False
    assert data["checks"]["storefront_url"] is True


@pytest.mark.parametrize(
    "url",
    ["", "mock.shop", "ftp://mock.shop", "https://"],
)
def test_unusable_storefront_url(url: str) -> None:
    """Storefront URL needs an http(s) scheme and a host."""
    checks = readiness_checks(Settings(storefront_url=url))
    assert checks["storefront_url"] is False


def test_page_size_out_of_range() -> None:
    """Collection page size must fit the storefront's connection limit."""
    assert readiness_checks(Settings(collection_page_size=0))["collection_page_size"] is False
    assert readiness_checks(Settings(collection_page_size=251))["collection_page_size"] is False
    assert readiness_checks(Settings(collection_page_size=250))["collection_page_size"] is True
