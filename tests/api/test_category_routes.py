"""Tests for category API endpoints."""

from fastapi.testclient import TestClient

from storefront.infrastructure.storefront_client import StorefrontClientError


class TestListCategories:
    """Tests for GET /categories."""

    def test_lists_top_level_categories(self, client: TestClient) -> None:
        """Top-level categories are returned with their children."""
        response = client.get("/categories")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        fasteners = data["categories"][0]
        assert fasteners["handle"] == "fasteners"
        assert fasteners["collection_handle"] is None
        assert [c["short_name"] for c in fasteners["sub_categories"]] == ["Bolts", "Screws"]

    def test_storefront_failure(self, client: TestClient, storefront_client) -> None:
        """Upstream failures map to 502."""
        storefront_client.fetch_category.side_effect = StorefrontClientError(
            "Request failed: boom"
        )

        response = client.get("/categories")

        assert response.status_code == 502
        assert response.json()["error_code"] == "STOREFRONT_ERROR"


class TestGetCategory:
    """Tests for GET /categories/{handle}."""

    def test_unfiltered_page(self, client: TestClient) -> None:
        """Category page lists all products and options."""
        response = client.get("/categories/bolts")

        assert response.status_code == 200
        data = response.json()
        assert data["selected_category"]["handle"] == "bolts"
        assert [c["handle"] for c in data["top_level_categories"]] == ["fasteners", "tools"]
        assert len(data["collection"]["products"]) == 3
        assert data["selected_filters"] == {}
        assert data["product_options"] == {
            "Size": ["10mm", "12mm", "14mm", "16mm"],
            "Color": ["Red", "Blue", "Black"],
        }

    def test_filtered_page(self, client: TestClient) -> None:
        """Repeated query parameters select several values."""
        response = client.get("/categories/bolts?Size=12mm&Size=14mm")

        assert response.status_code == 200
        data = response.json()
        products = data["collection"]["products"]
        assert [p["handle"] for p in products] == ["hex-bolt", "carriage-bolt"]
        assert [
            v["selected_options"][0]["value"] for v in products[1]["variants"]
        ] == ["12mm", "14mm"]
        assert data["selected_filters"] == {"Size": ["12mm", "14mm"]}
        assert set(data["selected_filters"]) <= set(data["product_options"])
        assert data["unfiltered_count"] == 3

    def test_unknown_option_yields_empty_listing(self, client: TestClient) -> None:
        """Unknown option names match nothing rather than failing."""
        response = client.get("/categories/bolts", params={"Material": "Steel"})

        assert response.status_code == 200
        assert response.json()["collection"]["products"] == []

    def test_pagination_params_are_not_filters(
        self, client: TestClient, storefront_client
    ) -> None:
        """cursor and direction drive pagination only."""
        response = client.get(
            "/categories/bolts",
            params={"cursor": "abc", "direction": "previous", "Color": "Red"},
        )

        assert response.status_code == 200
        assert response.json()["selected_filters"] == {"Color": ["Red"]}
        pagination = storefront_client.fetch_collection.await_args.args[1]
        assert pagination.to_variables() == {"last": 50, "startCursor": "abc"}

    def test_category_not_found(self, client: TestClient) -> None:
        """Unknown handle returns 404."""
        response = client.get("/categories/unknown")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "CATEGORY_NOT_FOUND"
        assert data["request_id"] is not None

    def test_category_without_collection(self, client: TestClient) -> None:
        """Non-leaf category returns 404 instead of an empty list."""
        response = client.get("/categories/fasteners")

        assert response.status_code == 404
        assert response.json()["error_code"] == "COLLECTION_UNRESOLVED"

    def test_malformed_category(self, client: TestClient) -> None:
        """Malformed upstream record returns 502."""
        response = client.get("/categories/broken")

        assert response.status_code == 502
        data = response.json()
        assert data["error_code"] == "MALFORMED_CATEGORY"
        assert data["details"] == [{"field": "handle", "message": "missing"}]

    def test_transport_error(self, client: TestClient, storefront_client) -> None:
        """Transport failures surface as storefront errors."""
        storefront_client.fetch_collection.side_effect = StorefrontClientError(
            "Request failed: timeout"
        )

        response = client.get("/categories/bolts")

        assert response.status_code == 502

    def test_collection_not_found(self, client: TestClient, storefront_client) -> None:
        """Category linked to a missing collection returns 404."""
        storefront_client.fetch_collection.side_effect = None
        storefront_client.fetch_collection.return_value = None

        response = client.get("/categories/bolts")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "COLLECTION_NOT_FOUND"
        assert {"field": "collection_handle", "message": "bolts"} in data["details"]

    def test_category_too_deep(
        self, client: TestClient, storefront_client, build_category
    ) -> None:
        """Category records nested past the depth limit return 502."""
        deep = build_category("level-20", collection="bolts")
        for level in range(19, 0, -1):
            deep = build_category(f"level-{level}", children=[deep])
        storefront_client.fetch_category.side_effect = lambda handle: deep

        response = client.get("/categories/level-1")

        assert response.status_code == 502
        data = response.json()
        assert data["error_code"] == "CATEGORY_TOO_DEEP"
        assert {"field": "max_depth", "message": "16"} in data["details"]
