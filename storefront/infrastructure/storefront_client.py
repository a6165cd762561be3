"""Storefront GraphQL client.

Fetches raw category metaobjects and collection pages from the
storefront API. Returned records are plain dictionaries; normalization
happens in the catalog layer.
"""

from typing import Any

import httpx
import structlog

from storefront.catalog.pagination import PaginationParams
from storefront.infrastructure.config import settings
from storefront.infrastructure.queries import CATEGORY_QUERY, COLLECTION_QUERY

logger = structlog.get_logger()


class StorefrontClientError(Exception):
    """Error from a storefront API call."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StorefrontClient:
    """HTTP client for the storefront GraphQL API.

    Example usage:
        client = StorefrontClient(request_id="abc")
        try:
            raw = await client.fetch_category("fasteners")
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        access_token: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize storefront client.

        Args:
            base_url: Storefront base URL.
            access_token: Public storefront access token.
            api_version: Storefront API version (e.g. "2024-10").
            timeout: Request timeout in seconds.
            request_id: Optional request ID for correlation.
        """
        self.base_url = (base_url or settings.storefront_url).rstrip("/")
        self.access_token = (
            access_token if access_token is not None else settings.storefront_access_token
        )
        self.api_version = api_version or settings.storefront_api_version
        self.timeout = timeout or settings.storefront_timeout
        self.request_id = request_id
        self._client: httpx.AsyncClient | None = None

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint path."""
        return f"/api/{self.api_version}/graphql.json"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
            if self.access_token:
                headers["X-Shopify-Storefront-Access-Token"] = self.access_token
            if self.request_id:
                headers["X-Request-ID"] = self.request_id
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def query(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL document.

        Args:
            document: GraphQL query.
            variables: Query variables.

        Returns:
            The ``data`` member of the response.

        Raises:
            StorefrontClientError: On transport errors, non-200 responses
                or GraphQL errors.
        """
        try:
            client = await self._get_client()
            response = await client.post(
                self.endpoint,
                json={"query": document, "variables": variables or {}},
            )
        except httpx.RequestError as e:
            logger.error(
                "Storefront API request failed",
                url=self.base_url,
                error=str(e),
            )
            raise StorefrontClientError(f"Request failed: {str(e)}") from e

        if response.status_code != 200:
            raise StorefrontClientError(
                f"Storefront API returned {response.status_code}: {response.text}",
                response.status_code,
            )

        payload = response.json()
        errors = payload.get("errors")
        if errors:
            messages = [e.get("message", "unknown error") for e in errors]
            logger.warning("Storefront GraphQL errors", errors=messages)
            raise StorefrontClientError(
                f"GraphQL errors: {'; '.join(messages)}",
                response.status_code,
            )

        return payload.get("data") or {}

    async def fetch_category(self, handle: str) -> dict[str, Any] | None:
        """Fetch a raw category metaobject with two levels of children.

        Args:
            handle: Category metaobject handle.

        Returns:
            Raw category record, None if no such category exists.

        Raises:
            StorefrontClientError: On API error.
        """
        data = await self.query(
            CATEGORY_QUERY,
            {"handle": handle, "type": settings.category_metaobject_type},
        )
        category = data.get("category")
        if category is None:
            logger.info("Category not found in storefront", handle=handle)
        return category

    async def fetch_collection(
        self,
        handle: str,
        pagination: PaginationParams | None = None,
    ) -> dict[str, Any] | None:
        """Fetch one page of a collection's products.

        Args:
            handle: Collection handle.
            pagination: Page size and cursor.

        Returns:
            Raw collection record, None if no such collection exists.

        Raises:
            StorefrontClientError: On API error.
        """
        pagination = pagination or PaginationParams(page_by=settings.collection_page_size)
        data = await self.query(
            COLLECTION_QUERY,
            {"handle": handle, **pagination.to_variables()},
        )
        collection = data.get("collection")
        if collection is None:
            logger.info("Collection not found in storefront", handle=handle)
        return collection
