"""Health check endpoints.

``/health`` reports liveness. ``/ready`` reports whether the storefront
settings are usable enough to serve category pages.
"""

from urllib.parse import urlparse

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from storefront.catalog.pagination import MAX_PAGE_SIZE
from storefront.infrastructure.config import Settings, settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str
    storefront_api_version: str


class ReadinessResponse(BaseModel):
    """Readiness response with one entry per configuration check."""

    status: str
    checks: dict[str, bool]


def readiness_checks(config: Settings) -> dict[str, bool]:
    """Check the settings a category page depends on.

    Args:
        config: Settings to check.

    Returns:
        Check name to pass/fail.
    """
    url = urlparse(config.storefront_url)
    return {
        "storefront_url": url.scheme in ("http", "https") and bool(url.netloc),
        "storefront_api_version": bool(config.storefront_api_version.strip()),
        "category_metaobject_type": bool(config.category_metaobject_type.strip()),
        "root_category_handle": bool(config.root_category_handle.strip()),
        "collection_page_size": 1 <= config.collection_page_size <= MAX_PAGE_SIZE,
    }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="storefront-catalog",
        version=settings.api_version,
        storefront_api_version=settings.storefront_api_version,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(response: Response) -> ReadinessResponse:
    """Check if service is ready to accept requests.

    Responds 503 when any storefront setting is unusable.

    Returns:
        Readiness status and the individual checks.
    """
    checks = readiness_checks(settings)
    if all(checks.values()):
        return ReadinessResponse(status="ready", checks=checks)

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="not_ready", checks=checks)
