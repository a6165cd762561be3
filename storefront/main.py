"""Storefront catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.categories import router as categories_router
from storefront.api.health import router as health_router
from storefront.api.middleware import error_response, setup_middleware
from storefront.domain.exceptions import (
    CategoryDepthExceededError,
    CategoryNotFoundError,
    CollectionNotFoundError,
    CollectionUnresolvedError,
    DomainError,
    MalformedCategoryError,
)
from storefront.infrastructure.config import settings
from storefront.infrastructure.logging_config import configure_logging
from storefront.infrastructure.storefront_client import StorefrontClientError

configure_logging(settings.log_level)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting storefront catalog API",
        version=settings.api_version,
        debug=settings.debug,
        storefront_url=settings.storefront_url,
        root_category=settings.root_category_handle,
    )

    yield

    logger.info("Shutting down storefront catalog API")


app = FastAPI(
    title="Storefront Catalog API",
    description="Category navigation and facet filtering for the storefront",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================

# Domain error type -> (HTTP status, error code)
DOMAIN_ERROR_STATUS: dict[type[DomainError], tuple[int, str]] = {
    CategoryNotFoundError: (status.HTTP_404_NOT_FOUND, "CATEGORY_NOT_FOUND"),
    CollectionUnresolvedError: (status.HTTP_404_NOT_FOUND, "COLLECTION_UNRESOLVED"),
    CollectionNotFoundError: (status.HTTP_404_NOT_FOUND, "COLLECTION_NOT_FOUND"),
    MalformedCategoryError: (status.HTTP_502_BAD_GATEWAY, "MALFORMED_CATEGORY"),
    CategoryDepthExceededError: (status.HTTP_502_BAD_GATEWAY, "CATEGORY_TOO_DEEP"),
}


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors to HTTP responses."""
    status_code, error_code = next(
        (
            mapping
            for error_type, mapping in DOMAIN_ERROR_STATUS.items()
            if isinstance(exc, error_type)
        ),
        (status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR"),
    )

    logger.warning(
        "Domain error",
        path=request.url.path,
        error_code=error_code,
        error=exc.message,
        **exc.details,
    )

    return error_response(
        request,
        status_code,
        error_code,
        exc.message,
        exc.error_details(),
    )


@app.exception_handler(StorefrontClientError)
async def storefront_exception_handler(
    request: Request, exc: StorefrontClientError
) -> JSONResponse:
    """Handle upstream storefront failures."""
    logger.error(
        "Storefront API error",
        path=request.url.path,
        upstream_status=exc.status_code,
        error=exc.message,
    )
    return error_response(
        request,
        status.HTTP_502_BAD_GATEWAY,
        "STOREFRONT_ERROR",
        "The storefront API could not be reached",
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )
