"""API middleware for the storefront catalog.

Provides:
- Request context (request ID, category handle, active filter names)
- The JSON error envelope shared with the exception handlers
"""

import time
from typing import Any, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from storefront.catalog.pagination import RESERVED_QUERY_PARAMS

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"
CATEGORY_PATH_PREFIX = "/categories/"


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build an error response in the standard envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


def category_handle_from_path(path: str) -> str | None:
    """Extract the category handle from a category page path.

    Args:
        path: Request path, e.g. ``/categories/bolts``.

    Returns:
        The handle, or None for any other path.
    """
    if not path.startswith(CATEGORY_PATH_PREFIX):
        return None
    handle = path[len(CATEGORY_PATH_PREFIX):].strip("/")
    return handle or None


def filter_names(request: Request) -> list[str]:
    """Get the option names filtered on, excluding pagination parameters."""
    return sorted(set(request.query_params) - RESERVED_QUERY_PARAMS)


# ============================================================================
# Request Context Middleware
# ============================================================================


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that binds per-request log context.

    The request ID is taken from ``X-Request-ID`` or generated, stored on
    ``request.state`` and echoed in the response. Category page requests
    also bind the category handle, so storefront client and service logs
    for one page share it.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with bound log context.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        context = {"request_id": request_id}
        handle = category_handle_from_path(request.url.path)
        if handle:
            context["category_handle"] = handle
        structlog.contextvars.bind_contextvars(**context)
        start_time = time.perf_counter()

        response = None
        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                filters=filter_names(request) if handle else [],
                status_code=getattr(response, "status_code", 500),
                duration_ms=round(duration_ms, 2),
            )
            structlog.contextvars.unbind_contextvars(*context)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns exceptions that escape the routers into INTERNAL_ERROR envelopes."""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (innermost, wraps the routers)
    app.add_middleware(ErrorHandlerMiddleware)

    # Request context (outermost, also tags error responses)
    app.add_middleware(RequestContextMiddleware)
