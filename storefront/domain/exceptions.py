"""Domain exceptions.

All domain-level errors raised while building category trees and
resolving product listings. The catalog core raises them and never
swallows them; the API layer decides the user-facing status.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def error_details(self) -> list[dict[str, str]]:
        """Get details in the API error envelope format.

        Returns:
            One entry per non-empty detail, keyed by field.
        """
        return [
            {"field": key, "message": str(value)}
            for key, value in self.details.items()
            if value is not None
        ]


# ============================================================================
# Category Errors
# ============================================================================


class CategoryError(DomainError):
    """Base class for category-related errors."""

    pass


class MalformedCategoryError(CategoryError):
    """Raised when a raw category record lacks a required identifier."""

    def __init__(self, field: str, record_id: str | None = None) -> None:
        """Initialize malformed category error.

        Args:
            field: Name of the missing field (``id`` or ``handle``).
            record_id: ID of the offending record, when known.
        """
        location = f" (record {record_id})" if record_id else ""
        super().__init__(
            f"Category record is missing required field '{field}'{location}",
            details={"field": field, "record_id": record_id},
        )
        self.field = field
        self.record_id = record_id

    def error_details(self) -> list[dict[str, str]]:
        return [{"field": self.field, "message": "missing"}]


class CategoryDepthExceededError(CategoryError):
    """Raised when a category record nests deeper than allowed."""

    def __init__(self, max_depth: int, handle: str | None = None) -> None:
        """Initialize depth exceeded error.

        Args:
            max_depth: Maximum nesting depth that was allowed.
            handle: Handle of the node where the limit was hit.
        """
        super().__init__(
            f"Category tree exceeds maximum depth of {max_depth}",
            details={"max_depth": max_depth, "handle": handle},
        )
        self.max_depth = max_depth


class CategoryNotFoundError(CategoryError):
    """Raised when no category exists for a handle."""

    def __init__(self, handle: str) -> None:
        """Initialize category not found error.

        Args:
            handle: Requested category handle.
        """
        super().__init__(
            f"Category {handle} not found",
            details={"handle": handle},
        )
        self.handle = handle


# ============================================================================
# Collection Errors
# ============================================================================


class CollectionError(DomainError):
    """Base class for collection-related errors."""

    pass


class CollectionUnresolvedError(CollectionError):
    """Raised when a product listing is requested for a category without a collection.

    Non-leaf categories usually have no directly browsable products. This
    is reported as "not found" instead of an empty listing so that
    misconfigured categories stay visible.
    """

    def __init__(self, category_handle: str) -> None:
        """Initialize collection unresolved error.

        Args:
            category_handle: Handle of the category with no linked collection.
        """
        super().__init__(
            f"Category {category_handle} has no linked collection",
            details={"category_handle": category_handle},
        )
        self.category_handle = category_handle


class CollectionNotFoundError(CollectionError):
    """Raised when the storefront has no collection for a handle."""

    def __init__(self, collection_handle: str) -> None:
        """Initialize collection not found error.

        Args:
            collection_handle: Requested collection handle.
        """
        super().__init__(
            f"Collection {collection_handle} not found",
            details={"collection_handle": collection_handle},
        )
        self.collection_handle = collection_handle
