"""Domain layer.

Contains the exception hierarchy shared by the catalog core,
the storefront client and the API layer.
"""

from storefront.domain.exceptions import (
    CategoryDepthExceededError,
    CategoryError,
    CategoryNotFoundError,
    CollectionError,
    CollectionNotFoundError,
    CollectionUnresolvedError,
    DomainError,
    MalformedCategoryError,
)

__all__ = [
    "DomainError",
    # Category errors
    "CategoryError",
    "CategoryDepthExceededError",
    "CategoryNotFoundError",
    "MalformedCategoryError",
    # Collection errors
    "CollectionError",
    "CollectionNotFoundError",
    "CollectionUnresolvedError",
]
