"""Catalog service for category pages.

High-level service that combines storefront fetches with category
normalization and facet filtering for a single request.
"""

import asyncio
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable

import structlog

from storefront.catalog.categories import Category, normalize_category
from storefront.catalog.filters import (
    FilterSelection,
    OptionInventory,
    build_option_inventory,
    filter_products,
    parse_filter_selection,
)
from storefront.catalog.models import Collection
from storefront.catalog.pagination import PaginationParams
from storefront.domain.exceptions import (
    CategoryNotFoundError,
    CollectionNotFoundError,
    CollectionUnresolvedError,
)
from storefront.infrastructure.config import settings

if TYPE_CHECKING:
    from storefront.infrastructure.storefront_client import StorefrontClient

logger = structlog.get_logger()


@dataclass(frozen=True)
class CategoryListing:
    """Everything a category page renders.

    Attributes:
        category: The requested category tree.
        top_level_categories: Children of the root category, for navigation.
        collection: The linked collection, holding only the filtered products.
        option_inventory: All option values of the unfiltered collection.
        selection: The active filter selection.
        unfiltered_count: Number of products before filtering.
    """

    category: Category
    top_level_categories: tuple[Category, ...]
    collection: Collection
    option_inventory: OptionInventory
    selection: FilterSelection
    unfiltered_count: int


class CatalogService:
    """Service for category navigation and product listings.

    Example usage:
        client = StorefrontClient(request_id=request_id)
        service = CatalogService(client)

        listing = await service.browse_category(
            "fasteners",
            [("Size", "10mm"), ("Size", "12mm")],
        )
    """

    def __init__(
        self,
        client: "StorefrontClient",
        root_handle: str | None = None,
        max_depth: int | None = None,
    ) -> None:
        """Initialize service with a storefront client.

        Args:
            client: Storefront GraphQL client.
            root_handle: Handle of the root category.
            max_depth: Maximum category tree depth.
        """
        self.client = client
        self.root_handle = (
            root_handle if root_handle is not None else settings.root_category_handle
        )
        self.max_depth = max_depth if max_depth is not None else settings.category_max_depth

    async def get_top_level_categories(self) -> list[Category]:
        """Get the children of the root category.

        Returns:
            Top-level categories with their sub-categories.

        Raises:
            CategoryNotFoundError: If the root category does not exist.
        """
        raw_root = await self.client.fetch_category(self.root_handle)
        if raw_root is None:
            raise CategoryNotFoundError(self.root_handle)

        root = normalize_category(raw_root, max_depth=self.max_depth)
        return list(root.sub_categories)

    async def browse_category(
        self,
        handle: str,
        query_pairs: Iterable[tuple[str, str]] = (),
        pagination: PaginationParams | None = None,
    ) -> CategoryListing:
        """Build the listing for a category page.

        The option inventory is computed from the unfiltered collection
        before filtering, so every choice stays visible.

        Args:
            handle: Category handle.
            query_pairs: Filter ``(name, value)`` pairs.
            pagination: Collection page to load.

        Returns:
            Category listing.

        Raises:
            CategoryNotFoundError: If the category or root does not exist.
            CollectionUnresolvedError: If the category has no collection.
            CollectionNotFoundError: If the linked collection does not exist.
            MalformedCategoryError: If a category record lacks an identifier.
        """
        raw_category, raw_root = await asyncio.gather(
            self.client.fetch_category(handle),
            self.client.fetch_category(self.root_handle),
        )
        if raw_category is None:
            raise CategoryNotFoundError(handle)
        if raw_root is None:
            raise CategoryNotFoundError(self.root_handle)

        category = normalize_category(raw_category, max_depth=self.max_depth)
        root = normalize_category(raw_root, max_depth=self.max_depth)

        if category.collection_handle is None:
            logger.warning("Category has no linked collection", handle=handle)
            raise CollectionUnresolvedError(handle)

        pagination = pagination or PaginationParams(page_by=settings.collection_page_size)
        raw_collection = await self.client.fetch_collection(
            category.collection_handle, pagination
        )
        if raw_collection is None:
            raise CollectionNotFoundError(category.collection_handle)

        collection = Collection.from_api_response(raw_collection)
        selection = parse_filter_selection(query_pairs)
        option_inventory = build_option_inventory(collection.products)
        filtered = filter_products(collection.products, selection)

        logger.info(
            "Category listing built",
            handle=handle,
            collection_handle=collection.handle,
            product_count=len(collection.products),
            filtered_count=len(filtered),
            filters=selection.to_dict(),
        )

        return CategoryListing(
            category=category,
            top_level_categories=root.sub_categories,
            collection=replace(collection, products=tuple(filtered)),
            option_inventory=option_inventory,
            selection=selection,
            unfiltered_count=len(collection.products),
        )
