"""Category API endpoints.

Provides the home page navigation and the filtered category page.
"""

from typing import Annotated, AsyncGenerator

from fastapi import APIRouter, Depends, Query, Request, status

from storefront.api.schemas import (
    CategoryListResponse,
    CategoryPageResponse,
    CategorySchema,
    CollectionSchema,
    ErrorResponse,
    ImageSchema,
    MoneySchema,
    PageInfoSchema,
    ProductSchema,
    ProductVariantSchema,
    SelectedOptionSchema,
)
from storefront.catalog.categories import Category
from storefront.catalog.models import Collection, Money, Product
from storefront.catalog.pagination import RESERVED_QUERY_PARAMS, PaginationParams
from storefront.catalog.service import CatalogService, CategoryListing
from storefront.infrastructure.config import settings
from storefront.infrastructure.storefront_client import StorefrontClient

router = APIRouter(prefix="/categories", tags=["Categories"])


# ============================================================================
# Dependencies
# ============================================================================


async def get_catalog_service(request: Request) -> AsyncGenerator[CatalogService, None]:
    """Get catalog service with a per-request storefront client."""
    request_id = getattr(request.state, "request_id", None)
    client = StorefrontClient(request_id=request_id)
    try:
        yield CatalogService(client)
    finally:
        await client.close()


# ============================================================================
# Converters
# ============================================================================


def money_to_schema(money: Money | None) -> MoneySchema | None:
    """Convert Money to schema."""
    if money is None:
        return None
    return MoneySchema(amount=str(money.amount), currency_code=money.currency_code)


def category_to_schema(category: Category) -> CategorySchema:
    """Convert Category tree to response schema."""
    image = category.image
    return CategorySchema(
        id=category.id,
        handle=category.handle,
        name=category.name,
        short_name=category.short_name,
        description=category.description,
        collection_handle=category.collection_handle,
        image=(
            ImageSchema(
                id=image.id,
                url=image.url,
                alt_text=image.alt_text,
                width=image.width,
                height=image.height,
            )
            if image
            else None
        ),
        sub_categories=[category_to_schema(c) for c in category.sub_categories],
    )


def product_to_schema(product: Product) -> ProductSchema:
    """Convert Product to response schema."""
    image = product.featured_image
    return ProductSchema(
        id=product.id,
        handle=product.handle,
        title=product.title,
        description_html=product.description_html,
        featured_image=(
            ImageSchema(
                id=image.id,
                url=image.url,
                alt_text=image.alt_text,
                width=image.width,
                height=image.height,
            )
            if image
            else None
        ),
        min_variant_price=money_to_schema(product.min_variant_price),
        max_variant_price=money_to_schema(product.max_variant_price),
        options=list(product.options),
        variants=[
            ProductVariantSchema(
                id=v.id,
                sku=v.sku,
                title=v.title,
                weight=v.weight,
                price=money_to_schema(v.price),
                selected_options=[
                    SelectedOptionSchema(name=o.name, value=o.value)
                    for o in v.selected_options
                ],
            )
            for v in product.variants
        ],
    )


def collection_to_schema(collection: Collection) -> CollectionSchema:
    """Convert Collection to response schema."""
    page_info = collection.page_info
    return CollectionSchema(
        id=collection.id,
        handle=collection.handle,
        title=collection.title,
        description=collection.description,
        products=[product_to_schema(p) for p in collection.products],
        page_info=PageInfoSchema(
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        ),
    )


def listing_to_response(listing: CategoryListing) -> CategoryPageResponse:
    """Convert CategoryListing to response schema."""
    return CategoryPageResponse(
        selected_category=category_to_schema(listing.category),
        top_level_categories=[
            category_to_schema(c) for c in listing.top_level_categories
        ],
        collection=collection_to_schema(listing.collection),
        product_options=listing.option_inventory,
        selected_filters=listing.selection.to_dict(),
        unfiltered_count=listing.unfiltered_count,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CategoryListResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="List top-level categories",
    description="Get the children of the root category for navigation.",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CategoryListResponse:
    """List top-level categories.

    Args:
        service: Catalog service.

    Returns:
        Top-level categories with their sub-categories.
    """
    categories = await service.get_top_level_categories()
    return CategoryListResponse(
        categories=[category_to_schema(c) for c in categories],
        total=len(categories),
    )


@router.get(
    "/{handle}",
    response_model=CategoryPageResponse,
    responses={
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Get category page",
    description=(
        "Get a category with its filtered product collection. Every query "
        "parameter other than 'cursor' and 'direction' is a filter, e.g. "
        "?Size=10mm&Size=12mm&Color=Red."
    ),
)
async def get_category(
    handle: str,
    request: Request,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    cursor: Annotated[str | None, Query(description="Pagination cursor")] = None,
    direction: Annotated[
        str | None, Query(description="'previous' to page backwards")
    ] = None,
) -> CategoryPageResponse:
    """Get a category page.

    Args:
        handle: Category handle.
        request: Incoming request, for the multi-valued filter parameters.
        service: Catalog service.
        cursor: Pagination cursor.
        direction: Pagination direction.

    Returns:
        Category page data.
    """
    filter_pairs = [
        (name, value)
        for name, value in request.query_params.multi_items()
        if name not in RESERVED_QUERY_PARAMS
    ]
    pagination = PaginationParams.from_query(
        cursor=cursor,
        direction=direction,
        page_by=settings.collection_page_size,
    )

    listing = await service.browse_category(handle, filter_pairs, pagination)
    return listing_to_response(listing)
