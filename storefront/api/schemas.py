"""API schemas for the storefront catalog API.

Pydantic models for response validation and serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class ImageSchema(BaseModel):
    """Image reference."""

    id: str | None = None
    url: str
    alt_text: str | None = None
    width: int | None = None
    height: int | None = None


class MoneySchema(BaseModel):
    """Monetary amount."""

    amount: str = Field(..., description="Decimal amount in major currency units")
    currency_code: str = Field(..., description="ISO currency code")


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """A category and its sub-categories."""

    id: str = Field(..., description="Metaobject identifier")
    handle: str = Field(..., description="Slug used in category URLs")
    name: str | None = Field(default=None, description="Full name, e.g. 'Hardware > Fasteners'")
    short_name: str | None = Field(default=None, description="Last segment of the name")
    description: str = Field(default="", description="Category description")
    collection_handle: str | None = Field(
        default=None, description="Linked collection, null for non-leaf categories"
    )
    image: ImageSchema | None = None
    sub_categories: list[CategorySchema] = Field(default_factory=list)


class CategoryListResponse(BaseModel):
    """Top-level categories for navigation."""

    categories: list[CategorySchema]
    total: int


# ============================================================================
# Product Schemas
# ============================================================================


class SelectedOptionSchema(BaseModel):
    """A variant's value for one option."""

    name: str
    value: str


class ProductVariantSchema(BaseModel):
    """Product variant."""

    id: str
    sku: str | None = None
    title: str = ""
    weight: float | None = None
    price: MoneySchema | None = None
    selected_options: list[SelectedOptionSchema] = Field(default_factory=list)


class ProductSchema(BaseModel):
    """Product with its matching variants."""

    id: str
    handle: str
    title: str
    description_html: str = ""
    featured_image: ImageSchema | None = None
    min_variant_price: MoneySchema | None = None
    max_variant_price: MoneySchema | None = None
    options: list[str] = Field(default_factory=list, description="Option names in order")
    variants: list[ProductVariantSchema] = Field(default_factory=list)


class PageInfoSchema(BaseModel):
    """Cursor pagination state."""

    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None = None
    end_cursor: str | None = None


class CollectionSchema(BaseModel):
    """A page of a collection, holding only filtered products."""

    id: str
    handle: str
    title: str
    description: str = ""
    products: list[ProductSchema]
    page_info: PageInfoSchema


class CategoryPageResponse(BaseModel):
    """Everything needed to render a category page.

    ``product_options`` and ``selected_filters`` are keyed by the same
    option names.
    """

    selected_category: CategorySchema
    top_level_categories: list[CategorySchema]
    collection: CollectionSchema
    product_options: dict[str, list[str]] = Field(
        ..., description="All option values of the unfiltered collection"
    )
    selected_filters: dict[str, list[str]] = Field(
        ..., description="Active filter selection"
    )
    unfiltered_count: int = Field(..., description="Products on this page before filtering")
