"""Catalog models for products and collections.

Immutable representations of the storefront's collection, product and
variant records. Filtering returns shallow copies of these objects, so
the same unfiltered list can be reused within a request.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Money:
    """Monetary amount as reported by the storefront.

    Attributes:
        amount: Amount in major currency units.
        currency_code: ISO currency code.
    """

    amount: Decimal
    currency_code: str = "USD"

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Money":
        """Create from a ``MoneyV2`` record."""
        return cls(
            amount=Decimal(str(data.get("amount", "0"))),
            currency_code=data.get("currencyCode", "USD"),
        )


@dataclass(frozen=True)
class Image:
    """Product image."""

    url: str
    id: str | None = None
    alt_text: str | None = None
    width: int | None = None
    height: int | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Image":
        """Create from storefront image data."""
        return cls(
            url=data.get("url") or "",
            id=data.get("id"),
            alt_text=data.get("altText"),
            width=data.get("width"),
            height=data.get("height"),
        )


@dataclass(frozen=True)
class SelectedOption:
    """A variant's value for one product option (e.g. Size = 10mm)."""

    name: str
    value: str


@dataclass(frozen=True)
class ProductVariant:
    """One purchasable combination of option values.

    ``selected_options`` is positionally parallel to the owning
    product's ``options``.

    Attributes:
        id: Variant identifier.
        selected_options: Option values in the product's option order.
        price: Variant price.
        sku: Stock Keeping Unit.
        title: Variant title (model).
        weight: Net weight.
    """

    id: str
    selected_options: tuple[SelectedOption, ...] = ()
    price: Money | None = None
    sku: str | None = None
    title: str = ""
    weight: float | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "ProductVariant":
        """Create from a storefront variant record."""
        price_data = data.get("price")
        return cls(
            id=data["id"],
            selected_options=tuple(
                SelectedOption(name=o["name"], value=o["value"])
                for o in data.get("selectedOptions") or []
            ),
            price=Money.from_api_response(price_data) if price_data else None,
            sku=data.get("sku"),
            title=data.get("title") or "",
            weight=data.get("weight"),
        )

    @property
    def option_values(self) -> dict[str, str]:
        """Get selected option values keyed by option name."""
        return {o.name: o.value for o in self.selected_options}


@dataclass(frozen=True)
class Product:
    """A product and its variants.

    Attributes:
        id: Product identifier.
        handle: Product slug.
        title: Product title.
        description_html: Description as HTML.
        options: Declared option names, in order (e.g. ("Size", "Color")).
        variants: Variants in source order.
        featured_image: Main product image.
        min_variant_price: Lowest variant price.
        max_variant_price: Highest variant price.
    """

    id: str
    handle: str
    title: str = ""
    description_html: str = ""
    options: tuple[str, ...] = ()
    variants: tuple[ProductVariant, ...] = field(default=(), repr=False)
    featured_image: Image | None = None
    min_variant_price: Money | None = None
    max_variant_price: Money | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Product":
        """Create from a storefront product record."""
        image_data = data.get("featuredImage")
        price_range = data.get("priceRange") or {}
        min_price = price_range.get("minVariantPrice")
        max_price = price_range.get("maxVariantPrice")
        variants = (data.get("variants") or {}).get("nodes") or []
        return cls(
            id=data["id"],
            handle=data["handle"],
            title=data.get("title") or "",
            description_html=data.get("descriptionHtml") or "",
            options=tuple(o["name"] for o in data.get("options") or []),
            variants=tuple(ProductVariant.from_api_response(v) for v in variants),
            featured_image=Image.from_api_response(image_data) if image_data else None,
            min_variant_price=Money.from_api_response(min_price) if min_price else None,
            max_variant_price=Money.from_api_response(max_price) if max_price else None,
        )


@dataclass(frozen=True)
class PageInfo:
    """Cursor pagination state of a product connection."""

    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "PageInfo":
        """Create from a ``PageInfo`` record."""
        return cls(
            has_next_page=bool(data.get("hasNextPage")),
            has_previous_page=bool(data.get("hasPreviousPage")),
            start_cursor=data.get("startCursor"),
            end_cursor=data.get("endCursor"),
        )


@dataclass(frozen=True)
class Collection:
    """A page of a product collection.

    Attributes:
        id: Collection identifier.
        handle: Collection slug.
        title: Collection title.
        description: Plain text description.
        products: Products on this page.
        page_info: Pagination state.
    """

    id: str
    handle: str
    title: str = ""
    description: str = ""
    products: tuple[Product, ...] = field(default=(), repr=False)
    page_info: PageInfo = field(default_factory=PageInfo)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "Collection":
        """Create from a storefront collection record."""
        products = data.get("products") or {}
        return cls(
            id=data["id"],
            handle=data["handle"],
            title=data.get("title") or "",
            description=data.get("description") or "",
            products=tuple(
                Product.from_api_response(p) for p in products.get("nodes") or []
            ),
            page_info=PageInfo.from_api_response(products.get("pageInfo") or {}),
        )
