"""Product Catalog Service.

Provides category tree normalization, product models and facet
filtering over storefront collections.
"""

from storefront.catalog.categories import Category, CategoryImage, normalize_category
from storefront.catalog.filters import (
    FilterSelection,
    OptionInventory,
    build_option_inventory,
    filter_products,
    parse_filter_selection,
)
from storefront.catalog.models import (
    Collection,
    Image,
    Money,
    PageInfo,
    Product,
    ProductVariant,
    SelectedOption,
)
from storefront.catalog.pagination import PaginationParams
from storefront.catalog.service import CatalogService, CategoryListing

__all__ = [
    # Categories
    "Category",
    "CategoryImage",
    "normalize_category",
    # Models
    "Collection",
    "Image",
    "Money",
    "PageInfo",
    "Product",
    "ProductVariant",
    "SelectedOption",
    # Filtering
    "FilterSelection",
    "OptionInventory",
    "build_option_inventory",
    "filter_products",
    "parse_filter_selection",
    # Service
    "CatalogService",
    "CategoryListing",
    "PaginationParams",
]
