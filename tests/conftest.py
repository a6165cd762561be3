"""Shared fixtures and raw storefront record builders."""

from typing import Any

import pytest

from storefront.catalog.models import Product


def raw_category(
    handle: str,
    name: str | None = None,
    collection: str | None = None,
    children: list[dict[str, Any]] | None = None,
    record_id: str | None = None,
    description: str | None = None,
    image: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a raw category metaobject record as returned by the storefront."""
    raw: dict[str, Any] = {
        "id": record_id or f"gid://shopify/Metaobject/{handle}",
        "handle": handle,
        "name": {"value": name} if name is not None else None,
        "collection": {"reference": {"handle": collection}} if collection else None,
    }
    if description is not None:
        raw["description"] = {"value": description}
    if image is not None:
        raw["image"] = {"reference": {"image": image}}
    if children is not None:
        raw["subCategories"] = {"references": {"nodes": children}}
    return raw


def raw_product(
    handle: str,
    options: list[str],
    variants: list[list[str]],
) -> dict[str, Any]:
    """Build a raw product record.

    Args:
        handle: Product handle.
        options: Option names, e.g. ["Size", "Color"].
        variants: One list of values per variant, parallel to ``options``.
    """
    return {
        "id": f"gid://shopify/Product/{handle}",
        "handle": handle,
        "title": handle.replace("-", " ").title(),
        "descriptionHtml": f"<p>{handle}</p>",
        "featuredImage": None,
        "priceRange": {
            "minVariantPrice": {"amount": "1.50", "currencyCode": "USD"},
            "maxVariantPrice": {"amount": "3.00", "currencyCode": "USD"},
        },
        "options": [{"name": name} for name in options],
        "variants": {
            "nodes": [
                {
                    "id": f"gid://shopify/ProductVariant/{handle}-{index}",
                    "sku": f"{handle.upper()}-{index}",
                    "title": " / ".join(values),
                    "weight": 0.25,
                    "price": {"amount": "1.50", "currencyCode": "USD"},
                    "selectedOptions": [
                        {"name": name, "value": value}
                        for name, value in zip(options, values)
                    ],
                }
                for index, values in enumerate(variants)
            ]
        },
    }


def raw_collection(handle: str, products: list[dict[str, Any]]) -> dict[str, Any]:
    """Build a raw collection page record."""
    return {
        "id": f"gid://shopify/Collection/{handle}",
        "handle": handle,
        "title": handle.title(),
        "description": f"All {handle}",
        "products": {
            "nodes": products,
            "pageInfo": {
                "hasPreviousPage": False,
                "hasNextPage": True,
                "startCursor": "start",
                "endCursor": "end",
            },
        },
    }


@pytest.fixture
def root_record() -> dict[str, Any]:
    """Root category with two levels of children."""
    return raw_category(
        "hardware",
        name="Hardware",
        children=[
            raw_category(
                "fasteners",
                name="Hardware > Fasteners",
                children=[
                    raw_category(
                        "bolts",
                        name="Hardware > Fasteners > Bolts",
                        collection="bolts",
                        children=[],
                    ),
                    raw_category(
                        "screws",
                        name="Hardware > Fasteners > Screws",
                        collection="screws",
                    ),
                ],
            ),
            raw_category(
                "tools",
                name="Hardware > Tools",
                collection="tools",
                children=[],
            ),
        ],
    )


@pytest.fixture
def raw_products() -> list[dict[str, Any]]:
    """Bolts with Size/Color variants plus a washer with only a Size."""
    return [
        raw_product(
            "hex-bolt",
            ["Size", "Color"],
            [["10mm", "Red"], ["12mm", "Red"], ["10mm", "Blue"]],
        ),
        raw_product(
            "carriage-bolt",
            ["Size", "Color"],
            [["12mm", "Black"], ["14mm", "Black"]],
        ),
        raw_product("flat-washer", ["Size"], [["10mm"], ["16mm"]]),
    ]


@pytest.fixture
def products(raw_products: list[dict[str, Any]]) -> list[Product]:
    """Loaded products."""
    return [Product.from_api_response(p) for p in raw_products]


@pytest.fixture
def build_category():
    """Factory for raw category records."""
    return raw_category


@pytest.fixture
def build_product():
    """Factory for raw product records."""
    return raw_product


@pytest.fixture
def build_collection():
    """Factory for raw collection records."""
    return raw_collection
