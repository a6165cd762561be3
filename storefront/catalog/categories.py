"""Category tree normalization.

Categories are stored in the storefront as metaobjects that reference
their children through a ``children_categories`` list field. The GraphQL
client returns them as a nested record:

    {
        "id": "gid://shopify/Metaobject/1",
        "handle": "fasteners",
        "name": {"value": "Hardware > Fasteners"},
        "description": {"value": "..."},
        "image": {"reference": {"image": {"id": ..., "url": ...}}},
        "collection": {"reference": {"handle": "fasteners"}},
        "subCategories": {"references": {"nodes": [...]}},
    }

This module turns such a record into an immutable ``Category`` tree.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator

from storefront.domain.exceptions import (
    CategoryDepthExceededError,
    MalformedCategoryError,
)

# Separator used in category names, e.g. "Hardware > Fasteners"
NAME_SEPARATOR = ">"

DEFAULT_MAX_DEPTH = 16


@dataclass(frozen=True)
class CategoryImage:
    """Image attached to a category.

    Attributes:
        id: Image identifier.
        url: Image URL.
        alt_text: Alternative text.
        width: Width in pixels.
        height: Height in pixels.
    """

    id: str | None
    url: str
    alt_text: str | None = None
    width: int | None = None
    height: int | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "CategoryImage":
        """Create from storefront image data."""
        return cls(
            id=data.get("id"),
            url=data.get("url") or "",
            alt_text=data.get("altText"),
            width=data.get("width"),
            height=data.get("height"),
        )


@dataclass(frozen=True)
class Category:
    """A node in the category tree.

    Attributes:
        id: Metaobject ID.
        handle: Slug used to address the category.
        name: Display name, conventionally "Parent > Child".
        description: Rich or plain text description.
        collection_handle: Handle of the linked product collection, if any.
        image: Category image, if any.
        sub_categories: Child categories in source order.
    """

    id: str
    handle: str
    name: str | None = None
    description: str = ""
    collection_handle: str | None = None
    image: CategoryImage | None = None
    sub_categories: tuple["Category", ...] = field(default=(), repr=False)

    @property
    def path_parts(self) -> list[str]:
        """Get list of name components.

        Returns:
            Name segments from root to this category, empty if unnamed.
        """
        if not self.name:
            return []
        return [part.strip() for part in self.name.split(NAME_SEPARATOR)]

    @property
    def short_name(self) -> str | None:
        """Last segment of the name, as shown on sub-category tiles."""
        parts = self.path_parts
        return parts[-1] if parts else None

    @property
    def is_leaf(self) -> bool:
        """Whether the category has no children."""
        return not self.sub_categories

    def walk(self) -> Iterator["Category"]:
        """Iterate over this category and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.sub_categories))

    def find(self, handle: str) -> "Category | None":
        """Find the first category with the given handle.

        Args:
            handle: Category handle.

        Returns:
            Matching category, None if not in this tree.
        """
        return next((c for c in self.walk() if c.handle == handle), None)


def _field_value(raw: dict[str, Any], key: str) -> Any:
    """Get ``value`` of a metaobject field, None when absent."""
    node = raw.get(key) or {}
    return node.get("value")


def _reference(raw: dict[str, Any], key: str) -> dict[str, Any]:
    """Get ``reference`` of a metaobject field, empty when absent."""
    node = raw.get(key) or {}
    return node.get("reference") or {}


def _child_nodes(raw: dict[str, Any]) -> list[dict[str, Any]]:
    """Get raw child category records in source order."""
    field_node = raw.get("subCategories") or {}
    references = field_node.get("references") or {}
    return references.get("nodes") or []


def normalize_category(
    raw: dict[str, Any],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Category:
    """Build a ``Category`` tree from a raw metaobject record.

    Optional fields default when absent: name to None, description to
    an empty string, image and collection to None, children to an empty
    tuple. Children keep their source order.

    Args:
        raw: Nested category record from the storefront API.
        max_depth: Maximum nesting depth, the root being depth 1.

    Returns:
        Normalized category tree.

    Raises:
        MalformedCategoryError: If a record lacks ``id`` or ``handle``.
        CategoryDepthExceededError: If nesting exceeds ``max_depth``.
    """
    return _normalize(raw, depth=1, max_depth=max_depth)


def _normalize(raw: dict[str, Any], depth: int, max_depth: int) -> Category:
    record_id = raw.get("id")
    if not record_id:
        raise MalformedCategoryError("id")
    handle = raw.get("handle")
    if not handle:
        raise MalformedCategoryError("handle", record_id=record_id)

    children = _child_nodes(raw)
    if children and depth >= max_depth:
        raise CategoryDepthExceededError(max_depth, handle=handle)

    image_data = _reference(raw, "image").get("image")

    return Category(
        id=record_id,
        handle=handle,
        name=_field_value(raw, "name"),
        description=_field_value(raw, "description") or "",
        collection_handle=_reference(raw, "collection").get("handle"),
        image=CategoryImage.from_api_response(image_data) if image_data else None,
        sub_categories=tuple(
            _normalize(child, depth + 1, max_depth) for child in children
        ),
    )
