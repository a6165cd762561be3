"""Cursor pagination for collection product pages."""

from dataclasses import dataclass
from typing import Any

# Storefront connections return at most 250 nodes per page
MAX_PAGE_SIZE = 250

# Query parameters consumed by pagination, never treated as filters
RESERVED_QUERY_PARAMS = frozenset({"cursor", "direction"})


@dataclass(frozen=True)
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page_by: Items per page.
        cursor: Cursor to continue from, None for the first page.
        backward: Whether to page backwards from the cursor.
    """

    page_by: int = 50
    cursor: str | None = None
    backward: bool = False

    @classmethod
    def from_query(
        cls,
        cursor: str | None = None,
        direction: str | None = None,
        page_by: int = 50,
    ) -> "PaginationParams":
        """Build from ``cursor`` and ``direction`` query parameters.

        Args:
            cursor: Cursor from a previous page.
            direction: "previous" to page backwards, anything else forwards.
            page_by: Items per page, capped at ``MAX_PAGE_SIZE``.

        Returns:
            Pagination parameters.
        """
        return cls(
            page_by=max(1, min(page_by, MAX_PAGE_SIZE)),
            cursor=cursor or None,
            backward=direction == "previous",
        )

    def to_variables(self) -> dict[str, Any]:
        """Get GraphQL connection variables.

        Returns:
            ``first``/``endCursor`` when paging forwards,
            ``last``/``startCursor`` when paging backwards.
        """
        if self.backward:
            return {"last": self.page_by, "startCursor": self.cursor}
        return {"first": self.page_by, "endCursor": self.cursor}
