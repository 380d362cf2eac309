"""MongoDB filter builder for named query listing.

Constructs a filter document from optional list parameters. Each added
criterion lands on its own key of the filter document, so MongoDB ANDs
them together. Search text is escaped before it is used in a regex, so it
always matches as a literal substring.
"""

import re
from typing import Any


class NamedQueryFilterBuilder:
    """Build a MongoDB filter document from list parameters.

    Usage::

        query_filter = (
            NamedQueryFilterBuilder()
            .add_tags(tags)
            .add_categories(categories)
            .add_search(search)
            .build()
        )
    """

    # Fixed listing order: newest first, _id breaks ties between equal timestamps
    SORT = [("createdAt", -1), ("_id", -1)]

    def __init__(self) -> None:
        self.conditions: dict[str, Any] = {}

    @staticmethod
    def _clean(values: list[str] | None) -> list[str]:
        return [v for v in (values or []) if v]

    def add_tags(self, tags: list[str] | None) -> "NamedQueryFilterBuilder":
        """Match queries having ANY of the given tags (OR logic)."""
        tags = self._clean(tags)
        if tags:
            self.conditions["tags"] = {"$in": tags}
        return self

    def add_categories(
        self, categories: list[str] | None
    ) -> "NamedQueryFilterBuilder":
        """Match queries in ANY of the given categories (OR logic)."""
        categories = self._clean(categories)
        if categories:
            self.conditions["categories"] = {"$in": categories}
        return self

    def add_search(self, search: str | None) -> "NamedQueryFilterBuilder":
        """Case-insensitive substring match on name or description."""
        if search:
            pattern = {"$regex": re.escape(search), "$options": "i"}
            self.conditions["$or"] = [
                {"name": pattern},
                {"description": pattern},
            ]
        return self

    def build(self) -> dict[str, Any]:
        """Return the filter document; empty when nothing was added."""
        return dict(self.conditions)


def build_query_filter(
    tags: list[str] | None = None,
    categories: list[str] | None = None,
    search: str | None = None,
) -> dict[str, Any]:
    """Build the list filter for the given request parameters."""
    return (
        NamedQueryFilterBuilder()
        .add_tags(tags)
        .add_categories(categories)
        .add_search(search)
        .build()
    )
