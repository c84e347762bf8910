"""Taxonomy lookup interface.

The host content store seen from the augmenters. Implementations raise
TaxonomyLookupError for every failure so callers have one thing to catch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.common.models import Category, ContentItem, ContentQuery, ContentType, Taxonomy


class TaxonomyLookupError(RuntimeError):
    """Raised when the content/taxonomy store cannot answer a lookup."""


class TaxonomyLookup(ABC):
    """Abstract read-only access to categories and categorised content."""

    @abstractmethod
    def get_categories_for(
        self,
        content_id: int,
        taxonomy: Taxonomy,
    ) -> list[Category]:
        """Categories assigned to a content item, in assignment order."""
        ...

    @abstractmethod
    def get_all_categories(
        self,
        taxonomy: Taxonomy,
        non_empty_only: bool = False,
    ) -> list[Category]:
        """Every category of a taxonomy.

        Args:
            taxonomy: Taxonomy to list
            non_empty_only: Skip categories with no published items
        """
        ...

    @abstractmethod
    def find_content(self, query: ContentQuery) -> list[ContentItem]:
        """Content matching any of the query's slugs, at most query.limit items."""
        ...

    @abstractmethod
    def get_content(
        self,
        content_id: int,
        content_type: ContentType,
    ) -> ContentItem | None:
        """A single content item, or None when it does not exist."""
        ...

    def get_category_link(self, category: Category) -> str:
        """Archive URL of a category.

        Raises:
            TaxonomyLookupError: If the category carries no link
        """
        if not category.link:
            raise TaxonomyLookupError(
                f"No archive link for {category.taxonomy.value}:{category.slug}"
            )
        return category.link

    def close(self) -> None:
        """Release any resources held by the lookup."""
