"""In-memory taxonomy store.

Holds categories, content items and category assignments in process. Used
for fixtures, tests and the CLI when rendering from a JSON site export.

Usage:
    store = InMemoryTaxonomyStore(site_url="https://shop.example")
    store.add_category(Category(slug="vases", name="Vases", taxonomy=Taxonomy.POST_CATEGORY))
    store.add_content(post, categories={Taxonomy.POST_CATEGORY: ["vases"]})
    posts = store.find_content(ContentQuery(category_slugs=["vases"]))
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.common.logging import setup_logging
from src.common.models import (
    Category,
    ContentItem,
    ContentQuery,
    ContentType,
    PostStatus,
    Taxonomy,
)

from .lookup import TaxonomyLookup

logger = setup_logging(module_name="category_linker.taxonomy.memory_store")

# Default permalink bases for term archives
ARCHIVE_BASES = {
    Taxonomy.PRODUCT_CATEGORY: "product-category",
    Taxonomy.POST_CATEGORY: "category",
}


class InMemoryTaxonomyStore(TaxonomyLookup):
    """Taxonomy lookup backed by plain dictionaries.

    Categories are returned in insertion order and assignments in the
    order they were made. Term counts are derived from published items.
    """

    def __init__(self, site_url: str = ""):
        self.site_url = site_url.rstrip("/")
        self._categories: dict[Taxonomy, dict[str, Category]] = {
            taxonomy: {} for taxonomy in Taxonomy
        }
        self._items: dict[int, ContentItem] = {}
        self._assignments: dict[tuple[int, Taxonomy], list[str]] = {}

    @property
    def content_count(self) -> int:
        """Number of stored content items."""
        return len(self._items)

    # --- Population ---

    def add_category(self, category: Category) -> Category:
        """Register a category under its taxonomy, replacing one with the same slug."""
        self._categories[category.taxonomy][category.slug] = category
        return category

    def add_content(
        self,
        item: ContentItem,
        categories: dict[Taxonomy, list[str]] | None = None,
    ) -> ContentItem:
        """Store a content item and optionally assign its categories."""
        self._items[item.id] = item
        for taxonomy, slugs in (categories or {}).items():
            self.assign(item.id, taxonomy, slugs)
        return item

    def assign(self, content_id: int, taxonomy: Taxonomy, slugs: list[str]) -> None:
        """Assign categories to a stored content item.

        Raises:
            ValueError: If the item or a slug is unknown
        """
        if content_id not in self._items:
            raise ValueError(f"Unknown content id {content_id}")
        known = self._categories[taxonomy]
        missing = [slug for slug in slugs if slug not in known]
        if missing:
            raise ValueError(
                f"Unknown {taxonomy.value} slugs for content {content_id}: {missing}"
            )
        self._assignments[(content_id, taxonomy)] = list(slugs)

    # --- TaxonomyLookup ---

    def get_categories_for(self, content_id: int, taxonomy: Taxonomy) -> list[Category]:
        slugs = self._assignments.get((content_id, taxonomy), [])
        known = self._categories[taxonomy]
        return [self._with_count(known[slug]) for slug in slugs]

    def get_all_categories(
        self,
        taxonomy: Taxonomy,
        non_empty_only: bool = False,
    ) -> list[Category]:
        categories = [self._with_count(c) for c in self._categories[taxonomy].values()]
        if non_empty_only:
            categories = [c for c in categories if c.count > 0]
        return categories

    def find_content(self, query: ContentQuery) -> list[ContentItem]:
        wanted = set(query.category_slugs)
        matches = [
            item
            for item in self._items.values()
            if item.content_type == query.content_type
            and item.status == query.status
            and wanted.intersection(
                self._assignments.get((item.id, query.taxonomy), [])
            )
        ]
        # Newest first, undated last; ties keep insertion order
        dated = [m for m in matches if m.published_at is not None]
        undated = [m for m in matches if m.published_at is None]
        dated.sort(key=lambda item: item.published_at, reverse=True)
        return (dated + undated)[: query.limit]

    def get_content(self, content_id: int, content_type: ContentType) -> ContentItem | None:
        item = self._items.get(content_id)
        if item is None or item.content_type != content_type:
            return None
        return item

    def get_category_link(self, category: Category) -> str:
        if category.link:
            return category.link
        return f"{self.site_url}/{ARCHIVE_BASES[category.taxonomy]}/{category.slug}/"

    # --- Helpers ---

    def _with_count(self, category: Category) -> Category:
        count = sum(
            1
            for (content_id, taxonomy), slugs in self._assignments.items()
            if taxonomy == category.taxonomy
            and category.slug in slugs
            and self._items[content_id].status == PostStatus.PUBLISH
        )
        return category.model_copy(update={"count": count})

    # --- Loading ---

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InMemoryTaxonomyStore:
        """Build a store from a site export dictionary.

        Expected shape:
            {"site_url": "...",
             "categories": {"product_cat": [{"slug", "name"}], "category": [...]},
             "content": [{"id", "title", "permalink", "type", "status",
                          "published_at", "categories": {"category": [...]}}]}
        """
        store = cls(site_url=data.get("site_url", ""))

        for taxonomy_key, entries in data.get("categories", {}).items():
            taxonomy = Taxonomy(taxonomy_key)
            for entry in entries:
                store.add_category(
                    Category(
                        slug=entry["slug"],
                        name=entry.get("name", entry["slug"]),
                        taxonomy=taxonomy,
                        term_id=entry.get("term_id", 0),
                        link=entry.get("link", ""),
                    )
                )

        for entry in data.get("content", []):
            published_at = entry.get("published_at")
            item = ContentItem(
                id=entry["id"],
                title=entry.get("title", ""),
                permalink=entry.get("permalink", ""),
                content_type=ContentType(entry.get("type", "post")),
                status=PostStatus(entry.get("status", "publish")),
                published_at=_parse_timestamp(published_at) if published_at else None,
            )
            store.add_content(
                item,
                categories={
                    Taxonomy(key): slugs
                    for key, slugs in entry.get("categories", {}).items()
                },
            )

        logger.debug(
            "Loaded %d content items and %d categories",
            store.content_count,
            sum(len(c) for c in store._categories.values()),
        )
        return store

    @classmethod
    def from_json(cls, path: Path) -> InMemoryTaxonomyStore:
        """Build a store from a JSON site export file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Loading site export from %s", path)
        return cls.from_dict(data)


def _parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp as naive UTC so mixed exports stay comparable."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
