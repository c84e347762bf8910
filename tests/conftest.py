"""Shared test fixtures for the category linker."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import LinkerSettings
from src.common.models import Category, ContentItem, ContentType, PostStatus, Taxonomy
from src.category_linker.taxonomy.memory_store import InMemoryTaxonomyStore


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_site_path() -> Path:
    """Return the JSON site export used across tests."""
    return PROJECT_ROOT / "fixtures" / "sample_site.json"


@pytest.fixture
def settings() -> LinkerSettings:
    return LinkerSettings()


@pytest.fixture
def product() -> ContentItem:
    """A published product in the "vases" product category."""
    return ContentItem(
        id=1,
        title="Ceramic Bud Vase",
        permalink="https://shop.example/product/ceramic-bud-vase/",
        content_type=ContentType.PRODUCT,
    )


@pytest.fixture
def vases_store(product: ContentItem) -> InMemoryTaxonomyStore:
    """Product with category "vases" and three published "vases" posts A, B, C."""
    store = InMemoryTaxonomyStore(site_url="https://shop.example")
    store.add_category(Category(slug="vases", name="Vases", taxonomy=Taxonomy.PRODUCT_CATEGORY))
    store.add_category(Category(slug="vases", name="Vases", taxonomy=Taxonomy.POST_CATEGORY))
    store.add_content(product, categories={Taxonomy.PRODUCT_CATEGORY: ["vases"]})

    for offset, (post_id, title) in enumerate([(11, "A"), (12, "B"), (13, "C")]):
        store.add_content(
            ContentItem(
                id=post_id,
                title=title,
                permalink=f"/{title.lower()}",
                status=PostStatus.PUBLISH,
                published_at=datetime(2026, 3, 3 - offset),
            ),
            categories={Taxonomy.POST_CATEGORY: ["vases"]},
        )
    return store


@pytest.fixture
def sample_store(sample_site_path: Path) -> InMemoryTaxonomyStore:
    return InMemoryTaxonomyStore.from_json(sample_site_path)
