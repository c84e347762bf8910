"""Shared Pydantic data models for the category linker.

These models are the contract between the taxonomy lookups and the
augmenters. Instances are immutable: they are re-fetched on every render
and never modified here.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# === Enums ===

class Taxonomy(str, Enum):
    """Category namespaces known to the site."""
    PRODUCT_CATEGORY = "product_cat"
    POST_CATEGORY = "category"


class ContentType(str, Enum):
    """Content types that carry categories."""
    POST = "post"
    PRODUCT = "product"


class PostStatus(str, Enum):
    """Publication status of a content item."""
    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    FUTURE = "future"
    TRASH = "trash"


# === Content ===

class ContentItem(BaseModel):
    """A post or product as seen by the linker."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    permalink: str
    content_type: ContentType = ContentType.POST
    status: PostStatus = PostStatus.PUBLISH
    published_at: datetime | None = None


class Category(BaseModel):
    """A taxonomy term.

    Identity across taxonomies is the slug alone, compared byte for byte.
    """
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    taxonomy: Taxonomy
    term_id: int = 0
    link: str = ""
    count: int = Field(default=0, ge=0)


class ContentQuery(BaseModel):
    """Query for content items sharing any of the given category slugs."""
    model_config = ConfigDict(frozen=True)

    category_slugs: list[str]
    taxonomy: Taxonomy = Taxonomy.POST_CATEGORY
    content_type: ContentType = ContentType.POST
    limit: int = Field(default=3, ge=1)
    status: PostStatus = PostStatus.PUBLISH
