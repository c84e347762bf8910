"""Linker configuration.

Literal defaults for section copy, CSS classes and the related-posts limit.
Settings are frozen and built once, then shared by both augmenters. An
optional YAML file can override the defaults when passed explicitly.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"


class RelatedPostsSettings(BaseModel):
    """Product page → blog posts section."""
    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=3, ge=1)
    heading: str = "📚 Additional Reading"
    css_classes: tuple[str, ...] = ("woocommerce", "sanse-additional-reading")
    margin_top: str = "2rem"


class RelatedProductsSettings(BaseModel):
    """Blog post → product category section."""
    # "copy" would shadow BaseModel.copy, so the field is aliased
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    heading: str = "🪴 See Related Products"
    copy_text: str = Field(
        default=(
            "Looking to bring one of these beauties home? "
            "Explore all related products below."
        ),
        alias="copy",
    )
    css_classes: tuple[str, ...] = ("sanse-related-products",)
    margin_top: str = "2rem"
    button_class: str = "button"
    link_prefix: str = "Browse Products in "


class LinkerSettings(BaseModel):
    """Top-level linker settings."""
    model_config = ConfigDict(frozen=True)

    related_posts: RelatedPostsSettings = Field(default_factory=RelatedPostsSettings)
    related_products: RelatedProductsSettings = Field(
        default_factory=RelatedProductsSettings
    )
    request_timeout: float = Field(default=10.0, gt=0)

    @classmethod
    def load(cls, path: Path | None = None) -> LinkerSettings:
        """Build settings, optionally overriding defaults from a YAML file."""
        if path is None:
            return cls()
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)


DEFAULT_SETTINGS = LinkerSettings()
