"""Product page augmenter — blog posts sharing the product's category.

Runs after the product summary on a single product page. Collects the
product's category slugs, finds published posts in any of those slugs and
writes an "Additional Reading" section to the output stream.

Usage:
    augmenter = ProductPageAugmenter(store)
    augmenter(RenderContext.for_product_page(), product, out=buffer)
"""

from __future__ import annotations

import sys
from typing import TextIO

from src.common.config import DEFAULT_SETTINGS, LinkerSettings
from src.common.logging import setup_logging
from src.common.models import ContentItem, ContentQuery, ContentType, PostStatus, Taxonomy

from ..taxonomy.lookup import TaxonomyLookup, TaxonomyLookupError
from .models import RenderContext
from .renderer import SectionRenderer

logger = setup_logging(module_name="category_linker.augmenter.product_page")


class ProductPageAugmenter:
    """Appends related blog posts to a product page.

    Every failure (wrong page, no categories, lookup error, no posts)
    produces no output at all.
    """

    def __init__(
        self,
        taxonomy: TaxonomyLookup,
        settings: LinkerSettings = DEFAULT_SETTINGS,
        renderer: SectionRenderer | None = None,
    ):
        self.taxonomy = taxonomy
        self.settings = settings
        self.renderer = renderer or SectionRenderer()

    def __call__(
        self,
        context: RenderContext,
        product: ContentItem,
        out: TextIO | None = None,
    ) -> None:
        """Action callback: write the section to the output stream, if any."""
        section = self.render(context, product)
        if section:
            (out or sys.stdout).write(section)

    def render(self, context: RenderContext, product: ContentItem) -> str:
        """Build the section for a product.

        Args:
            context: Rendering predicates for the current request
            product: Product being rendered

        Returns:
            HTML fragment, or an empty string when there is nothing to show
        """
        if not context.is_single_product_view:
            return ""

        posts = self.find_related_posts(product)
        if not posts:
            return ""

        logger.debug("Rendering %d related posts for product %s", len(posts), product.id)
        return self.renderer.render_related_posts(self.settings.related_posts, posts)

    def find_related_posts(self, product: ContentItem) -> list[ContentItem]:
        """Published posts sharing any of the product's category slugs."""
        try:
            categories = self.taxonomy.get_categories_for(
                product.id, Taxonomy.PRODUCT_CATEGORY
            )
        except TaxonomyLookupError as exc:
            logger.warning("Product category lookup failed for %s: %s", product.id, exc)
            return []

        if not categories:
            logger.debug("Product %s has no categories", product.id)
            return []

        slugs = [category.slug for category in categories]
        limit = self.settings.related_posts.limit

        try:
            posts = self.taxonomy.find_content(
                ContentQuery(
                    category_slugs=slugs,
                    taxonomy=Taxonomy.POST_CATEGORY,
                    content_type=ContentType.POST,
                    limit=limit,
                    status=PostStatus.PUBLISH,
                )
            )
        except TaxonomyLookupError as exc:
            logger.warning("Related post lookup failed for %s: %s", product.id, exc)
            return []

        return posts[:limit]
