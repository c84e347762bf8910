"""Post content augmenter — link from a blog post to its product category.

Content filter for the primary single-post body. Picks the first product
category (in lookup order) whose slug is one of the post's category slugs
and appends a "See Related Products" section to the content.

Usage:
    augmenter = PostContentAugmenter(store)
    html = augmenter(content, RenderContext.for_single_post(), post)
"""

from __future__ import annotations

from src.common.config import DEFAULT_SETTINGS, LinkerSettings
from src.common.logging import setup_logging
from src.common.models import Category, ContentItem, Taxonomy

from ..taxonomy.lookup import TaxonomyLookup, TaxonomyLookupError
from .models import RenderContext
from .renderer import SectionRenderer

logger = setup_logging(module_name="category_linker.augmenter.post_content")


class PostContentAugmenter:
    """Appends a product category link to blog post content.

    Returns the content untouched whenever a guard or lookup fails.
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

    def __call__(self, content: str, context: RenderContext, post: ContentItem) -> str:
        """Filter callback.

        Args:
            content: Rendered post body
            context: Rendering predicates for the current request
            post: Post being rendered

        Returns:
            content with the section appended, or content unchanged
        """
        if not context.is_single_post_main_loop:
            return content

        category = self.match_product_category(post)
        if category is None:
            return content

        try:
            link = self.taxonomy.get_category_link(category)
        except TaxonomyLookupError as exc:
            logger.warning("No archive link for product category %s: %s", category.slug, exc)
            return content

        section = self.renderer.render_related_products(
            self.settings.related_products, category, link
        )
        logger.debug("Linked post %s to product category %s", post.id, category.slug)
        return content + section

    def match_product_category(self, post: ContentItem) -> Category | None:
        """First non-empty product category sharing a slug with the post."""
        try:
            post_categories = self.taxonomy.get_categories_for(post.id, Taxonomy.POST_CATEGORY)
        except TaxonomyLookupError as exc:
            logger.warning("Post category lookup failed for %s: %s", post.id, exc)
            return None

        if not post_categories:
            return None

        try:
            product_categories = self.taxonomy.get_all_categories(
                Taxonomy.PRODUCT_CATEGORY, non_empty_only=True
            )
        except TaxonomyLookupError as exc:
            logger.warning("Product category listing failed: %s", exc)
            return None

        post_slugs = {category.slug for category in post_categories}
        for category in product_categories:
            if category.slug in post_slugs:
                return category

        logger.debug("No product category matches post %s", post.id)
        return None
