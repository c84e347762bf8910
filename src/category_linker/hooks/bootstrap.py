"""Wire the category linker into a hook registry."""

from __future__ import annotations

from src.common.config import LinkerSettings
from src.common.logging import setup_logging

from ..augmenter.post_content import PostContentAugmenter
from ..augmenter.product_page import ProductPageAugmenter
from ..augmenter.renderer import SectionRenderer
from ..taxonomy.lookup import TaxonomyLookup
from .registry import HookRegistry

logger = setup_logging(module_name="category_linker.hooks.bootstrap")

# Extension points and priorities
PRODUCT_SUMMARY_HOOK = "woocommerce_after_single_product_summary"
PRODUCT_SUMMARY_PRIORITY = 15
CONTENT_FILTER_HOOK = "the_content"
CONTENT_FILTER_PRIORITY = 10


def register_category_linker(
    registry: HookRegistry,
    taxonomy: TaxonomyLookup,
    settings: LinkerSettings | None = None,
) -> tuple[ProductPageAugmenter, PostContentAugmenter]:
    """Register both augmenters on their hooks.

    Both share one settings object and one renderer.

    Returns:
        (product page augmenter, post content augmenter)
    """
    settings = settings or LinkerSettings()
    renderer = SectionRenderer()

    product_augmenter = ProductPageAugmenter(taxonomy, settings, renderer)
    post_augmenter = PostContentAugmenter(taxonomy, settings, renderer)

    registry.add_action(PRODUCT_SUMMARY_HOOK, product_augmenter, PRODUCT_SUMMARY_PRIORITY)
    registry.add_filter(CONTENT_FILTER_HOOK, post_augmenter, CONTENT_FILTER_PRIORITY)

    logger.info(
        "Category linker registered on %s and %s", PRODUCT_SUMMARY_HOOK, CONTENT_FILTER_HOOK
    )
    return product_augmenter, post_augmenter
