# Augmenter — Cross-link sections for product pages and blog posts
"""
Augmenter module for the two request-time handlers.

ProductPageAugmenter writes related blog posts after a product summary;
PostContentAugmenter appends a product category link to a post body.
"""

from .escaping import ALLOWED_PROTOCOLS, escape_attr, escape_html, escape_url
from .models import RenderContext
from .post_content import PostContentAugmenter
from .product_page import ProductPageAugmenter
from .renderer import SectionRenderer

__all__ = [
    "ALLOWED_PROTOCOLS",
    "PostContentAugmenter",
    "ProductPageAugmenter",
    "RenderContext",
    "SectionRenderer",
    "escape_attr",
    "escape_html",
    "escape_url",
]
