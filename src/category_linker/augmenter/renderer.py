"""
Section Renderer for cross-link sections.
Handles Jinja2 template loading and rendering.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.common.config import RelatedPostsSettings, RelatedProductsSettings
from src.common.models import Category, ContentItem

from .escaping import escape_attr, escape_url


class SectionRenderer:
    """
    Renders the related-posts and related-products HTML sections.

    Output is a single line with no whitespace between tags.

    Usage:
        renderer = SectionRenderer()
        html = renderer.render_related_posts(settings.related_posts, posts)
    """

    RELATED_POSTS_TEMPLATE = "related_posts.html.jinja2"
    RELATED_PRODUCTS_TEMPLATE = "related_products.html.jinja2"

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the section renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "html.jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["esc_url"] = escape_url
        self.env.filters["esc_attr"] = escape_attr

    def render_related_posts(
        self,
        settings: RelatedPostsSettings,
        posts: list[ContentItem],
    ) -> str:
        """
        Render the product page "additional reading" section.

        Args:
            settings: Heading, classes and margin for the section
            posts: Posts to list, in display order

        Returns:
            Rendered HTML fragment
        """
        template = self.env.get_template(self.RELATED_POSTS_TEMPLATE)
        return template.render(
            css_classes=settings.css_classes,
            margin_top=settings.margin_top,
            heading=settings.heading,
            posts=posts,
        )

    def render_related_products(
        self,
        settings: RelatedProductsSettings,
        category: Category,
        link: str,
    ) -> str:
        """
        Render the blog post "related products" section.

        Args:
            settings: Heading, copy, classes and button text for the section
            category: Matched product category
            link: Archive URL of the category

        Returns:
            Rendered HTML fragment
        """
        template = self.env.get_template(self.RELATED_PRODUCTS_TEMPLATE)
        return template.render(
            css_classes=settings.css_classes,
            margin_top=settings.margin_top,
            heading=settings.heading,
            copy_text=settings.copy_text,
            button_class=settings.button_class,
            link_prefix=settings.link_prefix,
            category_name=category.name,
            link=link,
        )
