"""
Unit tests for the section renderer.
Tests template loading, escaping and the exact emitted markup.
"""

import pytest
from bs4 import BeautifulSoup

from src.common.config import RelatedPostsSettings, RelatedProductsSettings
from src.common.models import Category, ContentItem, Taxonomy
from src.category_linker.augmenter.renderer import SectionRenderer


@pytest.fixture
def renderer() -> SectionRenderer:
    return SectionRenderer()


@pytest.fixture
def posts() -> list[ContentItem]:
    return [
        ContentItem(id=1, title="A", permalink="/a"),
        ContentItem(id=2, title="B", permalink="/b"),
    ]


@pytest.fixture
def category() -> Category:
    return Category(slug="vases", name="Vases", taxonomy=Taxonomy.PRODUCT_CATEGORY)


class TestRelatedPosts:
    def test_exact_markup(self, renderer, posts):
        html = renderer.render_related_posts(RelatedPostsSettings(), posts)
        assert html == (
            '<section class="woocommerce sanse-additional-reading" style="margin-top:2rem;">'
            "<h3>📚 Additional Reading</h3>"
            '<ul><li><a href="/a">A</a></li><li><a href="/b">B</a></li></ul>'
            "</section>"
        )

    def test_titles_escaped(self, renderer):
        posts = [ContentItem(id=1, title="Vases & <Flowers>", permalink="/v")]
        html = renderer.render_related_posts(RelatedPostsSettings(), posts)
        assert "Vases &amp; &lt;Flowers&gt;" in html
        assert "<Flowers>" not in html

    def test_permalinks_url_escaped(self, renderer):
        posts = [ContentItem(id=1, title="X", permalink="javascript:alert(1)")]
        html = renderer.render_related_posts(RelatedPostsSettings(), posts)
        assert '<a href="">X</a>' in html

    def test_query_ampersand_not_double_escaped(self, renderer):
        posts = [ContentItem(id=1, title="X", permalink="/?p=1&lang=en")]
        html = renderer.render_related_posts(RelatedPostsSettings(), posts)
        assert 'href="/?p=1&amp;lang=en"' in html

    def test_classes_and_margin_escaped(self, renderer, posts):
        settings = RelatedPostsSettings(css_classes=('a"b',), margin_top="1rem;<x>")
        html = renderer.render_related_posts(settings, posts)
        assert 'class="a&#34;b"' in html
        assert "margin-top:1rem;&lt;x&gt;;" in html

    def test_custom_heading(self, renderer, posts):
        html = renderer.render_related_posts(RelatedPostsSettings(heading="Read More"), posts)
        soup = BeautifulSoup(html, "lxml")
        assert soup.find("h3").get_text() == "Read More"


class TestRelatedProducts:
    def test_exact_markup(self, renderer, category):
        html = renderer.render_related_products(
            RelatedProductsSettings(), category, "https://shop.example/product-category/vases/"
        )
        assert html == (
            '<section class="sanse-related-products" style="margin-top:2rem;">'
            "<h3>🪴 See Related Products</h3>"
            "<p>Looking to bring one of these beauties home? Explore all related products below.</p>"
            '<p><a class="button" href="https://shop.example/product-category/vases/">'
            "Browse Products in Vases</a></p>"
            "</section>"
        )

    def test_category_name_escaped(self, renderer):
        category = Category(slug="v", name="Vases & <Vessels>", taxonomy=Taxonomy.PRODUCT_CATEGORY)
        html = renderer.render_related_products(RelatedProductsSettings(), category, "/v")
        assert "Browse Products in Vases &amp; &lt;Vessels&gt;" in html

    def test_attributes_escaped(self, renderer, category):
        settings = RelatedProductsSettings(
            css_classes=("x", 'y"z'), margin_top="<1rem>", button_class="btn' onclick"
        )
        html = renderer.render_related_products(settings, category, "/c")
        assert '<section class="x y&#34;z" style="margin-top:&lt;1rem&gt;;">' in html
        assert '<a class="btn&#39; onclick" href="/c">' in html

    def test_structure(self, renderer, category):
        html = renderer.render_related_products(RelatedProductsSettings(), category, "/c")
        soup = BeautifulSoup(html, "lxml")
        section = soup.find("section")
        assert section["class"] == ["sanse-related-products"]
        paragraphs = section.find_all("p")
        assert len(paragraphs) == 2
        link = paragraphs[1].find("a")
        assert link["class"] == ["button"]
        assert link["href"] == "/c"


class TestTemplatesDir:
    def test_custom_templates_dir(self, tmp_path, posts):
        (tmp_path / SectionRenderer.RELATED_POSTS_TEMPLATE).write_text(
            "{{ posts | length }} posts", encoding="utf-8"
        )
        renderer = SectionRenderer(templates_dir=tmp_path)
        assert renderer.render_related_posts(RelatedPostsSettings(), posts) == "2 posts"
