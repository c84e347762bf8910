"""CLI entry point for rendering cross-link sections.

Usage:
    python -m src.category_linker.main --site fixtures/sample_site.json --product 101
    python -m src.category_linker.main --site fixtures/sample_site.json --post 201 --content "<p>Hello</p>"
    python -m src.category_linker.main --wordpress-url https://shop.example --post 42 --content-file body.html
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path

from src.common.config import FIXTURES_DIR, LinkerSettings
from src.common.logging import set_level, setup_logging
from src.common.models import ContentType

from .augmenter.models import RenderContext
from .hooks.bootstrap import CONTENT_FILTER_HOOK, PRODUCT_SUMMARY_HOOK, register_category_linker
from .hooks.registry import HookRegistry
from .taxonomy.lookup import TaxonomyLookup, TaxonomyLookupError
from .taxonomy.memory_store import InMemoryTaxonomyStore
from .taxonomy.wordpress_client import WordPressTaxonomyClient

logger = setup_logging(module_name="category_linker.main")

DEFAULT_SITE = FIXTURES_DIR / "sample_site.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render category cross-link sections for a product or blog post"
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--site",
        type=Path,
        help="Path to a JSON site export (default: fixtures/sample_site.json)",
    )
    source.add_argument(
        "--wordpress-url",
        help="Site root of a live WordPress install to query over REST",
    )
    parser.add_argument("--username", default="", help="WordPress user for application-password auth")
    parser.add_argument("--app-password", default="", help="WordPress application password")

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--product", type=int, help="Product id to render related posts for")
    target.add_argument("--post", type=int, help="Post id to run the content filter on")

    content = parser.add_mutually_exclusive_group()
    content.add_argument("--content", default="", help="Post body to filter")
    content.add_argument("--content-file", type=Path, help="File holding the post body to filter")

    parser.add_argument("--settings", type=Path, help="YAML file overriding section settings")
    parser.add_argument("--output", type=Path, help="Write the result here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_lookup(args: argparse.Namespace, settings: LinkerSettings) -> TaxonomyLookup:
    """Choose the taxonomy source from CLI arguments."""
    if args.wordpress_url:
        return WordPressTaxonomyClient(
            base_url=args.wordpress_url,
            username=args.username,
            app_password=args.app_password,
            timeout=settings.request_timeout,
        )
    site_path = args.site or DEFAULT_SITE
    return InMemoryTaxonomyStore.from_json(site_path)


def render(args: argparse.Namespace, lookup: TaxonomyLookup, settings: LinkerSettings) -> str | None:
    """Run the requested hook and return its output, or None for an unknown id."""
    registry = HookRegistry()
    register_category_linker(registry, lookup, settings)

    if args.product is not None:
        product = lookup.get_content(args.product, ContentType.PRODUCT)
        if product is None:
            logger.error("Product %s not found", args.product)
            return None
        buffer = io.StringIO()
        registry.do_action(PRODUCT_SUMMARY_HOOK, RenderContext.for_product_page(), product, buffer)
        return buffer.getvalue()

    post = lookup.get_content(args.post, ContentType.POST)
    if post is None:
        logger.error("Post %s not found", args.post)
        return None
    content = args.content
    if args.content_file:
        content = args.content_file.read_text(encoding="utf-8")
    return registry.apply_filters(CONTENT_FILTER_HOOK, content, RenderContext.for_single_post(), post)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    settings = LinkerSettings.load(args.settings)
    lookup = build_lookup(args, settings)
    try:
        result = render(args, lookup, settings)
    except TaxonomyLookupError as exc:
        logger.error("Lookup failed: %s", exc)
        return 1
    finally:
        lookup.close()

    if result is None:
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(result, encoding="utf-8")
        logger.info("Output written to: %s", args.output)
    else:
        sys.stdout.write(result)
        if result:
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
