"""WordPress REST API taxonomy lookup.

Reads categories, product categories and posts from a live site through
`/wp-json/wp/v2`. Every transport or payload problem is reported as
TaxonomyLookupError.

Usage:
    with WordPressTaxonomyClient("https://shop.example") as client:
        cats = client.get_categories_for(42, Taxonomy.PRODUCT_CATEGORY)
"""

from __future__ import annotations

import html
import os
from datetime import datetime
from pathlib import Path
from typing import Any

import requests
from dotenv import load_dotenv

from src.common.logging import setup_logging
from src.common.models import (
    Category,
    ContentItem,
    ContentQuery,
    ContentType,
    PostStatus,
    Taxonomy,
)

from .lookup import TaxonomyLookup, TaxonomyLookupError

logger = setup_logging(module_name="category_linker.taxonomy.wordpress_client")

# Load .env from project root
load_dotenv(Path(__file__).resolve().parents[3] / ".env")

API_PREFIX = "/wp-json/wp/v2"

# REST bases; a taxonomy's base is also its filter parameter on content endpoints
TAXONOMY_BASES = {
    Taxonomy.POST_CATEGORY: "categories",
    Taxonomy.PRODUCT_CATEGORY: "product_cat",
}
CONTENT_BASES = {
    ContentType.POST: "posts",
    ContentType.PRODUCT: "product",
}

PER_PAGE_MAX = 100


class WordPressTaxonomyClient(TaxonomyLookup):
    """Taxonomy lookup over the WordPress REST API."""

    def __init__(
        self,
        base_url: str = "",
        username: str = "",
        app_password: str = "",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Site root, e.g. "https://shop.example".
                      Falls back to WORDPRESS_BASE_URL.
            username: User for application-password auth (WORDPRESS_USERNAME)
            app_password: Application password (WORDPRESS_APP_PASSWORD)
            timeout: Per-request timeout in seconds
            session: Optional pre-configured requests session
        """
        self.base_url = (base_url or os.getenv("WORDPRESS_BASE_URL", "")).rstrip("/")
        if not self.base_url:
            raise ValueError("WordPress base URL not set (pass base_url or WORDPRESS_BASE_URL)")

        self.timeout = timeout
        self._session = session or requests.Session()

        username = username or os.getenv("WORDPRESS_USERNAME", "")
        app_password = app_password or os.getenv("WORDPRESS_APP_PASSWORD", "")
        if username and app_password:
            self._session.auth = (username, app_password)

    @property
    def api_url(self) -> str:
        return f"{self.base_url}{API_PREFIX}"

    # --- TaxonomyLookup ---

    def get_categories_for(self, content_id: int, taxonomy: Taxonomy) -> list[Category]:
        terms, _ = self._get(
            TAXONOMY_BASES[taxonomy],
            params={"post": content_id, "per_page": PER_PAGE_MAX},
        )
        return [self._to_category(term, taxonomy) for term in terms]

    def get_all_categories(
        self,
        taxonomy: Taxonomy,
        non_empty_only: bool = False,
    ) -> list[Category]:
        categories: list[Category] = []
        page = 1
        total_pages = 1
        while page <= total_pages:
            terms, response = self._get(
                TAXONOMY_BASES[taxonomy],
                params={
                    "per_page": PER_PAGE_MAX,
                    "page": page,
                    "hide_empty": "true" if non_empty_only else "false",
                },
            )
            categories.extend(self._to_category(term, taxonomy) for term in terms)
            total_pages = self._total_pages(response)
            page += 1

        logger.debug("Fetched %d %s terms", len(categories), taxonomy.value)
        return categories

    def find_content(self, query: ContentQuery) -> list[ContentItem]:
        if not query.category_slugs:
            return []

        tax_base = TAXONOMY_BASES[query.taxonomy]
        terms, _ = self._get(
            tax_base,
            params={
                "slug": ",".join(query.category_slugs),
                "per_page": PER_PAGE_MAX,
            },
        )
        term_ids = [str(self._term_id(term)) for term in terms]
        if not term_ids:
            logger.debug("No %s terms for slugs %s", query.taxonomy.value, query.category_slugs)
            return []

        items, _ = self._get(
            CONTENT_BASES[query.content_type],
            params={
                tax_base: ",".join(term_ids),
                "per_page": min(query.limit, PER_PAGE_MAX),
                "status": query.status.value,
                "_fields": "id,title,link,date,type,status",
            },
        )
        return [self._to_content(item, query.content_type) for item in items]

    def get_content(self, content_id: int, content_type: ContentType) -> ContentItem | None:
        try:
            item, _ = self._get(f"{CONTENT_BASES[content_type]}/{content_id}")
        except TaxonomyLookupError as exc:
            if isinstance(exc.__cause__, requests.HTTPError) and _status_of(exc.__cause__) == 404:
                return None
            raise
        return self._to_content(item, content_type)

    # --- HTTP ---

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[Any, requests.Response]:
        """GET a REST route and decode its JSON body.

        Raises:
            TaxonomyLookupError: On transport errors, non-2xx status or bad JSON
        """
        url = f"{self.api_url}/{path}"
        try:
            resp = self._session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            logger.warning("WordPress request failed: %s (%s)", url, exc)
            raise TaxonomyLookupError(f"Request to {url} failed: {exc}") from exc
        except ValueError as exc:
            logger.warning("WordPress returned invalid JSON: %s", url)
            raise TaxonomyLookupError(f"Invalid JSON from {url}") from exc

        if isinstance(payload, dict) and payload.get("code") and "data" in payload:
            raise TaxonomyLookupError(f"WordPress error {payload['code']}: {payload.get('message', '')}")

        return payload, resp

    @staticmethod
    def _total_pages(response: requests.Response) -> int:
        raw = response.headers.get("X-WP-TotalPages") or 1
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            raise TaxonomyLookupError(f"Invalid X-WP-TotalPages header: {raw!r}") from exc

    # --- Mapping ---

    @staticmethod
    def _term_id(term: dict) -> int:
        try:
            return int(term["id"])
        except (KeyError, TypeError, ValueError) as exc:
            raise TaxonomyLookupError(f"Malformed term payload: {term!r}") from exc

    @staticmethod
    def _to_category(term: dict, taxonomy: Taxonomy) -> Category:
        try:
            return Category(
                slug=term["slug"],
                name=html.unescape(term.get("name", "")),
                taxonomy=taxonomy,
                term_id=term.get("id", 0),
                link=term.get("link", ""),
                count=term.get("count", 0),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise TaxonomyLookupError(f"Malformed term payload: {term!r}") from exc

    @staticmethod
    def _to_content(item: dict, content_type: ContentType) -> ContentItem:
        try:
            title = item.get("title", {})
            rendered = title.get("rendered", "") if isinstance(title, dict) else str(title)
            date = item.get("date")
            return ContentItem(
                id=item["id"],
                title=html.unescape(rendered),
                permalink=item.get("link", ""),
                content_type=content_type,
                status=PostStatus(item.get("status", "publish")),
                published_at=datetime.fromisoformat(date) if date else None,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise TaxonomyLookupError(f"Malformed content payload: {item!r}") from exc

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> WordPressTaxonomyClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _status_of(exc: requests.HTTPError) -> int | None:
    return exc.response.status_code if exc.response is not None else None
