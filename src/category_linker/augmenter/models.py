"""Data models for the augmenter module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderContext:
    """Rendering predicates reported by the host for the current request."""
    is_product: bool = False  # single product page
    is_single: bool = False  # single post view
    in_the_loop: bool = False
    is_main_query: bool = False

    @property
    def is_single_product_view(self) -> bool:
        return self.is_product

    @property
    def is_single_post_main_loop(self) -> bool:
        """True only for the primary post body, not excerpts, widgets or secondary loops."""
        return self.is_single and self.in_the_loop and self.is_main_query

    @classmethod
    def for_product_page(cls) -> RenderContext:
        return cls(is_product=True, is_single=True, in_the_loop=True, is_main_query=True)

    @classmethod
    def for_single_post(cls) -> RenderContext:
        return cls(is_single=True, in_the_loop=True, is_main_query=True)
