# Hooks — Named extension points and linker registration
from .bootstrap import (
    CONTENT_FILTER_HOOK,
    CONTENT_FILTER_PRIORITY,
    PRODUCT_SUMMARY_HOOK,
    PRODUCT_SUMMARY_PRIORITY,
    register_category_linker,
)
from .registry import DEFAULT_PRIORITY, HookRegistry

__all__ = [
    "CONTENT_FILTER_HOOK",
    "CONTENT_FILTER_PRIORITY",
    "DEFAULT_PRIORITY",
    "HookRegistry",
    "PRODUCT_SUMMARY_HOOK",
    "PRODUCT_SUMMARY_PRIORITY",
    "register_category_linker",
]
