# Taxonomy — Read-only access to categories and categorised content
"""
Taxonomy lookups used by the augmenters.

Provides the abstract TaxonomyLookup contract, an in-memory store for
fixtures and site exports, and a WordPress REST API client.
"""

from .lookup import TaxonomyLookup, TaxonomyLookupError
from .memory_store import InMemoryTaxonomyStore
from .wordpress_client import WordPressTaxonomyClient

__all__ = [
    "InMemoryTaxonomyStore",
    "TaxonomyLookup",
    "TaxonomyLookupError",
    "WordPressTaxonomyClient",
]
