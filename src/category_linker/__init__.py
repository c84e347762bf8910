# Category Linker: Cross-links product pages and blog posts by category slug
"""
Category linker modules:
- taxonomy: Category/content lookups (in-memory store, WordPress REST API)
- augmenter: Product page and post content handlers, HTML rendering
- hooks: Extension point registry and handler registration
"""
