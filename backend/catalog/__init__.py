"""
Catalog provider for the recommendation engine.

Responsibilities:
- Read the MakeShop product export (UTF-8 or CP932) into ``CatalogRow`` records.
- Keep parsed rows in a short-lived cache.
- Resolve a preview image for a product page, with a long-lived cache.
"""
