"""
==============================================================================
Catalog Package - Product Storage
==============================================================================

Product domain model and its file-backed store.

Classes:
--------
- Product: Pydantic model for products
- ProductCategory: Enumeration of catalog categories
- CatalogStore: Load/save of the full product collection

==============================================================================
"""

from .models import Product, ProductCategory
from .store import CatalogStore, get_store, init_store

__all__ = [
    "Product",
    "ProductCategory",
    "CatalogStore",
    "get_store",
    "init_store",
]
