"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing business logic.

This package provides:
- CatalogService: Product validation, listing and CRUD
- ProductPage: Paginated listing result

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ CatalogService  │  ← Validation, ids, filtering, CRUD
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  CatalogStore   │  ← Whole-document JSON persistence
    └─────────────────┘

Usage:
------
    from app.services import CatalogService

    service = CatalogService(store)
    page = service.list_products(category="SHOES", offset=0, limit=12)

==============================================================================
"""

from .catalog_service import CatalogService, ProductPage

__all__ = [
    "CatalogService",
    "ProductPage",
]
