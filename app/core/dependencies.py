"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog endpoints.

This module implements:
- get_catalog_service: CatalogService bound to the global store
- get_list_params: Category filter and offset/limit pagination parameters

Dependency Hierarchy:
--------------------
        ┌─────────────────┐
        │   get_store()   │
        └────────┬────────┘
                 │
    ┌────────────▼────────────┐
    │  get_catalog_service()  │
    └─────────────────────────┘

Usage Examples:
--------------
    @router.get("")
    async def list_products(
        params: dict = Depends(get_list_params),
        service: CatalogService = Depends(get_catalog_service),
    ):
        return service.list_products(**params)

Tests replace get_catalog_service through app.dependency_overrides.

==============================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Query

from app.catalog.store import get_store
from app.core import exceptions
from app.services.catalog_service import CatalogService


def get_catalog_service() -> CatalogService:
    """
    FastAPI dependency providing the catalog service.

    Raises:
        AppException: CATALOG_NOT_LOADED if the store was never initialized
    """
    store = get_store()
    if store is None:
        raise exceptions.catalog_not_loaded()
    return CatalogService(store)


def get_list_params(
    category: Optional[str] = Query(None, description="Case-insensitive category filter"),
    limit: Optional[int] = Query(None, ge=0, description="Items per page (0 or omitted: all)"),
    offset: Optional[int] = Query(None, ge=0, description="Items to skip")
) -> Dict[str, Any]:
    """
    FastAPI dependency for listing parameters.

    Returns:
        Dictionary with category, offset and limit for
        CatalogService.list_products
    """
    return {
        "category": category,
        "offset": offset,
        "limit": limit
    }
