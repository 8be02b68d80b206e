"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter

from app.catalog.store import CatalogStore, get_store
from app.core.exceptions import AppException


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: Optional[CatalogStore]):
        self._store = store

    def check_store(self) -> dict:
        """Check that the products document can be read."""
        if self._store is None:
            return {"status": "not_loaded", "products": 0, "products_file": None}

        try:
            products = self._store.count()
            status = "healthy"
        except AppException:
            products = 0
            status = "unhealthy"

        return {
            "status": status,
            "products": products,
            "products_file": str(self._store.path)
        }

    def get_health(self) -> dict:
        """Get full health status."""
        store_info = self.check_store()

        overall = "healthy" if store_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "store": store_info["status"]
            },
            "details": {
                "products_file": store_info["products_file"],
                "products": store_info["products"]
            }
        }


@router.get("")
async def health_check():
    """
    Health check endpoint.

    Returns system status including API and product store.
    """
    controller = HealthController(get_store())
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
