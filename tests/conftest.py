"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a temporary product store, the catalog service and an API client.

==============================================================================
"""

import json
import pytest
from pathlib import Path
from typing import Any, Dict, Generator
from fastapi.testclient import TestClient

from app.main import app
from app.catalog.store import CatalogStore, init_store
from app.core.dependencies import get_catalog_service
from app.services.catalog_service import CatalogService


# ============================================================================
# STORAGE FIXTURES
# ============================================================================

@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """Path of a products document that does not exist yet."""
    return tmp_path / "data" / "products.json"


@pytest.fixture
def store(products_file: Path) -> CatalogStore:
    """Strict store over the temporary products document."""
    return CatalogStore(products_file)


@pytest.fixture
def service(store: CatalogStore) -> CatalogService:
    """Catalog service bound to the temporary store."""
    return CatalogService(store)


@pytest.fixture
def write_document(products_file: Path):
    """Write raw content to the products document."""
    def _write(content: Any) -> Path:
        products_file.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        products_file.write_text(content, encoding="utf-8")
        return products_file
    return _write


@pytest.fixture
def failing_disk(monkeypatch):
    """Make every document replace fail as if the disk were full."""
    def _enable() -> None:
        def failing_replace(src, dst):
            raise OSError("disk full")
        monkeypatch.setattr("app.catalog.store.os.replace", failing_replace)
    return _enable


# ============================================================================
# PAYLOAD FIXTURES
# ============================================================================

@pytest.fixture
def tee_payload() -> Dict[str, Any]:
    """Valid product payload."""
    return {
        "name": "Tee",
        "description": "Cotton tee",
        "price": 29.99,
        "category": "READY TO WEAR",
        "imageUrl": "https://example.com/a.jpg",
    }


@pytest.fixture
def make_payload(tee_payload: Dict[str, Any]):
    """Build a valid payload with selected fields overridden."""
    def _make(**overrides: Any) -> Dict[str, Any]:
        payload = dict(tee_payload)
        payload.update(overrides)
        return payload
    return _make


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(store: CatalogStore, service: CatalogService) -> Generator[TestClient, None, None]:
    """Create test client backed by the temporary store."""
    app.dependency_overrides[get_catalog_service] = lambda: service

    with TestClient(app) as test_client:
        # Startup binds the global store to the configured file; rebind it
        # so health checks look at the temporary document too.
        init_store(store.path)
        yield test_client

    app.dependency_overrides.clear()
