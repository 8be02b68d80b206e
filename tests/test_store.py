"""
==============================================================================
Catalog Store Tests
==============================================================================

Tests for loading and saving the products document.

==============================================================================
"""

import json
import os
import stat
from datetime import datetime, timezone

import pytest

from app.catalog.models import Product, ProductCategory
from app.catalog.store import CatalogStore, get_store, init_store
from app.core.exceptions import AppException


def make_product(product_id: str = "p1", **overrides) -> Product:
    stamp = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)
    fields = {
        "id": product_id,
        "name": "Tee",
        "description": "Cotton tee",
        "price": 29.99,
        "category": ProductCategory.READY_TO_WEAR,
        "image_url": "https://example.com/a.jpg",
        "created_at": stamp,
        "updated_at": stamp,
    }
    fields.update(overrides)
    return Product(**fields)


class TestLoadAll:
    """Tests for CatalogStore.load_all."""

    def test_missing_file_is_empty(self, store):
        """Test first run without a document returns no products."""
        assert not store.exists()
        assert store.load_all() == []

    def test_loads_camel_case_document(self, store, write_document):
        """Test documents written by the legacy server are readable."""
        write_document([{
            "id": "17000000000001abcdefghi",
            "name": "Boot",
            "description": "Leather boot",
            "price": 120,
            "category": "SHOES",
            "imageUrl": "https://example.com/boot.jpg",
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-02T00:00:00.000Z",
        }])

        products = store.load_all()

        assert len(products) == 1
        assert products[0].id == "17000000000001abcdefghi"
        assert products[0].category is ProductCategory.SHOES
        assert products[0].price == 120.0
        assert products[0].created_at < products[0].updated_at

    def test_invalid_json_raises_in_strict_mode(self, store, write_document):
        """Test a corrupt document is reported, not treated as empty."""
        write_document("{not json")

        with pytest.raises(AppException) as exc_info:
            store.load_all()

        assert exc_info.value.code == "CATALOG_CORRUPTED"
        assert exc_info.value.status_code == 500

    def test_non_array_document_is_corrupt(self, store, write_document):
        """Test a JSON object at the top level is rejected."""
        write_document({"products": []})

        with pytest.raises(AppException) as exc_info:
            store.load_all()

        assert exc_info.value.code == "CATALOG_CORRUPTED"

    def test_invalid_record_is_corrupt(self, store, write_document):
        """Test a record missing required attributes is rejected."""
        write_document([{"id": "x", "name": "No price"}])

        with pytest.raises(AppException):
            store.load_all()

    def test_lenient_mode_reads_corrupt_as_empty(self, products_file, write_document):
        """Test lenient stores fall back to an empty catalog."""
        write_document("garbage")
        store = CatalogStore(products_file, strict=False)

        assert store.load_all() == []


class TestSaveAll:
    """Tests for CatalogStore.save_all."""

    def test_creates_directory_and_document(self, store):
        """Test saving into a missing directory."""
        store.save_all([make_product()])

        assert store.exists()
        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data[0]["imageUrl"] == "https://example.com/a.jpg"
        assert data[0]["category"] == "READY TO WEAR"
        assert "createdAt" in data[0] and "updatedAt" in data[0]

    def test_preserves_order(self, store):
        """Test stored order is load order."""
        store.save_all([make_product("b"), make_product("a"), make_product("c")])

        assert [p.id for p in store.load_all()] == ["b", "a", "c"]

    def test_round_trip_is_stable(self, store):
        """Test saving what was loaded leaves the content unchanged."""
        store.save_all([make_product("a"), make_product("b", price=5.0)])
        before = json.loads(store.path.read_text(encoding="utf-8"))

        store.save_all(store.load_all())

        assert json.loads(store.path.read_text(encoding="utf-8")) == before

    def test_leaves_no_temp_files(self, store):
        """Test the temporary file is renamed into place."""
        store.save_all([make_product()])

        assert os.listdir(store.path.parent) == [store.path.name]

    def test_failed_write_keeps_previous_document(self, store, monkeypatch):
        """Test a failed replace does not truncate the document."""
        store.save_all([make_product("kept")])

        def failing_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("app.catalog.store.os.replace", failing_replace)

        with pytest.raises(AppException) as exc_info:
            store.save_all([make_product("lost")])

        assert exc_info.value.code == "STORAGE_ERROR"
        assert "disk full" not in exc_info.value.message
        monkeypatch.undo()
        assert [p.id for p in store.load_all()] == ["kept"]
        assert os.listdir(store.path.parent) == [store.path.name]

    def test_keeps_document_permissions(self, store):
        """Test rewriting the document keeps its permission bits."""
        store.save_all([make_product()])
        os.chmod(store.path, 0o644)

        store.save_all(store.load_all())

        assert stat.S_IMODE(os.stat(store.path).st_mode) == 0o644

    def test_new_document_follows_umask(self, store):
        """Test a first write is not left owner-only."""
        umask = os.umask(0o022)
        try:
            store.save_all([make_product()])
        finally:
            os.umask(umask)

        assert stat.S_IMODE(os.stat(store.path).st_mode) == 0o644

    def test_empty_collection(self, store):
        """Test saving nothing writes an empty array."""
        store.save_all([])

        assert json.loads(store.path.read_text(encoding="utf-8")) == []
        assert store.count() == 0


class TestStoreSingleton:
    """Tests for module-level store management."""

    def test_init_store_sets_global(self, products_file):
        """Test init_store replaces the global instance."""
        store = init_store(products_file, strict=False)

        assert get_store() is store
        assert store.path == products_file
        assert store.strict is False
