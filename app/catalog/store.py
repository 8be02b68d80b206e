"""
==============================================================================
Catalog Store Module
==============================================================================

File-backed persistence for the product catalog.

The whole catalog lives in a single JSON document. Every read loads the full
collection and every write replaces the full collection.

Features:
---------
- Missing document reads as an empty catalog (first run)
- Unparseable document fails loudly (or reads as empty in lenient mode)
- Atomic writes: temp file in the same directory, fsync, then rename
- Re-entrant lock for serializing load-mutate-save cycles

JSON Structure:
--------------
[
  {
    "id": "0f8c...",
    "name": "Tee",
    "description": "Cotton tee",
    "price": 29.99,
    "category": "READY TO WEAR",
    "imageUrl": "https://example.com/a.jpg",
    "createdAt": "2025-01-15T10:30:45.123456Z",
    "updatedAt": "2025-01-15T10:30:45.123456Z"
  }
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from pydantic import ValidationError

from app.core import exceptions
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Persistence manager for the full product collection.

    Attributes:
        path: Location of the products document
        strict: Raise on an unparseable document instead of reading it as empty

    Example:
        >>> store = CatalogStore(Path("data/products.json"))
        >>> products = store.load_all()
        >>> store.save_all(products)
    """

    def __init__(self, products_file: Path, strict: bool = True) -> None:
        """
        Initialize the store.

        Args:
            products_file: Path to products.json
            strict: Fail loudly on a corrupt document
        """
        self._products_file = Path(products_file)
        self._strict = strict
        self._lock = threading.RLock()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def path(self) -> Path:
        """Get the products document path."""
        return self._products_file

    @property
    def strict(self) -> bool:
        """Whether corrupt documents raise."""
        return self._strict

    # =========================================================================
    # LOCKING
    # =========================================================================

    @contextmanager
    def locked(self) -> Iterator["CatalogStore"]:
        """
        Hold the store lock for a load-mutate-save cycle.

        The lock is re-entrant, so load_all/save_all may be called inside.
        """
        with self._lock:
            yield self

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_all(self) -> List[Product]:
        """
        Load every product from the document.

        Returns:
            Products in stored order; empty if the document does not exist

        Raises:
            AppException: CATALOG_CORRUPTED if the document cannot be parsed
                (strict mode), STORAGE_ERROR if it cannot be read
        """
        with self._lock:
            try:
                raw = self._products_file.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info(f"Products file not found, starting empty: {self._products_file}")
                return []
            except OSError as e:
                logger.error(f"Failed to read products file {self._products_file}: {e}")
                raise exceptions.storage_error("Failed to load products") from e

            try:
                products = self._parse(raw)
            except (ValueError, ValidationError) as e:
                if self._strict:
                    logger.error(f"❌ Products file is corrupt: {self._products_file}: {e}")
                    raise exceptions.catalog_corrupted() from e
                logger.error(
                    f"❌ Products file is corrupt, treating as empty: {self._products_file}: {e}"
                )
                return []

            logger.debug(f"Loaded {len(products)} products from {self._products_file}")
            return products

    @staticmethod
    def _parse(raw: str) -> List[Product]:
        """Parse the document text into products."""
        data = json.loads(raw)

        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")

        return [Product.model_validate(item) for item in data]

    # =========================================================================
    # SAVING
    # =========================================================================

    def save_all(self, products: Sequence[Product]) -> None:
        """
        Replace the document with the given collection.

        The previous document stays intact if the write fails.

        Args:
            products: Full ordered collection to persist

        Raises:
            AppException: STORAGE_ERROR if the document cannot be written
        """
        payload = [product.to_document() for product in products]
        directory = self._products_file.parent

        with self._lock:
            tmp_name: Optional[str] = None
            try:
                directory.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=directory,
                    prefix=f".{self._products_file.name}.",
                    suffix=".tmp"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())
                # mkstemp creates 0600; keep the document's existing mode
                os.chmod(tmp_name, self._document_mode())
                os.replace(tmp_name, self._products_file)
                tmp_name = None
            except OSError as e:
                logger.exception(f"Failed to write products file {self._products_file}")
                raise exceptions.storage_error("Failed to save products") from e
            finally:
                if tmp_name is not None:
                    Path(tmp_name).unlink(missing_ok=True)

        logger.debug(f"Saved {len(payload)} products to {self._products_file}")

    def _document_mode(self) -> int:
        """Permission bits for the next document: current ones, else 0666 minus umask."""
        try:
            return stat.S_IMODE(os.stat(self._products_file).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def exists(self) -> bool:
        """Check whether the products document exists."""
        return self._products_file.exists()

    def count(self) -> int:
        """Number of stored products."""
        return len(self.load_all())


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[CatalogStore] = None


def get_store() -> Optional[CatalogStore]:
    """Get the global store instance."""
    return _store_instance


def init_store(products_file: Path, strict: bool = True) -> CatalogStore:
    """
    Initialize the global store instance.

    Args:
        products_file: Path to products.json
        strict: Fail loudly on a corrupt document

    Returns:
        CatalogStore instance
    """
    global _store_instance
    _store_instance = CatalogStore(products_file, strict=strict)
    return _store_instance
