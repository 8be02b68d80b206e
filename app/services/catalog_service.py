"""
==============================================================================
Catalog Service Module
==============================================================================

Business logic for the product catalog.

This module implements:
- CatalogService: Validation, listing, lookup and CRUD over the store
- ProductPage: One page of a (possibly filtered) product listing

Persistence Model:
-----------------
There is no in-memory cache. Every operation loads the full collection from
the store, and every mutation builds a new collection and saves it in full.
Mutations hold the store lock for the whole load-mutate-save cycle, so
concurrent requests cannot overwrite each other's changes.

A mutation only reports success after the save succeeded; on a storage
failure the AppException from the store propagates to the caller.

==============================================================================
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field

from app.catalog.models import Product
from app.catalog.store import CatalogStore
from app.core import exceptions
from app.utils.validators import IdGenerator, ProductValidator


# Module logger
logger = logging.getLogger(__name__)


class ProductPage(BaseModel):
    """Slice of a product listing plus the size of the whole filtered set."""

    items: List[Product]
    total: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=0)


class CatalogService:
    """
    Service for product catalog operations.

    Attributes:
        _store: CatalogStore used for every read and write
        _validator: ProductValidator for create/update payloads
        _ids: IdGenerator for new products

    Example:
        >>> service = CatalogService(CatalogStore(Path("data/products.json")))
        >>> product = service.create({
        ...     "name": "Tee",
        ...     "description": "Cotton tee",
        ...     "price": 29.99,
        ...     "category": "READY TO WEAR",
        ...     "imageUrl": "https://example.com/a.jpg",
        ... })
        >>> service.get_by_id(product.id).name
        'Tee'
    """

    def __init__(
        self,
        store: CatalogStore,
        validator: ProductValidator = None,
        id_generator: IdGenerator = None
    ) -> None:
        """
        Initialize the catalog service.

        Args:
            store: Backing CatalogStore
            validator: Optional ProductValidator (default instance if None)
            id_generator: Optional IdGenerator (default instance if None)
        """
        self._store = store
        self._validator = validator or ProductValidator()
        self._ids = id_generator or IdGenerator()

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self, data: Mapping[str, Any]) -> List[str]:
        """
        Validate a create/update payload.

        Returns:
            Ordered list of error messages (empty when valid)
        """
        return self._validator.validate(data)

    def _require_valid(self, data: Mapping[str, Any]) -> dict:
        """Validate and clean a payload, raising VALIDATION_ERROR on failure."""
        errors = self.validate(data)
        if errors:
            logger.warning(f"Product rejected: {errors}")
            raise exceptions.validation_failed(errors)
        return self._validator.clean(data)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_products(
        self,
        category: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None
    ) -> ProductPage:
        """
        List products, optionally filtered by category and paginated.

        Args:
            category: Case-insensitive exact category match
            offset: Start position in the filtered set (default 0)
            limit: Maximum items; None or 0 returns everything from offset

        Returns:
            ProductPage with the slice, the filtered total and the
            effective offset/limit
        """
        products = self._store.load_all()

        if category and category.strip():
            wanted = category.strip().lower()
            products = [p for p in products if p.category.value.lower() == wanted]

        total = len(products)
        start = max(offset or 0, 0)
        size = limit if limit and limit > 0 else total

        return ProductPage(
            items=products[start:start + size],
            total=total,
            offset=start,
            limit=size
        )

    def get_by_id(self, product_id: str) -> Product:
        """
        Get product by ID.

        Raises:
            AppException: PRODUCT_NOT_FOUND if no product has this id
        """
        for product in self._store.load_all():
            if product.id == product_id:
                return product

        logger.warning(f"Product not found: {product_id}")
        raise exceptions.product_not_found(product_id)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def create(self, data: Mapping[str, Any]) -> Product:
        """
        Create a product.

        Args:
            data: Payload with name, description, price, category, imageUrl

        Returns:
            Created product with server-assigned id and timestamps

        Raises:
            AppException: VALIDATION_ERROR, or STORAGE_ERROR from the store
        """
        fields = self._require_valid(data)

        with self._store.locked():
            products = self._store.load_all()
            now = self._now()

            product = Product(
                id=self._ids.generate({p.id for p in products}),
                created_at=now,
                updated_at=now,
                **fields
            )

            self._store.save_all([*products, product])

        logger.info(f"✅ Product created: {product.name} ({product.id})")
        return product

    def update(self, product_id: str, data: Mapping[str, Any]) -> Product:
        """
        Replace every mutable field of a product.

        Partial updates are not supported: the payload must carry all fields
        and is validated exactly as for create.

        Raises:
            AppException: VALIDATION_ERROR, PRODUCT_NOT_FOUND, or STORAGE_ERROR
        """
        fields = self._require_valid(data)

        with self._store.locked():
            products = self._store.load_all()
            index = self._index_of(products, product_id)
            existing = products[index]

            updated = existing.model_copy(update={
                **fields,
                "updated_at": self._advance(existing.updated_at),
            })

            self._store.save_all([*products[:index], updated, *products[index + 1:]])

        logger.info(f"✅ Product updated: {updated.name} ({updated.id})")
        return updated

    def delete(self, product_id: str) -> Product:
        """
        Delete a product.

        Returns:
            The removed product

        Raises:
            AppException: PRODUCT_NOT_FOUND, or STORAGE_ERROR
        """
        with self._store.locked():
            products = self._store.load_all()
            index = self._index_of(products, product_id)
            removed = products[index]

            self._store.save_all(products[:index] + products[index + 1:])

        logger.info(f"🗑️ Product deleted: {removed.name} ({removed.id})")
        return removed

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    @staticmethod
    def _index_of(products: List[Product], product_id: str) -> int:
        """Position of a product in the collection."""
        for index, product in enumerate(products):
            if product.id == product_id:
                return index

        logger.warning(f"Product not found: {product_id}")
        raise exceptions.product_not_found(product_id)

    @staticmethod
    def _now() -> datetime:
        """Current UTC time."""
        return datetime.now(timezone.utc)

    @classmethod
    def _advance(cls, previous: datetime) -> datetime:
        """A timestamp strictly later than previous."""
        now = cls._now()
        if previous.tzinfo is None:
            previous = previous.replace(tzinfo=timezone.utc)
        return max(now, previous + timedelta(microseconds=1))
