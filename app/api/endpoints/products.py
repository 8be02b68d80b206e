"""
==============================================================================
Product Catalog Endpoints
==============================================================================

REST endpoints for listing, reading, creating, updating and deleting
catalog products.

==============================================================================
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from app.catalog.models import ProductCategory
from app.core.dependencies import get_catalog_service, get_list_params
from app.schemas.common import ErrorResponse
from app.schemas.product import (
    CategoryListResponse,
    ProductListResponse,
    ProductPayload,
    ProductResponse,
)
from app.services.catalog_service import CatalogService


router = APIRouter(prefix="/products", tags=["Products"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    404: {"model": ErrorResponse, "description": "Product not found"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: CatalogService):
        self._service = service

    def list_products(self, params: Dict[str, Any]) -> ProductListResponse:
        """List products with category filter and pagination."""
        page = self._service.list_products(**params)
        return ProductListResponse(
            data=page.items,
            total=page.total,
            offset=page.offset,
            limit=page.limit
        )

    def get_categories(self) -> CategoryListResponse:
        """Get all categories."""
        return CategoryListResponse(data=ProductCategory.values())

    def get(self, product_id: str) -> ProductResponse:
        """Get product by ID."""
        return ProductResponse(data=self._service.get_by_id(product_id))

    def create(self, payload: ProductPayload) -> ProductResponse:
        """Create product."""
        product = self._service.create(payload.to_input())
        return ProductResponse(message="Product created successfully", data=product)

    def update(self, product_id: str, payload: ProductPayload) -> ProductResponse:
        """Replace product fields."""
        product = self._service.update(product_id, payload.to_input())
        return ProductResponse(message="Product updated successfully", data=product)

    def delete(self, product_id: str) -> ProductResponse:
        """Delete product."""
        product = self._service.delete(product_id)
        return ProductResponse(message="Product deleted successfully", data=product)


@router.get("", response_model=ProductListResponse, responses={500: ERROR_RESPONSES[500]})
async def list_products(
    params: Dict[str, Any] = Depends(get_list_params),
    service: CatalogService = Depends(get_catalog_service)
):
    """List products with optional category filter and offset/limit pagination."""
    controller = ProductController(service)
    return controller.list_products(params)


# Registered before /{product_id}, so "categories" is never read as an id.
@router.get("/categories", response_model=CategoryListResponse)
async def get_categories(service: CatalogService = Depends(get_catalog_service)):
    """Get all product categories."""
    controller = ProductController(service)
    return controller.get_categories()


@router.get("/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
async def get_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Get product by ID."""
    controller = ProductController(service)
    return controller.get(product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES
)
async def create_product(
    payload: ProductPayload,
    service: CatalogService = Depends(get_catalog_service)
):
    """Create a new product. Id and timestamps are assigned by the server."""
    controller = ProductController(service)
    return controller.create(payload)


@router.put("/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
async def update_product(
    product_id: str,
    payload: ProductPayload,
    service: CatalogService = Depends(get_catalog_service)
):
    """Update a product. Every field must be supplied."""
    controller = ProductController(service)
    return controller.update(product_id, payload)


@router.delete("/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
async def delete_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service)
):
    """Delete a product and return the removed record."""
    controller = ProductController(service)
    return controller.delete(product_id)
