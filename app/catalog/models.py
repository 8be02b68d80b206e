"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog products.

Products are stored and served with camelCase keys (imageUrl, createdAt,
updatedAt); Python code uses the snake_case attribute names.

==============================================================================
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProductCategory(str, Enum):
    """Fixed set of catalog categories."""

    READY_TO_WEAR = "READY TO WEAR"
    NEW_COLLECTION = "NEW COLLECTION"
    SHOES = "SHOES"

    @classmethod
    def values(cls) -> List[str]:
        """Category names in declaration order."""
        return [category.value for category in cls]


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        id: Opaque unique identifier, assigned on creation
        name: Display name
        description: Free-text description
        price: Unit price, strictly positive
        category: One of ProductCategory
        image_url: Absolute URL of the product image
        created_at: Creation time (UTC), never modified
        updated_at: Last modification time (UTC)
    """

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )

    id: str = Field(..., min_length=1, description="Product identifier")
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(..., min_length=1, description="Product description")
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Unit price")
    category: ProductCategory = Field(..., description="Catalog category")
    image_url: str = Field(..., alias="imageUrl", min_length=1, description="Image URL")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    def to_document(self) -> dict:
        """Serialize to the JSON-compatible camelCase form used on disk and on the wire."""
        return self.model_dump(mode="json", by_alias=True)
