"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for the product endpoints.

The request payload is deliberately loose: every field is optional and
untyped so that missing or malformed values reach ProductValidator and are
reported together as validation messages.

==============================================================================
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.catalog.models import Product


class ProductPayload(BaseModel):
    """Create/update request body. Updates must supply every field."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Tee",
                "description": "Cotton tee",
                "price": 29.99,
                "category": "READY TO WEAR",
                "imageUrl": "https://example.com/a.jpg",
            }
        },
    )

    name: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    category: Optional[Any] = None
    image_url: Optional[Any] = Field(default=None, alias="imageUrl")

    def to_input(self) -> Dict[str, Any]:
        """Payload keyed by wire field names, as the service expects."""
        return self.model_dump(by_alias=True)


class ProductResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    message: Optional[str] = None
    data: Product


class ProductListResponse(BaseModel):
    """Paginated product listing response."""
    success: bool = Field(default=True)
    data: List[Product]
    total: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=0)


class CategoryListResponse(BaseModel):
    """Available categories response."""
    success: bool = Field(default=True)
    data: List[str]
