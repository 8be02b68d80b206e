"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic.

This package provides:
- Common: Shared error envelopes
- Product: Product payload and response schemas

==============================================================================
"""

from .common import ErrorDetail, ErrorResponse
from .product import (
    ProductPayload,
    ProductResponse,
    ProductListResponse,
    CategoryListResponse,
)

__all__ = [
    # Common
    "ErrorDetail",
    "ErrorResponse",
    # Product
    "ProductPayload",
    "ProductResponse",
    "ProductListResponse",
    "CategoryListResponse",
]
