"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across all API endpoints.

==============================================================================
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Machine-readable part of an error response."""
    code: str
    message: str
    timestamp: str
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    success: bool = Field(default=False)
    message: str
    error: ErrorDetail
    errors: Optional[List[str]] = None
