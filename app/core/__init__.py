"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException class, error factories and FastAPI handlers
- dependencies: FastAPI dependency injection functions

Usage:
------
    from app.core import AppException
    from app.core import exceptions
    raise exceptions.product_not_found(product_id)

    from app.core.dependencies import get_catalog_service

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "register_exception_handlers",
]
