"""
Application Exception Handling

Single AppException class for all catalog errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", 404)
        raise AppException("Validation failed", "VALIDATION_ERROR", 400,
                           errors=["Product name is required"])

    Error Codes:
        Caller errors:
            - VALIDATION_ERROR (400)
            - PRODUCT_NOT_FOUND (404)

        Storage:
            - STORAGE_ERROR (500)
            - CATALOG_CORRUPTED (500)
            - CATALOG_NOT_LOADED (500)

        General:
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
        errors: Optional[List[str]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
            errors: Ordered list of validation messages (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.errors = list(errors) if errors else []
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    @property
    def is_server_fault(self) -> bool:
        """True for errors caused by the service rather than the caller."""
        return self.status_code >= 500

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        if self.errors:
            error_dict["errors"] = self.errors

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    if exc.is_server_fault:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report malformed requests (non-object bodies, bad query values)
    with the same envelope as product validation failures.
    """
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)

    return JSONResponse(
        status_code=400,
        content=validation_failed(messages).to_dict()
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic 500 response."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=internal_error().to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def validation_failed(errors: List[str]) -> AppException:
    """Create validation failure exception carrying every message."""
    return AppException("Validation failed", "VALIDATION_ERROR", 400, errors=errors)


def product_not_found(product_id: Optional[str] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id else {}
    return AppException("Product not found", "PRODUCT_NOT_FOUND", 404, details)


def storage_error(message: str = "Failed to access product storage") -> AppException:
    """Create storage failure exception."""
    return AppException(message, "STORAGE_ERROR", 500)


def catalog_corrupted() -> AppException:
    """Create exception for a products document that cannot be parsed."""
    return AppException(
        "Product storage is unreadable",
        "CATALOG_CORRUPTED",
        500
    )


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
