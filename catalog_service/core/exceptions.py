"""
Application Exception Handling

AppException base class for all application errors with FastAPI integration.
Errors are rendered as problem documents (application/problem+json).
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


class AppException(Exception):
    """
    Unified application exception.

    Provides a consistent error response format across the entire API.

    Usage:
        raise AppException("Catalog unavailable", "STORAGE_ERROR", 500)

    Error Codes:
        Catalog:
            - PRODUCT_NOT_FOUND (404)

        General:
            - STORAGE_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 400,
        title: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message, rendered as "detail"
            error_code: Machine-readable error code (e.g., "PRODUCT_NOT_FOUND")
            status_code: HTTP status code (default: 400)
            title: Short summary of the problem type (derived from error_code if None)
            details: Additional error context (optional)
        """
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.title = title or error_code.replace("_", " ").title()
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self, instance: Optional[str] = None) -> Dict[str, Any]:
        """Convert exception to a problem document for the JSON response."""
        problem = {
            "type": "about:blank",
            "title": self.title,
            "status": self.status_code,
            "detail": self.message,
            "code": self.error_code,
            "timestamp": self.timestamp,
        }

        if instance:
            problem["instance"] = instance

        if self.details:
            problem["details"] = self.details

        return problem


class ProductNotFound(AppException):
    """
    No product exists for the requested code.

    The only error condition of the catalog query core. Carries the
    looked-up code and nothing else.
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(
            f"Product not found {code}",
            "PRODUCT_NOT_FOUND",
            404,
            title="Product Not Found",
            details={"code": code}
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductNotFound):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(("ProductNotFound", self.code))

    def __repr__(self) -> str:
        return f"ProductNotFound(code={self.code!r})"


class StorageError(AppException):
    """Failure of the storage layer (connectivity, timeouts, bad SQL)."""

    def __init__(self, message: str = "Product storage is unavailable"):
        super().__init__(message, "STORAGE_ERROR", 500, title="Storage Error")


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to a problem JSON response.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(instance=request.url.path),
        media_type=PROBLEM_MEDIA_TYPE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(code: str) -> ProductNotFound:
    """Create product not found exception."""
    return ProductNotFound(code)


def storage_error(message: str = "Product storage is unavailable") -> StorageError:
    """Create storage failure exception."""
    return StorageError(message)
