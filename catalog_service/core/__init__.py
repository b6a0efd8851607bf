"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy and FastAPI exception handlers
- dependencies: FastAPI dependency providers

Usage:
------
    from catalog_service.core import exceptions
    raise exceptions.product_not_found("P999")

==============================================================================
"""

from .exceptions import (
    AppException,
    ProductNotFound,
    StorageError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "ProductNotFound",
    "StorageError",
    "register_exception_handlers",
]
