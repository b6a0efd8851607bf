"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductService  │  ← Pagination and lookup rules
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← Data Access (via ORM)
    └─────────────────┘

Usage:
------
    from catalog_service.services import ProductService

    service = ProductService(SqlAlchemyProductRepository(db), page_size=10)
    page = service.list_products(1)

==============================================================================
"""

from .product_service import LookupResult, ProductService, resolve_or_not_found

__all__ = [
    "LookupResult",
    "ProductService",
    "resolve_or_not_found",
]
