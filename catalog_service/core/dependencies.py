"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency providers wiring request-scoped sessions into the catalog
service.

Dependency Graph:
----------------
    get_db ──► SqlAlchemyProductRepository ──┐
                                             ├──► get_product_service
    get_settings ──► page_size ──────────────┘

==============================================================================
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog_service.catalog.repository import SqlAlchemyProductRepository
from catalog_service.config import Settings, get_settings
from catalog_service.db.database import get_db
from catalog_service.services.product_service import ProductService


def get_product_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> ProductService:
    """
    FastAPI dependency that builds a ProductService for the request.

    Usage:
        @router.get("/products")
        async def list_products(service: ProductService = Depends(get_product_service)):
            return service.list_products(1)
    """
    return ProductService(SqlAlchemyProductRepository(db), settings.page_size)
