"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Paginated listing and lookup by product code.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from catalog_service.catalog.models import Product
from catalog_service.core.dependencies import get_product_service
from catalog_service.schemas.common import PagedResult
from catalog_service.services.product_service import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def list_products(self, page_number: int) -> PagedResult[Product]:
        """List one page of products."""
        return self._service.list_products(page_number)

    def get_by_code(self, code: str) -> Product:
        """Get product by code; ProductNotFound becomes a 404 problem response."""
        return self._service.get_product_by_code(code)


@router.get("", response_model=PagedResult[Product])
async def list_products(
    page: int = Query(1, description="Page number (1-indexed); values below 1 are served as page 1"),
    service: ProductService = Depends(get_product_service)
):
    """List products, one page at a time."""
    controller = ProductController(service)
    return controller.list_products(page)


@router.get("/{code}", response_model=Product)
async def get_product_by_code(
    code: str,
    service: ProductService = Depends(get_product_service)
):
    """Get product by code."""
    controller = ProductController(service)
    return controller.get_by_code(code)
