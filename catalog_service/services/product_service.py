"""
==============================================================================
Product Service Module
==============================================================================

Read-only query service over the product catalog.

This module implements:
- ProductService: paginated listing and lookup by code
- resolve_or_not_found: maps an absent lookup to a ProductNotFound value

Lookup Flow:
-----------
    find_by_code(code) ──► Optional[Product]
                               │
                resolve_or_not_found(code, ...)
                               │
               ┌───────────────┴───────────────┐
               ▼                               ▼
            Product                   ProductNotFound(code)
                                               │
                          get_product_by_code raises it

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from catalog_service.catalog.models import Product
from catalog_service.catalog.repository import ProductRepository
from catalog_service.core import exceptions
from catalog_service.core.exceptions import ProductNotFound
from catalog_service.schemas.common import PagedResult


# Module logger
logger = logging.getLogger(__name__)


LookupResult = Union[Product, ProductNotFound]


def resolve_or_not_found(code: str, product: Optional[Product]) -> LookupResult:
    """
    Turn an optional lookup result into a Product or a ProductNotFound.

    The not-found variant is returned, not raised; callers branch on it
    with isinstance.

    Args:
        code: The code that was looked up
        product: Lookup result (None when no row matched)

    Returns:
        The product unchanged, or ProductNotFound carrying ``code``
    """
    if product is None:
        return exceptions.product_not_found(code)
    return product


class ProductService:
    """
    Catalog query service.

    Every operation is a stateless read against the injected repository.

    Attributes:
        _repository: Storage collaborator
        _page_size: Fixed number of products per page

    Example:
        >>> service = ProductService(SqlAlchemyProductRepository(db), page_size=10)
        >>> page = service.list_products(2)
        >>> page.total_elements
        15
    """

    def __init__(self, repository: ProductRepository, page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self._repository = repository
        self._page_size = page_size

    def list_products(self, page_number: int) -> PagedResult[Product]:
        """
        Get one page of the catalog.

        Pages beyond the last one come back with empty data and accurate
        metadata. Page numbers below 1 are treated as page 1.

        Args:
            page_number: 1-based page index

        Returns:
            PagedResult with up to page_size products
        """
        page_number = max(page_number, 1)
        offset = (page_number - 1) * self._page_size

        total_elements = self._repository.count_all()

        # Past the last row there is nothing to fetch; huge offsets also
        # overflow the driver's integer binding
        if offset >= total_elements:
            products = []
        else:
            products = self._repository.fetch_page(offset=offset, limit=self._page_size)

        logger.debug(
            f"Page {page_number}: {len(products)} of {total_elements} products "
            f"(page_size={self._page_size})"
        )

        return PagedResult[Product].create(
            data=products,
            total_elements=total_elements,
            page_number=page_number,
            page_size=self._page_size,
        )

    def find_by_code(self, code: str) -> Optional[Product]:
        """
        Look up a single product by its code.

        Returns:
            The matching product, or None
        """
        return self._repository.fetch_by_code(code)

    def get_product_by_code(self, code: str) -> Product:
        """
        Get a product by code for the HTTP layer.

        Raises:
            ProductNotFound: If no product has this code
        """
        result = resolve_or_not_found(code, self.find_by_code(code))

        if isinstance(result, ProductNotFound):
            logger.info(f"Product not found: {code!r}")
            raise result

        return result
