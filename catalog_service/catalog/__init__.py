"""
==============================================================================
Catalog Package - Product Data Access
==============================================================================

Classes:
--------
- Product: Immutable Pydantic model for catalog items
- ProductRepository: Storage contract used by the query service
- SqlAlchemyProductRepository: ProductRepository over the products table

Functions:
----------
- load_products: Read the JSON seed file

==============================================================================
"""

from .models import Product
from .repository import ProductRepository, SqlAlchemyProductRepository
from .loader import load_products

__all__ = [
    "Product",
    "ProductRepository",
    "SqlAlchemyProductRepository",
    "load_products",
]
