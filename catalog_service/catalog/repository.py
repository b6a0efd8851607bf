"""
==============================================================================
Product Repository Module
==============================================================================

Storage contract used by the catalog query service, and its SQLAlchemy
implementation.

Contract:
---------
- count_all()                -> number of products in the store
- fetch_page(offset, limit)  -> products ordered by id ascending
- fetch_by_code(code)        -> the product with that code, or None

Any SQLAlchemy failure is logged and re-raised as StorageError so the
HTTP layer can map it to a server error.

==============================================================================
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_service.core import exceptions
from catalog_service.db.models import ProductRecord

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """Read-only access to the product store."""

    @abstractmethod
    def count_all(self) -> int:
        """Count all products in the store."""

    @abstractmethod
    def fetch_page(self, offset: int, limit: int) -> List[Product]:
        """Fetch up to ``limit`` products after skipping ``offset``, ordered by id."""

    @abstractmethod
    def fetch_by_code(self, code: str) -> Optional[Product]:
        """Fetch the product with the given code, or None."""


class SqlAlchemyProductRepository(ProductRepository):
    """
    ProductRepository backed by the ``products`` table.

    Attributes:
        _db: Request-scoped database session

    Example:
        >>> repository = SqlAlchemyProductRepository(db_session)
        >>> repository.fetch_page(offset=0, limit=10)
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def count_all(self) -> int:
        try:
            return self._db.query(ProductRecord).count()
        except SQLAlchemyError as e:
            logger.error(f"Failed to count products: {e}")
            raise exceptions.storage_error() from e

    def fetch_page(self, offset: int, limit: int) -> List[Product]:
        try:
            records = (
                self._db.query(ProductRecord)
                .order_by(ProductRecord.id.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch products (offset={offset}, limit={limit}): {e}")
            raise exceptions.storage_error() from e

        return [Product.model_validate(record) for record in records]

    def fetch_by_code(self, code: str) -> Optional[Product]:
        try:
            record = (
                self._db.query(ProductRecord)
                .filter(ProductRecord.code == code)
                .one_or_none()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch product {code!r}: {e}")
            raise exceptions.storage_error() from e

        if record is None:
            return None
        return Product.model_validate(record)
