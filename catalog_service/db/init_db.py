"""
==============================================================================
Database Initialization Module
==============================================================================

Database initialization and catalog seeding.

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. Count existing products
3. Seed products from the JSON file if the table is empty
4. Log initialization status

Usage:
------
    from catalog_service.db import init_db

    init_db()

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from catalog_service.catalog.loader import load_products
from catalog_service.catalog.models import Product
from catalog_service.config import Settings, get_settings
from catalog_service.db.database import DatabaseManager
from catalog_service.db.models import ProductRecord


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager instance
        _settings: Application settings
        _session: Optional externally managed session

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        session: Optional[Session] = None,
        settings: Optional[Settings] = None
    ) -> None:
        """
        Initialize the database initializer.

        Args:
            db_manager: Optional DatabaseManager instance (singleton if None)
            session: Optional existing session (a new one per call if None)
            settings: Optional settings (global settings if None)
        """
        self._db_manager = db_manager or DatabaseManager()
        self._settings = settings or get_settings()
        self._session = session

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    def _get_session(self) -> Session:
        if self._session is not None:
            return self._session
        return self._db_manager.get_session()

    def _release(self, session: Session) -> None:
        if self._session is None:
            session.close()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables from ORM models."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    # =========================================================================
    # CATALOG SEEDING
    # =========================================================================

    def product_count(self) -> int:
        """Count rows in the products table."""
        session = self._get_session()
        try:
            return session.query(ProductRecord).count()
        finally:
            self._release(session)

    def seed_products(self, products: Iterable[Product]) -> int:
        """
        Insert products into an empty catalog.

        Nothing is written when the table already holds rows.

        Args:
            products: Products to insert, in listing order

        Returns:
            Number of rows inserted
        """
        session = self._get_session()

        try:
            existing = session.query(ProductRecord).count()
            if existing:
                logger.info(f"Catalog already holds {existing} products, skipping seed")
                return 0

            records = [
                ProductRecord(
                    code=product.code,
                    name=product.name,
                    description=product.description,
                    price=product.price,
                )
                for product in products
            ]
            session.add_all(records)
            session.commit()

            logger.info(f"✅ Seeded {len(records)} products")
            return len(records)

        except Exception as e:
            session.rollback()
            logger.error(f"Failed to seed products: {e}")
            raise
        finally:
            self._release(session)

    def seed_from_file(self, products_file: Optional[Path] = None) -> int:
        """
        Seed the catalog from a JSON file.

        A missing file is logged and treated as nothing to seed.

        Returns:
            Number of rows inserted
        """
        products_file = products_file or self._settings.products_path

        if not products_file.exists():
            logger.warning(f"⚠️ Products file not found: {products_file}")
            return 0

        return self.seed_products(load_products(products_file))

    # =========================================================================
    # INITIALIZATION METHODS
    # =========================================================================

    def initialize(self) -> None:
        """
        Perform full database initialization.

        Creates tables, then seeds the catalog when seed_on_startup is set.
        """
        logger.info("=" * 60)
        logger.info("Initializing database...")
        logger.info("=" * 60)

        self.create_tables()

        if self._settings.seed_on_startup:
            self.seed_from_file()

        logger.info(f"Catalog contains {self.product_count()} products")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def init_db() -> None:
    """
    Initialize the database at application startup.

    Usage:
        from catalog_service.db import init_db
        init_db()
    """
    DatabaseInitializer().initialize()
