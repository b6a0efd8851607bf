"""
==============================================================================
Repository and Initialization Tests
==============================================================================

Tests for the SQLAlchemy product repository, the seed loader and the
database initializer.

==============================================================================
"""

import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from catalog_service.catalog.loader import load_products
from catalog_service.catalog.repository import SqlAlchemyProductRepository
from catalog_service.config import Settings
from catalog_service.core.exceptions import StorageError
from catalog_service.db.init_db import DatabaseInitializer
from catalog_service.db.models import ProductRecord


class TestSqlAlchemyProductRepository:
    """Tests for the products table repository."""

    def test_count_all(self, seeded_db):
        """Test count matches the seeded rows."""
        assert SqlAlchemyProductRepository(seeded_db).count_all() == 15

    def test_fetch_page_orders_by_id(self, seeded_db):
        """Test pages are ordered by ascending id."""
        repository = SqlAlchemyProductRepository(seeded_db)

        page = repository.fetch_page(offset=10, limit=10)

        assert [p.code for p in page] == ["P110", "P111", "P112", "P113", "P114"]

    def test_fetch_page_past_end(self, seeded_db):
        """Test offset past the end returns nothing."""
        assert SqlAlchemyProductRepository(seeded_db).fetch_page(offset=30, limit=10) == []

    def test_fetch_by_code(self, seeded_db):
        """Test exact code lookup maps the row to a Product."""
        product = SqlAlchemyProductRepository(seeded_db).fetch_by_code("P100")

        assert product is not None
        assert product.name == "The Hunger Games"
        assert product.price == Decimal("34.00")

    def test_fetch_by_code_missing(self, seeded_db):
        """Test unknown code returns None."""
        assert SqlAlchemyProductRepository(seeded_db).fetch_by_code("") is None

    def test_sqlalchemy_errors_become_storage_errors(self):
        """Test driver failures are re-raised as StorageError."""
        session = MagicMock()
        session.query.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        repository = SqlAlchemyProductRepository(session)

        with pytest.raises(StorageError) as exc_info:
            repository.count_all()
        assert isinstance(exc_info.value.__cause__, OperationalError)

        with pytest.raises(StorageError):
            repository.fetch_page(offset=0, limit=10)

        with pytest.raises(StorageError):
            repository.fetch_by_code("P100")


class TestLoadProducts:
    """Tests for the JSON seed loader."""

    def test_loads_bundled_seed_file(self):
        """Test the shipped seed file holds fifteen products."""
        from pathlib import Path

        products = load_products(Path(__file__).parent.parent / "data" / "products.json")

        assert len(products) == 15
        assert products[0].code == "P100"
        assert products[0].price == Decimal("34.0")

    def test_skips_invalid_and_duplicate_entries(self, tmp_path):
        """Test bad entries are skipped, first duplicate wins."""
        seed = tmp_path / "products.json"
        seed.write_text(json.dumps([
            {"code": "A1", "name": "First", "description": "", "price": 1.10},
            {"code": "A1", "name": "Duplicate", "description": "", "price": 2},
            {"code": "", "name": "No code", "description": "", "price": 3},
            {"code": "A2", "name": "Negative", "description": "", "price": -1},
            {"code": "A3", "name": "Third", "price": 4},
        ]))

        products = load_products(seed)

        assert [p.code for p in products] == ["A1", "A3"]
        assert products[0].price == Decimal("1.10")
        assert products[1].description == ""

    def test_rejects_non_list(self, tmp_path):
        """Test a JSON object at the top level is an error."""
        seed = tmp_path / "products.json"
        seed.write_text(json.dumps({"code": "A1"}))

        with pytest.raises(ValueError):
            load_products(seed)

    def test_missing_file(self, tmp_path):
        """Test missing seed file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_products(tmp_path / "missing.json")


class TestDatabaseInitializer:
    """Tests for catalog seeding."""

    def test_seed_products_into_empty_table(self, db, catalog_products):
        """Test seeding inserts every product in order."""
        initializer = DatabaseInitializer(db_manager=MagicMock(), session=db, settings=Settings())

        inserted = initializer.seed_products(catalog_products)

        assert inserted == 15
        codes = [r.code for r in db.query(ProductRecord).order_by(ProductRecord.id).all()]
        assert codes == [p.code for p in catalog_products]

    def test_seed_skips_populated_table(self, seeded_db, catalog_products):
        """Test seeding is a no-op when products exist."""
        initializer = DatabaseInitializer(db_manager=MagicMock(), session=seeded_db, settings=Settings())

        assert initializer.seed_products(catalog_products) == 0
        assert initializer.product_count() == 15

    def test_seed_from_missing_file(self, db, tmp_path):
        """Test a missing seed file seeds nothing."""
        initializer = DatabaseInitializer(db_manager=MagicMock(), session=db, settings=Settings())

        assert initializer.seed_from_file(tmp_path / "missing.json") == 0
        assert initializer.product_count() == 0

    def test_initialize_honours_seed_flag(self, db):
        """Test initialize creates tables and skips seeding when disabled."""
        db_manager = MagicMock()
        initializer = DatabaseInitializer(
            db_manager=db_manager,
            session=db,
            settings=Settings(seed_on_startup=False),
        )

        initializer.initialize()

        db_manager.create_tables.assert_called_once()
        assert initializer.product_count() == 0
