"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, client, catalog data and an in-memory repository.

==============================================================================
"""

import os

# Keep application startup off the on-disk database and seed file
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

from decimal import Decimal
from typing import Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_service.main import app
from catalog_service.catalog.models import Product
from catalog_service.catalog.repository import ProductRepository
from catalog_service.db.database import Base, get_db
from catalog_service.db.models import ProductRecord


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

def make_products(count: int) -> List[Product]:
    """Build ``count`` products with codes P100, P101, ..."""
    products = []
    for index in range(count):
        if index == 0:
            products.append(Product(
                code="P100",
                name="The Hunger Games",
                description="Winning will make you famous. Losing means certain death...",
                price=Decimal("34.0"),
            ))
            continue
        products.append(Product(
            code=f"P{100 + index}",
            name=f"Product {100 + index}",
            description=f"Description for product {100 + index}",
            price=Decimal(10 + index),
        ))
    return products


@pytest.fixture
def catalog_products() -> List[Product]:
    """The fifteen products used across the catalog tests."""
    return make_products(15)


@pytest.fixture
def seeded_db(db: Session, catalog_products: List[Product]) -> Session:
    """Database holding the fifteen catalog products."""
    db.add_all([
        ProductRecord(
            code=p.code,
            name=p.name,
            description=p.description,
            price=p.price,
        )
        for p in catalog_products
    ])
    db.commit()
    return db


# ============================================================================
# IN-MEMORY REPOSITORY
# ============================================================================

class InMemoryProductRepository(ProductRepository):
    """ProductRepository over a list, recording every call."""

    def __init__(self, products: List[Product]):
        self._products = list(products)
        self._by_code: Dict[str, Product] = {p.code: p for p in products}
        self.calls: List[tuple] = []

    def count_all(self) -> int:
        self.calls.append(("count_all",))
        return len(self._products)

    def fetch_page(self, offset: int, limit: int) -> List[Product]:
        self.calls.append(("fetch_page", offset, limit))
        return self._products[offset:offset + limit]

    def fetch_by_code(self, code: str) -> Optional[Product]:
        self.calls.append(("fetch_by_code", code))
        return self._by_code.get(code)


@pytest.fixture
def repository(catalog_products: List[Product]) -> InMemoryProductRepository:
    """In-memory repository holding the fifteen catalog products."""
    return InMemoryProductRepository(catalog_products)


@pytest.fixture
def make_repository():
    """Factory for in-memory repositories of a given size."""
    def _make(count: int) -> InMemoryProductRepository:
        return InMemoryProductRepository(make_products(count))
    return _make
