"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                           products                              │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (INTEGER, PK, AUTO INCREMENT)                                │
    │ code (VARCHAR, UNIQUE, NOT NULL)                                │
    │ name (VARCHAR, NOT NULL)                                        │
    │ description (TEXT, NOT NULL)                                    │
    │ price (NUMERIC(10, 2), NOT NULL)                                │
    └─────────────────────────────────────────────────────────────────┘

Rows are paged in ascending id order.

=============================================================================
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String, Text

from catalog_service.db.database import Base


class ProductRecord(Base):
    """
    Product row as stored in the catalog database.

    Attributes:
        id: Surrogate key, defines the stable listing order
        code: Unique business identifier (e.g. "P100")
        name: Product display name
        description: Free-form description
        price: Non-negative unit price
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<ProductRecord(id={self.id}, code={self.code!r})>"
