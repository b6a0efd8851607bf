"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM models.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory, get_db
├── models.py     - ProductRecord ORM model
└── init_db.py    - DatabaseInitializer for table setup and seeding

==============================================================================
"""

from .database import DatabaseManager, Base, get_db
from .models import ProductRecord
from .init_db import DatabaseInitializer, init_db

__all__ = [
    "DatabaseManager",
    "Base",
    "get_db",
    "ProductRecord",
    "DatabaseInitializer",
    "init_db",
]
