"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_service.db.database import get_db
from catalog_service.db.models import ProductRecord


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, db: Session):
        self._db = db

    def check_database(self) -> str:
        """Check database connectivity."""
        try:
            self._db.execute(text("SELECT 1"))
            return "healthy"
        except SQLAlchemyError as e:
            logger.warning(f"Database health check failed: {e}")
            return "unhealthy"

    def count_products(self) -> int:
        """Count catalog rows, or -1 when the table can't be read."""
        try:
            return self._db.query(ProductRecord).count()
        except SQLAlchemyError as e:
            logger.warning(f"Catalog health check failed: {e}")
            return -1

    def get_health(self) -> dict:
        """Get full health status."""
        db_status = self.check_database()
        products = self.count_products() if db_status == "healthy" else -1
        catalog_status = "healthy" if products >= 0 else "unavailable"

        overall = "healthy" if catalog_status == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "database": db_status,
                "catalog": catalog_status
            },
            "details": {
                "products": max(products, 0)
            }
        }


@router.get("")
async def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns system status including API, database, and catalog.
    """
    controller = HealthController(db)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
