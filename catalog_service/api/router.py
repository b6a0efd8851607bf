"""
==============================================================================
Main API Router
==============================================================================

Combines all endpoint routers under the /api prefix.

==============================================================================
"""

from fastapi import APIRouter

from catalog_service.api.endpoints import health, products


class MainAPIRouter:
    """Main API router combining all endpoint routers."""

    def __init__(self):
        self._router = APIRouter(prefix="/api")
        self._include_routers()

    def _include_routers(self) -> None:
        self._router.include_router(health.router)
        self._router.include_router(products.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


api_router = MainAPIRouter().router
