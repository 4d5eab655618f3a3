"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the reading catalog.

The catalog lives on ``app.state.catalog`` (created during application
startup) and is handed to endpoints through these dependencies rather
than through a module-level global.

Dependency Hierarchy:
--------------------
            ┌──────────────────────┐
            │    get_catalog()     │
            └──────────┬───────────┘
                       │
            ┌──────────▼───────────┐
            │ get_material_service │
            └──────────────────────┘

Usage Examples:
--------------
    @router.get("/materials")
    async def list_materials(service: MaterialService = Depends(get_material_service)):
        return service.list_materials()

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from app.catalog.catalog import MaterialCatalog
from app.core import exceptions
from app.services.material_service import MaterialService


# Module logger
logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> MaterialCatalog:
    """
    Get the catalog owned by the running application.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup has not created it
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        logger.error("Catalog requested before application startup")
        raise exceptions.catalog_not_loaded()
    return catalog


def get_material_service(
    catalog: MaterialCatalog = Depends(get_catalog)
) -> MaterialService:
    """Build a MaterialService bound to the application catalog."""
    return MaterialService(catalog)
