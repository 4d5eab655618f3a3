"""
==============================================================================
Reading Material Endpoints
==============================================================================

Endpoints for registering, browsing and updating reading materials.

Titles in paths are matched case-insensitively.

==============================================================================
"""

from fastapi import APIRouter, Body, Depends, Query

from app.config import get_settings
from app.core.dependencies import get_material_service
from app.schemas.material import (
    MaterialCreate,
    ProgressUpdate,
    StatusUpdate,
    SummaryUpdate,
)
from app.services.material_service import MaterialService


router = APIRouter(prefix="/materials", tags=["Materials"])


class MaterialController:
    """Controller for reading material operations."""

    def __init__(self, service: MaterialService):
        self._service = service

    def list_materials(self) -> dict:
        """List every material in registration order."""
        materials = self._service.list_materials()
        return {
            "success": True,
            "total": len(materials),
            "materials": materials
        }

    def create(self, data: MaterialCreate) -> dict:
        """Register a new material."""
        return {
            "success": True,
            "material": self._service.create(data)
        }

    def search(self, field: str, value: str) -> dict:
        """Search materials by field."""
        limit = get_settings().search_result_limit
        matched = self._service.search(field, value)
        return {
            "success": True,
            "field": field,
            "value": value,
            "total": len(matched),
            "limited": len(matched) > limit,
            "materials": matched[:limit]
        }

    def get_stats(self) -> dict:
        """Get catalog statistics."""
        return {
            "success": True,
            "stats": self._service.get_stats()
        }

    def get(self, title: str) -> dict:
        """Get one material."""
        return {
            "success": True,
            "material": self._service.get(title)
        }

    def set_status(self, title: str, data: StatusUpdate) -> dict:
        """Change a material status."""
        return {
            "success": True,
            "material": self._service.set_status(title, data.status)
        }

    def edit_summary(self, title: str, data: SummaryUpdate) -> dict:
        """Replace a material summary."""
        return {
            "success": True,
            "material": self._service.edit_summary(title, data.summary)
        }

    def update_progress(self, title: str, data: ProgressUpdate) -> dict:
        """Record book progress."""
        return {
            "success": True,
            "material": self._service.update_progress(title, data.pages_read)
        }


@router.get("")
def list_materials(service: MaterialService = Depends(get_material_service)):
    """List all materials."""
    return MaterialController(service).list_materials()


@router.post("", status_code=201)
def create_material(
    data: MaterialCreate = Body(..., discriminator="kind"),
    service: MaterialService = Depends(get_material_service)
):
    """Register a book, magazine or article."""
    return MaterialController(service).create(data)


@router.get("/search")
def search_materials(
    field: str = Query("title", min_length=1),
    value: str = Query(""),
    service: MaterialService = Depends(get_material_service)
):
    """Case-insensitive substring search on one field."""
    return MaterialController(service).search(field, value)


@router.get("/stats")
def get_catalog_stats(service: MaterialService = Depends(get_material_service)):
    """Get catalog statistics."""
    return MaterialController(service).get_stats()


@router.get("/{title}")
def get_material(title: str, service: MaterialService = Depends(get_material_service)):
    """Get material by title."""
    return MaterialController(service).get(title)


@router.patch("/{title}/status")
def set_material_status(
    title: str,
    data: StatusUpdate,
    service: MaterialService = Depends(get_material_service)
):
    """Set a free-form reading status."""
    return MaterialController(service).set_status(title, data)


@router.patch("/{title}/summary")
def edit_material_summary(
    title: str,
    data: SummaryUpdate,
    service: MaterialService = Depends(get_material_service)
):
    """Replace the summary."""
    return MaterialController(service).edit_summary(title, data)


@router.patch("/{title}/progress")
def update_book_progress(
    title: str,
    data: ProgressUpdate,
    service: MaterialService = Depends(get_material_service)
):
    """Record pages read for a book."""
    return MaterialController(service).update_progress(title, data)
