"""
==============================================================================
Material Service Module
==============================================================================

Business logic between the API layer and the reading catalog.

This module implements:
- MaterialService: Builds materials from requests and applies catalog
  operations, returning snapshots ready for JSON responses

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from app.catalog.catalog import MaterialCatalog
from app.catalog.models import MATERIAL_TYPES, Material, MaterialKind, ReadingStatus
from app.schemas.material import MaterialCreate


# Module logger
logger = logging.getLogger(__name__)


class MaterialService:
    """
    Reading material service.

    Attributes:
        _catalog: Catalog the service operates on

    Example:
        >>> service = MaterialService(catalog)
        >>> service.create(BookCreate(kind="Livro", title="Dune",
        ...                           author="Frank Herbert", page_count=412))
        >>> service.update_progress("dune", 100)["status"]
        'in progress'
    """

    def __init__(self, catalog: MaterialCatalog) -> None:
        """
        Initialize the material service.

        Args:
            catalog: MaterialCatalog instance
        """
        self._catalog = catalog

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def create(self, data: MaterialCreate) -> Dict[str, Any]:
        """
        Build a material from a create request and register it.

        Raises:
            ValidationError: If the material data is invalid
            DuplicateError: If the title is already registered
        """
        material_cls = MATERIAL_TYPES[MaterialKind(data.kind)]
        material: Material = material_cls(**data.material_fields())

        self._catalog.register(material)
        return material.describe_info()

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_materials(self) -> List[Dict[str, Any]]:
        """Snapshot every material."""
        return self._catalog.list_all()

    def get(self, title: str) -> Dict[str, Any]:
        """Snapshot one material by title."""
        return self._catalog.get(title).describe_info()

    def search(self, field: str, value: str) -> List[Dict[str, Any]]:
        """Search and snapshot matching materials."""
        matches = self._catalog.search(field, value)
        return [material.describe_info() for material in matches]

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return self._catalog.get_stats()

    # =========================================================================
    # UPDATE OPERATIONS
    # =========================================================================

    def set_status(self, title: str, status: str) -> Dict[str, Any]:
        """Set a material status."""
        return self._catalog.set_status(title, status).describe_info()

    def edit_summary(self, title: str, summary: str) -> Dict[str, Any]:
        """Replace a material summary."""
        return self._catalog.edit_summary(title, summary).describe_info()

    def update_progress(self, title: str, pages_read: int) -> Dict[str, Any]:
        """Record reading progress for a book."""
        book = self._catalog.update_progress(title, pages_read)
        if book.status == ReadingStatus.READ.value:
            logger.info(f"Finished reading '{book.title}'")
        return book.describe_info()
