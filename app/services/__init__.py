"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing business logic.

This package provides:
- MaterialService: Reading material workflow on top of MaterialCatalog

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ MaterialCatalog │  ← In-memory storage
    └─────────────────┘

Usage:
------
    from app.services import MaterialService

    service = MaterialService(catalog)
    service.set_status("Dune", "read")

==============================================================================
"""

from .material_service import MaterialService

__all__ = [
    "MaterialService",
]
