"""
==============================================================================
Catalog Package - Reading Material Management
==============================================================================

Reading materials and the catalog that owns them.

Classes:
--------
- Material: Base pydantic model (Book, Magazine, Article variants)
- MaterialCatalog: Catalog manager with search capabilities

==============================================================================
"""

from .models import (
    Article,
    Book,
    Magazine,
    Material,
    MaterialKind,
    ReadingStatus,
)
from .catalog import MaterialCatalog, SearchField

__all__ = [
    "Article",
    "Book",
    "Magazine",
    "Material",
    "MaterialKind",
    "ReadingStatus",
    "MaterialCatalog",
    "SearchField",
]
