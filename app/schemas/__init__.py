"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request schemas using Pydantic for validation.

==============================================================================
"""

from .material import (
    ArticleCreate,
    BookCreate,
    MagazineCreate,
    MaterialCreate,
    ProgressUpdate,
    StatusUpdate,
    SummaryUpdate,
)

__all__ = [
    "ArticleCreate",
    "BookCreate",
    "MagazineCreate",
    "MaterialCreate",
    "ProgressUpdate",
    "StatusUpdate",
    "SummaryUpdate",
]
