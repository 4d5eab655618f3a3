"""
==============================================================================
Material Schemas Module
==============================================================================

Request schemas for reading material operations.

Create requests are discriminated by ``kind``:
- "Livro"   → BookCreate
- "Revista" → MagazineCreate
- "Artigo"  → ArticleCreate

Title/author/link rules are enforced by the material models themselves,
so a blank title is reported as a catalog VALIDATION_ERROR.

==============================================================================
"""

from datetime import date
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel


# =============================================================================
# CREATE SCHEMAS
# =============================================================================

class MaterialCreateBase(BaseModel):
    """Fields shared by every material kind."""
    title: str
    author: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def material_fields(self) -> Dict[str, Any]:
        """Constructor keyword arguments for the matching material model."""
        return self.model_dump(exclude={"kind"})


class BookCreate(MaterialCreateBase):
    """Book creation request."""
    kind: Literal["Livro"]
    page_count: int


class MagazineCreate(MaterialCreateBase):
    """Magazine creation request."""
    kind: Literal["Revista"]
    edition: Optional[str] = None


class ArticleCreate(MaterialCreateBase):
    """Article creation request."""
    kind: Literal["Artigo"]
    link: Optional[str] = None


MaterialCreate = Union[BookCreate, MagazineCreate, ArticleCreate]


# =============================================================================
# UPDATE SCHEMAS
# =============================================================================

class StatusUpdate(BaseModel):
    """Set a free-form reading status."""
    status: str


class SummaryUpdate(BaseModel):
    """Replace the material summary."""
    summary: str


class ProgressUpdate(BaseModel):
    """Record pages read for a book. Range is checked against page_count."""
    pages_read: int
