"""
==============================================================================
Material Models Module
==============================================================================

Pydantic models for reading materials.

Hierarchy:
---------
    Material            title, author, kind, dates, status, summary
    ├── Book            page_count, pages_read (progress tracking)
    ├── Magazine        edition
    └── Article         link (must start with "http")

Book Status Derivation:
----------------------
    update_progress(0 < n < page_count)  →  "in progress"
    update_progress(page_count)          →  "read"

change_status() accepts any string, so custom statuses remain possible.

==============================================================================
"""

import enum
from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.core import exceptions


# =============================================================================
# ENUMS
# =============================================================================

class MaterialKind(str, enum.Enum):
    """
    Material kind enumeration.

    The labels are stored data values and are kept as registered:

    - BOOK: "Livro"
    - MAGAZINE: "Revista"
    - ARTICLE: "Artigo"
    """

    BOOK = "Livro"
    MAGAZINE = "Revista"
    ARTICLE = "Artigo"

    def __str__(self) -> str:
        """Return the enum value as string."""
        return self.value


class ReadingStatus(str, enum.Enum):
    """Well-known reading statuses. Material.status is not restricted to these."""

    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    READ = "read"

    def __str__(self) -> str:
        return self.value


REQUIRED_FIELDS = ("title", "author", "kind")


def _to_app_error(exc: PydanticValidationError, data: Dict[str, Any]) -> exceptions.ValidationError:
    """Translate a pydantic construction failure into a ValidationError."""
    fields: List[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        name = str(loc[0]) if loc else "__root__"
        if name not in fields:
            fields.append(name)

    if any(name in REQUIRED_FIELDS for name in fields):
        return exceptions.missing_required_fields(
            [name for name in fields if name in REQUIRED_FIELDS]
        )

    if fields == ["link"]:
        return exceptions.invalid_link(str(data.get("link")))

    return exceptions.validation_error(
        f"Invalid material data: {', '.join(fields)}",
        fields
    )


# =============================================================================
# BASE MATERIAL
# =============================================================================

class Material(BaseModel):
    """
    Base reading material.

    Construction fails with ``ValidationError`` (the application error, not
    pydantic's) when title, author or kind is missing or blank.

    Attributes:
        title: Display title, unique per catalog (case-insensitive)
        author: Author or publisher
        kind: MaterialKind tag
        start_date: Date reading started (optional)
        end_date: Date reading finished (optional)
        status: Free-form reading status, "not started" on creation
        summary: Reader's summary, empty on creation

    Example:
        >>> material = Material(title="Notes", author="Me", kind=MaterialKind.ARTICLE)
        >>> material.change_status("paused")
        >>> material.describe_info()["status"]
        'paused'
    """

    title: str = Field(..., description="Material title")
    author: str = Field(..., description="Author name")
    kind: MaterialKind = Field(..., description="Material kind")
    start_date: Optional[date] = Field(default=None, description="Reading start date")
    end_date: Optional[date] = Field(default=None, description="Reading end date")
    status: str = Field(default=ReadingStatus.NOT_STARTED.value)
    summary: str = Field(default="")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise _to_app_error(exc, data) from exc

    @field_validator("title", "author")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v

    @property
    def kind_label(self) -> str:
        """Kind as its stored label."""
        return MaterialKind(self.kind).value

    def change_status(self, new_status: str) -> None:
        """Set the reading status. Any value is accepted."""
        self.status = new_status

    def edit_summary(self, new_summary: str) -> None:
        """Overwrite the summary."""
        self.summary = new_summary

    def describe_info(self) -> Dict[str, Any]:
        """
        Build a snapshot of the current state.

        Returns:
            New dict with base fields; variants add their own fields
        """
        return {
            "title": self.title,
            "author": self.author,
            "kind": self.kind_label,
            "status": self.status,
            "summary": self.summary,
            "start_date": self.start_date,
            "end_date": self.end_date,
        }


# =============================================================================
# VARIANTS
# =============================================================================

class Book(Material):
    """
    Book with page-based progress tracking.

    ``pages_read`` starts at 0 and is only changed through
    ``update_progress``, which keeps it within ``0..page_count``.
    """

    kind: Literal[MaterialKind.BOOK] = MaterialKind.BOOK
    page_count: int = Field(..., gt=0, description="Total number of pages")

    _pages_read: int = PrivateAttr(default=0)

    @property
    def pages_read(self) -> int:
        """Pages read so far."""
        return self._pages_read

    @property
    def progress_percent(self) -> float:
        """Reading progress as a percentage of page_count."""
        return round(self._pages_read * 100.0 / self.page_count, 1)

    def update_progress(self, pages_read: int) -> None:
        """
        Record pages read and derive the status.

        Args:
            pages_read: Pages read so far (0..page_count)

        Raises:
            ValidationError: If pages_read is negative or above page_count
        """
        if pages_read < 0 or pages_read > self.page_count:
            raise exceptions.invalid_progress(pages_read, self.page_count)

        self._pages_read = pages_read
        self.change_status(
            ReadingStatus.READ.value
            if pages_read == self.page_count
            else ReadingStatus.IN_PROGRESS.value
        )

    def describe_info(self) -> Dict[str, Any]:
        info = super().describe_info()
        info.update(
            page_count=self.page_count,
            pages_read=self.pages_read,
            progress_percent=self.progress_percent,
        )
        return info


class Magazine(Material):
    """Magazine issue identified by its edition."""

    kind: Literal[MaterialKind.MAGAZINE] = MaterialKind.MAGAZINE
    edition: Optional[str] = Field(default=None, description="Edition identifier")

    def describe_info(self) -> Dict[str, Any]:
        info = super().describe_info()
        info["edition"] = self.edition
        return info


class Article(Material):
    """Article with an optional reference link."""

    kind: Literal[MaterialKind.ARTICLE] = MaterialKind.ARTICLE
    link: Optional[str] = Field(default=None, description="Reference URL")

    @field_validator("link")
    @classmethod
    def validate_link(cls, v: Optional[str]) -> Optional[str]:
        # Empty links are accepted as "no link"
        if v and not v.startswith("http"):
            raise ValueError("link must start with 'http'")
        return v

    def describe_info(self) -> Dict[str, Any]:
        info = super().describe_info()
        info["link"] = self.link
        return info


MATERIAL_TYPES = {
    MaterialKind.BOOK: Book,
    MaterialKind.MAGAZINE: Magazine,
    MaterialKind.ARTICLE: Article,
}
