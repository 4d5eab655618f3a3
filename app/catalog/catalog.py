"""
==============================================================================
Reading Catalog Module
==============================================================================

In-memory catalog of reading materials.

Features:
---------
- Ordered storage, insertion order preserved
- Case-insensitive unique titles
- Case-insensitive substring search over an explicit field set
- Title-keyed status, summary and progress updates

Search Fields:
-------------
    title    (alias: titulo)
    author   (alias: autor)
    kind     (alias: tipo)
    status
    summary  (alias: resumo)
    edition  (alias: edicao)           Magazine only
    link     (alias: link_referencia)  Article only

Unknown fields, or fields a material does not carry, never match.

==============================================================================
"""

from __future__ import annotations

import enum
import logging
import threading
from collections import Counter
from typing import Any, Callable, Dict, Iterator, List, Optional

from app.core import exceptions
from app.catalog.models import Article, Book, Magazine, Material


# Module logger
logger = logging.getLogger(__name__)


class SearchField(str, enum.Enum):
    """Material fields available to ``MaterialCatalog.search``."""

    TITLE = "title"
    AUTHOR = "author"
    KIND = "kind"
    STATUS = "status"
    SUMMARY = "summary"
    EDITION = "edition"
    LINK = "link"

    @classmethod
    def resolve(cls, name: str) -> Optional["SearchField"]:
        """
        Resolve a field name or alias.

        Args:
            name: Field name, e.g. "title" or "titulo"

        Returns:
            SearchField or None when the name is unknown
        """
        key = (name or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _FIELD_ALIASES.get(key)


_FIELD_ALIASES: Dict[str, SearchField] = {
    "titulo": SearchField.TITLE,
    "autor": SearchField.AUTHOR,
    "tipo": SearchField.KIND,
    "resumo": SearchField.SUMMARY,
    "edicao": SearchField.EDITION,
    "link_referencia": SearchField.LINK,
    "linkreferencia": SearchField.LINK,
}


def _edition(material: Material) -> Optional[str]:
    return material.edition if isinstance(material, Magazine) else None


def _link(material: Material) -> Optional[str]:
    return material.link if isinstance(material, Article) else None


_FIELD_GETTERS: Dict[SearchField, Callable[[Material], Optional[str]]] = {
    SearchField.TITLE: lambda m: m.title,
    SearchField.AUTHOR: lambda m: m.author,
    SearchField.KIND: lambda m: m.kind_label,
    SearchField.STATUS: lambda m: m.status,
    SearchField.SUMMARY: lambda m: m.summary,
    SearchField.EDITION: _edition,
    SearchField.LINK: _link,
}


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").lower()


class MaterialCatalog:
    """
    Reading material catalog manager.

    Owns an ordered list of materials and exposes registration, listing,
    search and title-keyed mutations. All operations run under one
    re-entrant lock, so a catalog can be shared between request threads.

    Attributes:
        materials: Copy of the registered materials, in insertion order

    Example:
        >>> catalog = MaterialCatalog()
        >>> catalog.register(Book(title="Dune", author="Frank Herbert", page_count=412))
        >>> catalog.search("title", "DUNE")[0].author
        'Frank Herbert'
        >>> catalog.set_status("dune", "reading again").status
        'reading again'
    """

    def __init__(self) -> None:
        self._materials: List[Material] = []
        self._lock = threading.RLock()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def materials(self) -> List[Material]:
        """Get all materials."""
        with self._lock:
            return self._materials.copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(self, material: Material) -> None:
        """
        Add a material to the catalog.

        Args:
            material: Book, Magazine or Article instance

        Raises:
            DuplicateError: If a material with the same title (any case) exists
        """
        with self._lock:
            if self.find(material.title) is not None:
                logger.warning(f"Rejected duplicate title: {material.title}")
                raise exceptions.material_exists(material.title)

            self._materials.append(material)

        logger.info(f"Registered {material.kind_label}: {material.title}")

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list_all(self) -> List[Dict[str, Any]]:
        """Snapshot every material, in insertion order."""
        with self._lock:
            return [material.describe_info() for material in self._materials]

    def find(self, title: str) -> Optional[Material]:
        """Find material by title (case-insensitive). First match wins."""
        wanted = _norm(title)
        with self._lock:
            for material in self._materials:
                if _norm(material.title) == wanted:
                    return material
        return None

    def get(self, title: str) -> Material:
        """
        Get material by title (case-insensitive).

        Raises:
            NotFoundError: If no material has that title
        """
        material = self.find(title)
        if material is None:
            logger.warning(f"Material not found: {title}")
            raise exceptions.material_not_found(title)
        return material

    def search(self, field: str, value: str) -> List[Material]:
        """
        Search materials by field.

        Args:
            field: Field name or alias (see SearchField)
            value: Substring to look for (case-insensitive)

        Returns:
            Matching materials in insertion order; empty for unknown fields
        """
        search_field = SearchField.resolve(field)
        if search_field is None:
            logger.debug(f"Unknown search field: {field}")
            return []

        getter = _FIELD_GETTERS[search_field]
        needle = _norm(value)

        with self._lock:
            results = []
            for material in self._materials:
                current = getter(material)
                if isinstance(current, str) and needle in current.lower():
                    results.append(material)

        logger.debug(f"Search {search_field.value}~{value!r}: {len(results)} match(es)")
        return results

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def set_status(self, title: str, new_status: str) -> Material:
        """
        Change the status of a material.

        Raises:
            NotFoundError: If no material has that title
        """
        with self._lock:
            material = self.get(title)
            material.change_status(new_status)

        logger.info(f"Status of '{material.title}' set to '{new_status}'")
        return material

    def edit_summary(self, title: str, new_summary: str) -> Material:
        """
        Replace the summary of a material.

        Raises:
            NotFoundError: If no material has that title
        """
        with self._lock:
            material = self.get(title)
            material.edit_summary(new_summary)

        logger.info(f"Summary of '{material.title}' updated")
        return material

    def update_progress(self, title: str, pages_read: int) -> Book:
        """
        Record reading progress for a book.

        Raises:
            NotFoundError: If no material has that title
            ValidationError: If the material is not a book or pages_read
                is out of range
        """
        with self._lock:
            material = self.get(title)
            if not isinstance(material, Book):
                raise exceptions.not_a_book(material.title)
            material.update_progress(pages_read)

        logger.info(
            f"Progress of '{material.title}': {pages_read}/{material.page_count} "
            f"({material.status})"
        )
        return material

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        with self._lock:
            by_kind = Counter(m.kind_label for m in self._materials)
            by_status = Counter(m.status for m in self._materials)
            total = len(self._materials)

        return {
            "total_materials": total,
            "by_kind": dict(by_kind),
            "by_status": dict(by_status),
        }
