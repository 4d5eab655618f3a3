"""
==============================================================================
Reading Catalog Demonstration
==============================================================================

Scripted walkthrough of the catalog API.

Steps:
------
1. Register a book, a magazine and an article
2. Record 600 of 1200 pages read on the book
3. List the catalog
4. Search titles for "relatividade"
5. Set the book status to "lido" and edit its summary
6. List the updated catalog

Usage:
------
    python -m app.demo

==============================================================================
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from app.catalog.catalog import MaterialCatalog
from app.catalog.models import Article, Book, Magazine, Material


# Module logger
logger = logging.getLogger(__name__)


SAMPLE_BOOK_TITLE = "O Senhor dos Anéis"


def build_sample_materials() -> List[Material]:
    """Create the sample book, magazine and article."""
    return [
        Book(
            title=SAMPLE_BOOK_TITLE,
            author="J.R.R. Tolkien",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            page_count=1200,
        ),
        Magazine(
            title="National Geographic",
            author="Diversos",
            start_date=date(2024, 2, 1),
            edition="Edição 345",
        ),
        Article(
            title="Teoria da Relatividade",
            author="Albert Einstein",
            link="https://example.com/relatividade",
        ),
    ]


def seed_catalog(catalog: MaterialCatalog) -> MaterialCatalog:
    """Register the sample materials and record initial book progress."""
    for material in build_sample_materials():
        catalog.register(material)

    catalog.update_progress(SAMPLE_BOOK_TITLE, 600)
    return catalog


def _dump(snapshots: List[Dict[str, Any]]) -> str:
    return json.dumps(snapshots, ensure_ascii=False, indent=2, default=str)


def run_demo(catalog: Optional[MaterialCatalog] = None) -> MaterialCatalog:
    """
    Run the walkthrough and log each result.

    Args:
        catalog: Catalog to use (a new empty one if None)

    Returns:
        The catalog after all steps
    """
    catalog = seed_catalog(catalog if catalog is not None else MaterialCatalog())

    logger.info(f"Registered materials:\n{_dump(catalog.list_all())}")

    found = catalog.search("titulo", "relatividade")
    logger.info(
        f"Title search for 'relatividade':\n"
        f"{_dump([material.describe_info() for material in found])}"
    )

    catalog.set_status(SAMPLE_BOOK_TITLE, "lido")
    catalog.edit_summary(SAMPLE_BOOK_TITLE, "Uma aventura épica pela Terra Média.")

    logger.info(f"Updated materials:\n{_dump(catalog.list_all())}")
    return catalog


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    run_demo()


if __name__ == "__main__":
    main()
