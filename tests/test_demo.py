"""
==============================================================================
Demonstration Driver Tests
==============================================================================
"""

import logging

from app.catalog.catalog import MaterialCatalog
from app.demo import SAMPLE_BOOK_TITLE, run_demo, seed_catalog


def test_seed_catalog():
    """Seeding registers three materials and half-reads the book."""
    catalog = seed_catalog(MaterialCatalog())
    assert len(catalog) == 3
    assert catalog.get(SAMPLE_BOOK_TITLE).status == "in progress"


def test_run_demo_logs_results(caplog):
    """The walkthrough logs both listings and the search result."""
    with caplog.at_level(logging.INFO, logger="app.demo"):
        catalog = run_demo()

    book = catalog.get(SAMPLE_BOOK_TITLE)
    assert book.status == "lido"
    assert book.summary == "Uma aventura épica pela Terra Média."
    assert "Registered materials" in caplog.text
    assert "Teoria da Relatividade" in caplog.text
    assert "Updated materials" in caplog.text
