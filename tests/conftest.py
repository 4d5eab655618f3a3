"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides material, catalog and API client fixtures.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from app.catalog.catalog import MaterialCatalog
from app.catalog.models import Article, Book, Magazine
from app.config import Settings
from app.main import Application


# ============================================================================
# MATERIAL FIXTURES
# ============================================================================

@pytest.fixture
def book() -> Book:
    """A 1200 page book."""
    return Book(
        title="O Senhor dos Anéis",
        author="J.R.R. Tolkien",
        start_date="2024-01-01",
        end_date="2024-01-31",
        page_count=1200,
    )


@pytest.fixture
def magazine() -> Magazine:
    """A magazine issue."""
    return Magazine(
        title="National Geographic",
        author="Diversos",
        start_date="2024-02-01",
        edition="Edição 345",
    )


@pytest.fixture
def article() -> Article:
    """An article with a reference link."""
    return Article(
        title="Teoria da Relatividade",
        author="Albert Einstein",
        link="https://example.com/relatividade",
    )


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog(book: Book, magazine: Magazine, article: Article) -> MaterialCatalog:
    """Catalog with the three sample materials registered."""
    catalog = MaterialCatalog()
    catalog.register(book)
    catalog.register(magazine)
    catalog.register(article)
    return catalog


@pytest.fixture
def empty_catalog() -> MaterialCatalog:
    """Catalog with nothing registered."""
    return MaterialCatalog()


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Test client backed by a fresh, empty catalog."""
    app = Application(Settings(seed_demo_data=False)).app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def seeded_client() -> Generator[TestClient, None, None]:
    """Test client whose catalog holds the sample materials."""
    app = Application(Settings(seed_demo_data=True)).app
    with TestClient(app) as test_client:
        yield test_client
