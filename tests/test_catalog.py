"""
==============================================================================
Material Catalog Tests
==============================================================================

Tests for registration, listing, search and title-keyed updates.

==============================================================================
"""

import threading

import pytest

from app.catalog.catalog import MaterialCatalog, SearchField
from app.catalog.models import Article, Book, Magazine
from app.core.exceptions import DuplicateError, NotFoundError, ValidationError


class TestRegistration:
    """Tests for MaterialCatalog.register."""

    def test_register_preserves_order(self, catalog: MaterialCatalog):
        """Materials are listed in registration order."""
        titles = [info["title"] for info in catalog.list_all()]
        assert titles == ["O Senhor dos Anéis", "National Geographic", "Teoria da Relatividade"]
        assert len(catalog) == 3

    def test_duplicate_title_any_case(self, catalog: MaterialCatalog):
        """A title differing only in case is rejected."""
        duplicate = Magazine(title="NATIONAL geographic", author="Other")
        with pytest.raises(DuplicateError) as exc_info:
            catalog.register(duplicate)
        assert exc_info.value.status_code == 409
        assert len(catalog) == 3

    def test_materials_property_is_a_copy(self, catalog: MaterialCatalog):
        """Mutating the returned list does not touch the catalog."""
        catalog.materials.clear()
        assert len(catalog) == 3

    def test_concurrent_registration_keeps_titles_unique(self, empty_catalog: MaterialCatalog):
        """Racing registrations of one title admit exactly one."""
        errors = []

        def register():
            try:
                empty_catalog.register(Article(title="Race", author="Anyone"))
            except DuplicateError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=register) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(empty_catalog) == 1
        assert len(errors) == 7


class TestSearch:
    """Tests for MaterialCatalog.search."""

    @pytest.mark.parametrize("field", ["titulo", "title", "TITLE"])
    def test_title_search_is_case_insensitive(self, catalog: MaterialCatalog, field: str):
        """Upper-case needles still match."""
        results = catalog.search(field, "RELATIVIDADE")
        assert [m.title for m in results] == ["Teoria da Relatividade"]

    def test_search_by_author(self, catalog: MaterialCatalog):
        """Author substring search."""
        results = catalog.search("autor", "tolkien")
        assert len(results) == 1
        assert isinstance(results[0], Book)

    def test_search_by_kind(self, catalog: MaterialCatalog):
        """Kind labels are searchable."""
        results = catalog.search("kind", "revista")
        assert [m.title for m in results] == ["National Geographic"]

    def test_variant_field_only_matches_its_variant(self, catalog: MaterialCatalog):
        """Edition lookups skip materials without an edition."""
        results = catalog.search("edicao", "345")
        assert [m.title for m in results] == ["National Geographic"]
        assert catalog.search("link", "example") == [catalog.get("Teoria da Relatividade")]

    def test_unknown_field_returns_empty(self, catalog: MaterialCatalog):
        """Unknown fields never match."""
        assert catalog.search("page_count", "1") == []
        assert catalog.search("nonexistent", "") == []

    def test_empty_value_matches_every_string_field(self, catalog: MaterialCatalog):
        """An empty needle is a substring of any title."""
        assert len(catalog.search("title", "")) == 3

    def test_results_are_live_references(self, catalog: MaterialCatalog):
        """Search returns the owned instances, not copies."""
        found = catalog.search("title", "senhor")[0]
        assert found is catalog.get("o senhor dos anéis")

    def test_resolve_aliases(self):
        """Portuguese aliases resolve to search fields."""
        assert SearchField.resolve("resumo") is SearchField.SUMMARY
        assert SearchField.resolve(" Tipo ") is SearchField.KIND
        assert SearchField.resolve("pages") is None


class TestMutations:
    """Tests for title-keyed updates."""

    def test_set_status(self, catalog: MaterialCatalog):
        """Status is changed and the material returned."""
        material = catalog.set_status("o senhor dos anéis", "lido")
        assert material.status == "lido"
        assert catalog.list_all()[0]["status"] == "lido"

    def test_edit_summary(self, catalog: MaterialCatalog):
        """Summary is replaced in place."""
        material = catalog.edit_summary("National Geographic", "Fotos incríveis.")
        assert material.summary == "Fotos incríveis."

    @pytest.mark.parametrize("operation", ["set_status", "edit_summary"])
    def test_lookup_miss(self, catalog: MaterialCatalog, operation: str):
        """Unknown titles fail without mutating anything."""
        before = catalog.list_all()
        with pytest.raises(NotFoundError) as exc_info:
            getattr(catalog, operation)("Dom Casmurro", "x")
        assert exc_info.value.details == {"title": "Dom Casmurro"}
        assert catalog.list_all() == before

    def test_update_progress(self, catalog: MaterialCatalog):
        """Progress is recorded through the catalog."""
        book = catalog.update_progress("O SENHOR DOS ANÉIS", 1200)
        assert book.pages_read == 1200
        assert book.status == "read"

    def test_update_progress_on_non_book(self, catalog: MaterialCatalog):
        """Only books track pages."""
        with pytest.raises(ValidationError):
            catalog.update_progress("National Geographic", 10)


class TestStats:
    """Tests for get_stats."""

    def test_stats(self, catalog: MaterialCatalog):
        """Totals are grouped by kind and status."""
        catalog.update_progress("O Senhor dos Anéis", 600)
        stats = catalog.get_stats()
        assert stats["total_materials"] == 3
        assert stats["by_kind"] == {"Livro": 1, "Revista": 1, "Artigo": 1}
        assert stats["by_status"] == {"in progress": 1, "not started": 2}


class TestScenario:
    """End-to-end walkthrough of the catalog operations."""

    def test_walkthrough(self, catalog: MaterialCatalog, book: Book, article: Article):
        """Register, progress, list, search, update and list again."""
        book.update_progress(600)
        assert book.status == "in progress"
        assert book.pages_read == 600

        assert len(catalog.list_all()) == 3
        assert catalog.search("titulo", "relatividade") == [article]

        catalog.set_status("O Senhor dos Anéis", "lido")
        catalog.edit_summary("O Senhor dos Anéis", "Uma aventura épica pela Terra Média.")

        info = catalog.list_all()[0]
        assert info["status"] == "lido"
        assert info["summary"] == "Uma aventura épica pela Terra Média."
        assert info["pages_read"] == 600
