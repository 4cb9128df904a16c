# ABOUTME: Unit tests for criterion-based book search.
# ABOUTME: Validates the empty-query identity, case-insensitivity, subject matching, and ordering.

from collections.abc import Callable

import pytest

from libris.catalog.search import search_books
from libris.catalog.types import Book, BookLanguage, SearchCriterion


@pytest.fixture
def books(make_book: Callable[..., Book]) -> list[Book]:
    return [
        make_book(
            catalog_code="BK-2024-00001",
            title="A Brief History of Time",
            subjects=["Physics", "History"],
            language=BookLanguage.ENGLISH,
        ),
        make_book(
            catalog_code="BK-2024-00002",
            title="Dom Casmurro",
            subjects=["Romance"],
            language=BookLanguage.PORTUGUESE,
        ),
        make_book(
            catalog_code="BK-2023-00015",
            title="Science and Method",
            subjects=[],
            language=BookLanguage.FRENCH,
        ),
    ]


class TestEmptyQuery:
    """An empty query leaves the collection as it is."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    @pytest.mark.parametrize("criterion", list(SearchCriterion))
    def test_identity(self, books: list[Book], criterion: SearchCriterion, query: str) -> None:
        """Every book comes back, same order, same length."""
        assert search_books(books, criterion, query) == books

    def test_returns_new_list(self, books: list[Book]) -> None:
        """The result is a copy, not the input list."""
        result = search_books(books, SearchCriterion.TITLE, "")
        assert result is not books


class TestCriteria:
    """Tests for each search criterion."""

    def test_title_is_case_insensitive(self, books: list[Book]) -> None:
        """'SCIENCE' matches the title 'Science and Method'."""
        result = search_books(books, SearchCriterion.TITLE, "SCIENCE")
        assert [b.title for b in result] == ["Science and Method"]

    def test_query_is_trimmed(self, books: list[Book]) -> None:
        """Surrounding whitespace in the query is ignored."""
        result = search_books(books, SearchCriterion.TITLE, "  casmurro  ")
        assert [b.title for b in result] == ["Dom Casmurro"]

    def test_catalog_code_substring(self, books: list[Book]) -> None:
        """A year fragment selects codes from that year."""
        result = search_books(books, SearchCriterion.CATALOG_CODE, "bk-2024")
        assert [b.catalog_code for b in result] == ["BK-2024-00001", "BK-2024-00002"]

    def test_subjects_match_any_element(self, books: list[Book]) -> None:
        """'phys' matches a book with subjects ['Physics', 'History']."""
        result = search_books(books, SearchCriterion.SUBJECTS, "phys")
        assert [b.catalog_code for b in result] == ["BK-2024-00001"]

    def test_subjects_search_skips_books_without_subjects(
        self, make_book: Callable[..., Book]
    ) -> None:
        """A book with no subjects never matches a subjects query."""
        result = search_books([make_book(subjects=[])], SearchCriterion.SUBJECTS, "x")
        assert result == []

    def test_language_matches_stored_value(self, books: list[Book]) -> None:
        """Language queries match the stored language name."""
        result = search_books(books, SearchCriterion.LANGUAGE, "inglês")
        assert [b.catalog_code for b in result] == ["BK-2024-00001"]

    def test_string_criterion(self, books: list[Book]) -> None:
        """The criterion may be given as its string value."""
        result = search_books(books, "catalogCode", "00015")
        assert [b.title for b in result] == ["Science and Method"]

    def test_unknown_criterion_passes_everything(self, books: list[Book]) -> None:
        """An unrecognized criterion filters nothing."""
        assert search_books(books, "publisherName", "nothing-matches") == books

    def test_preserves_input_order(self, books: list[Book]) -> None:
        """Results keep the relative order of the input."""
        reversed_books = list(reversed(books))
        result = search_books(reversed_books, SearchCriterion.CATALOG_CODE, "BK-")
        assert result == reversed_books

    def test_no_match_returns_empty(self, books: list[Book]) -> None:
        assert search_books(books, SearchCriterion.TITLE, "zzz") == []
