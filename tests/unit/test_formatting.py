# ABOUTME: Unit tests for author and subject display formatting.
# ABOUTME: Validates the empty, single, pair, and list cases.

from libris.catalog.formatting import format_authors, format_subjects


class TestFormatAuthors:
    """Tests for format_authors."""

    def test_no_authors(self) -> None:
        assert format_authors([]) == "Unknown"

    def test_single_author(self) -> None:
        assert format_authors(["Umberto Eco"]) == "Umberto Eco"

    def test_two_authors(self) -> None:
        assert format_authors(["Good", "Pratchett"]) == "Good and Pratchett"

    def test_three_authors_use_serial_comma(self) -> None:
        assert format_authors(["A", "B", "C"]) == "A, B, and C"


class TestFormatSubjects:
    """Tests for format_subjects."""

    def test_no_subjects(self) -> None:
        assert format_subjects([]) == "None"

    def test_joins_subjects(self) -> None:
        assert format_subjects(["Physics", "History"]) == "Physics, History"
