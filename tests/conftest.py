# ABOUTME: Shared pytest fixtures for Libris tests.
# ABOUTME: Provides sample form data, a book factory, a pinned clock, and an in-memory store.

import time
from collections.abc import Callable, Iterator
from datetime import datetime, timezone

import pytest

from libris.catalog.types import Book, BookCategory, BookFormData, BookLanguage
from tests.fixtures.memory_store import MemoryStore

FIXED_NOW = datetime(2024, 5, 17, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def form_data() -> BookFormData:
    """A fully-populated BookFormData for testing."""
    return BookFormData(
        title="The Name of the Rose",
        authors=["Umberto Eco"],
        publisher="Harcourt",
        edition="1st",
        year="1983",
        location="Shelf A3",
        isbn="9780156001311",
        language=BookLanguage.ENGLISH,
        category=BookCategory.FICTION,
        subjects=["Mystery", "Medieval History"],
        review="A mystery in a medieval monastery.",
    )


@pytest.fixture
def make_book() -> Callable[..., Book]:
    """Factory for Book records with sensible defaults; override any field."""
    counter = {"n": 0}

    def _make(**overrides: object) -> Book:
        counter["n"] += 1
        n = counter["n"]
        fields: dict[str, object] = {
            "id": f"book-{n}",
            "catalog_code": f"BK-2024-{n:05d}",
            "title": f"Book {n}",
            "authors": ["Some Author"],
            "publisher": "Publisher",
            "edition": "1st",
            "year": "2020",
            "location": "Shelf 1",
            "isbn": "0306406152",
            "language": BookLanguage.PORTUGUESE,
            "category": BookCategory.OTHER,
            "subjects": [],
            "review": "",
            "created_at": FIXED_NOW,
            "updated_at": FIXED_NOW,
        }
        fields.update(overrides)
        return Book(**fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """A clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def memory_store() -> MemoryStore:
    """An empty in-memory CollectionStore."""
    return MemoryStore()


@pytest.fixture
def eastern_tz(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the process local timezone to a fixed UTC-5 offset."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "EST+05")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
