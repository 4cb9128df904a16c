# ABOUTME: CatalogService owns the in-memory book collection and the live search state.
# ABOUTME: Mutations are written to the store first and applied in memory only after they succeed.

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum

from libris.catalog.normalizer import apply_update, create_book_from_form_data, utc_now
from libris.catalog.search import search_books
from libris.catalog.types import DEFAULT_CRITERION, Book, BookFormData, SearchCriterion
from libris.store.base import CollectionStore, NotFound, StoreUnavailable

logger = logging.getLogger(__name__)


class ServiceState(Enum):
    LOADING = "loading"
    READY = "ready"


class ServiceNotReady(Exception):
    """Raised when the collection is used before load() has run."""


class CatalogService:
    """The single owner of the book collection for a session.

    Lifecycle: construct with a store, call ``load()`` once, then use the
    read and mutating operations. There is no teardown beyond closing the
    store. Each mutation calls the store first; the in-memory collection
    and the filtered view change only after the store confirms. Store
    errors propagate to the caller and are never retried here.

    The clock and id factory are injectable so tests can pin timestamps,
    catalog code years, and ids.
    """

    def __init__(
        self,
        store: CollectionStore,
        *,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or utc_now
        self._id_factory = id_factory
        self._state = ServiceState.LOADING
        self._books: list[Book] = []
        self._filtered: list[Book] = []
        self._criterion: SearchCriterion | str = DEFAULT_CRITERION
        self._query = ""
        self._load_error: StoreUnavailable | None = None

    @property
    def state(self) -> ServiceState:
        return self._state

    @property
    def load_error(self) -> StoreUnavailable | None:
        """The error from the last load, if it fell back to an empty collection."""
        return self._load_error

    @property
    def criterion(self) -> SearchCriterion | str:
        return self._criterion

    @property
    def query(self) -> str:
        return self._query

    def load(self) -> list[Book]:
        """Read the whole collection from the store and become ready.

        On StoreUnavailable the service still becomes ready, with an empty
        collection, and the error is recorded and re-raised so the caller
        can tell the user. The load is not retried.
        """
        try:
            books = self._store.load_all()
        except StoreUnavailable as exc:
            logger.warning("Could not load catalog from %s store: %s", self._store.name, exc)
            self._load_error = exc
            self._become_ready([])
            raise
        self._load_error = None
        self._become_ready(books)
        logger.debug("Loaded %d book(s) from %s store", len(books), self._store.name)
        return self.list()

    def _become_ready(self, books: list[Book]) -> None:
        self._books = list(books)
        self._state = ServiceState.READY
        self._refresh()

    def _require_ready(self) -> None:
        if self._state is not ServiceState.READY:
            raise ServiceNotReady("Catalog has not been loaded yet")

    def _refresh(self) -> None:
        self._filtered = search_books(self._books, self._criterion, self._query)

    def _index_of(self, book_id: str) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        raise NotFound(book_id)

    # --- Reads ---

    def list(self) -> list[Book]:
        """The whole collection, unfiltered, in collection order."""
        return list(self._books)

    def filtered_list(self) -> list[Book]:
        """The collection with the current criterion and query applied."""
        return list(self._filtered)

    def get(self, book_id: str) -> Book | None:
        """Find a book by id or catalog code."""
        for book in self._books:
            if book_id in (book.id, book.catalog_code):
                return book
        return None

    def search(self, criterion: SearchCriterion | str, query: str) -> list[Book]:
        """Run a one-off search without changing the live search state."""
        return search_books(self._books, criterion, query)

    # --- Live search state ---

    def set_criterion(self, criterion: SearchCriterion | str) -> None:
        """Change the search criterion and recompute the filtered view."""
        self._criterion = criterion
        self._refresh()

    def set_query(self, query: str) -> None:
        """Change the search query and recompute the filtered view."""
        self._query = query
        self._refresh()

    # --- Mutations ---

    def add(self, form_data: BookFormData) -> Book:
        """Create a book from form data, store it, and append it.

        The catalog code is computed from the in-memory collection. The
        store may assign its own id; the returned Book is the stored one.

        Raises:
            ServiceNotReady: If load() has not run.
            StoreError: If the store rejects the insert. Nothing changes.
        """
        self._require_ready()
        book = create_book_from_form_data(
            form_data, self._books, now=self._clock(), id_factory=self._id_factory
        )
        stored = self._store.insert(book)
        self._books.append(stored)
        self._refresh()
        logger.info("Added %s: %s", stored.catalog_code, stored.title)
        return stored

    def update(self, book_id: str, form_data: BookFormData) -> Book:
        """Replace the editable fields of a book.

        id, catalog code and creation time are kept; updated_at moves to now.

        Raises:
            ServiceNotReady: If load() has not run.
            NotFound: If no book in the collection has this id.
            StoreError: If the store rejects the update. Nothing changes.
        """
        self._require_ready()
        index = self._index_of(book_id)
        updated = apply_update(self._books[index], form_data, now=self._clock())
        self._store.update(book_id, form_data, updated_at=updated.updated_at)
        self._books[index] = updated
        self._refresh()
        logger.info("Updated %s", updated.catalog_code)
        return updated

    def delete(self, book_id: str) -> Book:
        """Remove a book permanently and return the removed record.

        Raises:
            ServiceNotReady: If load() has not run.
            NotFound: If no book in the collection has this id.
            StoreError: If the store rejects the delete. Nothing changes.
        """
        self._require_ready()
        index = self._index_of(book_id)
        self._store.delete(book_id)
        removed = self._books.pop(index)
        self._refresh()
        logger.info("Deleted %s", removed.catalog_code)
        return removed
