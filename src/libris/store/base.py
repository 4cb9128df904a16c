# ABOUTME: CollectionStore protocol and the error types every storage backend raises.
# ABOUTME: Local (SQLite) and remote (document database) stores both implement this contract.

from datetime import datetime
from typing import Protocol, runtime_checkable

from libris.catalog.types import Book, BookFormData


class StoreError(Exception):
    """Base class for storage backend failures."""


class StoreUnavailable(StoreError):
    """Raised when the backend cannot be reached or fails to respond."""


class NotFound(StoreError):
    """Raised when an update or delete targets an id that does not exist."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__(f"Book with id {book_id} not found")


class DuplicateCatalogCode(StoreError):
    """Raised when inserting a book whose catalog code is already stored."""


@runtime_checkable
class CollectionStore(Protocol):
    """Durable storage for the book collection.

    Implementations raise StoreUnavailable when the backend cannot be
    reached, and NotFound when update or delete targets a missing id.
    Deleting an id that is already gone is reported as NotFound, never
    as silent success.
    """

    @property
    def name(self) -> str: ...

    def load_all(self) -> list[Book]: ...

    def insert(self, book: Book) -> Book: ...

    def update(self, book_id: str, form_data: BookFormData, *, updated_at: datetime) -> None: ...

    def delete(self, book_id: str) -> None: ...

    def close(self) -> None: ...
