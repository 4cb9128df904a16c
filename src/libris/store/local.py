# ABOUTME: Local SQLite-backed CollectionStore for the Libris catalog.
# ABOUTME: Opens or creates the database file, applies the schema, and provides typed CRUD.

import logging
import sqlite3
from datetime import datetime
from pathlib import Path

from libris.catalog.types import Book, BookFormData
from libris.config import DEFAULT_DB_PATH
from libris.store.base import DuplicateCatalogCode, NotFound, StoreUnavailable
from libris.store.mapping import book_to_row, form_to_row, format_timestamp, row_to_book
from libris.store.schema import SCHEMA_V1, SCHEMA_VERSION

logger = logging.getLogger(__name__)


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def open_database(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Libris catalog database.

    Creates the database file and parent directories if they don't exist.
    Applies the schema on first creation. Sets WAL journal mode and
    sqlite3.Row factory for dict-like column access.

    Args:
        path: Path to the database file. Defaults to ~/.libris/library.db.

    Returns:
        A configured sqlite3.Connection.

    Raises:
        StoreUnavailable: If the file cannot be created or opened.
    """
    db_path = path or DEFAULT_DB_PATH
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        if not _schema_exists(conn):
            logger.debug("Creating catalog schema in %s", db_path)
            conn.executescript(SCHEMA_V1)
            conn.execute("INSERT INTO schema_version (version) VALUES (?)", (SCHEMA_VERSION,))
            conn.commit()
    except (OSError, sqlite3.Error) as exc:
        raise StoreUnavailable(f"Cannot open catalog database {db_path}: {exc}") from exc
    return conn


class LocalStore:
    """Wraps a sqlite3 connection and provides typed CRUD for the books table.

    Built with ``LocalStore(path=...)`` the database is opened on first use,
    so a file that cannot be opened surfaces as StoreUnavailable from
    ``load_all`` like any other read failure.
    """

    def __init__(
        self, conn: sqlite3.Connection | None = None, *, path: Path | None = None
    ) -> None:
        self._conn = conn
        self._path = path

    @classmethod
    def open(cls, path: Path | None = None) -> "LocalStore":
        """Open the database at ``path`` now and wrap it."""
        return cls(open_database(path))

    @property
    def name(self) -> str:
        return "local"

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = open_database(self._path)
        return self._conn

    def load_all(self) -> list[Book]:
        """Return every stored book in insertion order.

        Raises:
            StoreUnavailable: If the database cannot be opened or read, or
                holds a row that does not decode.
        """
        conn = self._connection()
        try:
            rows = conn.execute("SELECT * FROM books ORDER BY seq").fetchall()
        except sqlite3.Error as exc:
            raise StoreUnavailable(f"Cannot read catalog: {exc}") from exc
        books = []
        for row in rows:
            try:
                books.append(row_to_book(row))
            except (ValueError, TypeError) as exc:
                raise StoreUnavailable(f"Corrupt catalog row {row['id']}: {exc}") from exc
        return books

    def insert(self, book: Book) -> Book:
        """Store a new book and return it unchanged.

        Raises:
            DuplicateCatalogCode: If the catalog code is already stored.
            StoreUnavailable: On any other database failure.
        """
        conn = self._connection()
        row = book_to_row(book)
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        try:
            conn.execute(
                f"INSERT INTO books ({columns}) VALUES ({placeholders})",
                list(row.values()),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if "books.catalog_code" in str(exc):
                raise DuplicateCatalogCode(
                    f"Catalog code {book.catalog_code} already exists"
                ) from exc
            raise StoreUnavailable(f"Cannot insert book {book.id}: {exc}") from exc
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreUnavailable(f"Cannot insert book {book.id}: {exc}") from exc

        logger.debug("Inserted %s (%s)", book.catalog_code, book.id)
        return book

    def update(self, book_id: str, form_data: BookFormData, *, updated_at: datetime) -> None:
        """Replace the editable fields of a stored book.

        Raises:
            NotFound: If the book_id does not exist.
        """
        conn = self._connection()
        fields = form_to_row(form_data)
        fields["updated_at"] = format_timestamp(updated_at)
        set_clause = ", ".join(f"{k} = ?" for k in fields)
        values = [*fields.values(), book_id]

        try:
            cursor = conn.execute(f"UPDATE books SET {set_clause} WHERE id = ?", values)
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreUnavailable(f"Cannot update book {book_id}: {exc}") from exc

        if cursor.rowcount == 0:
            raise NotFound(book_id)

    def delete(self, book_id: str) -> None:
        """Delete a book.

        Raises:
            NotFound: If the book_id does not exist.
        """
        conn = self._connection()
        try:
            cursor = conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreUnavailable(f"Cannot delete book {book_id}: {exc}") from exc

        if cursor.rowcount == 0:
            raise NotFound(book_id)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
