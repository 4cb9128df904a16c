# ABOUTME: Converts between Book dataclasses and SQLite row dictionaries.
# ABOUTME: Handles JSON serialization for list fields and ISO-8601 timestamps.

import json
import re
from datetime import datetime, timezone
from typing import Any

from libris.catalog.types import Book, BookCategory, BookFormData, BookLanguage

_FRACTION_RE = re.compile(r"\.(\d+)")


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as ISO-8601 in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _fraction_to_micros(match: re.Match[str]) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC.

    Fractional seconds of any precision (the remote store sends
    nanoseconds) are cut or padded to microseconds.
    """
    text = _FRACTION_RE.sub(_fraction_to_micros, text.replace("Z", "+00:00"))
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def form_to_row(form_data: BookFormData) -> dict[str, Any]:
    """Convert the editable fields to column values for INSERT or UPDATE."""
    return {
        "title": form_data.title,
        "authors": json.dumps(form_data.authors),
        "publisher": form_data.publisher,
        "edition": form_data.edition,
        "year": form_data.year,
        "location": form_data.location,
        "isbn": form_data.isbn,
        "language": str(form_data.language),
        "category": str(form_data.category),
        "subjects": json.dumps(form_data.subjects),
        "review": form_data.review,
    }


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book to a dict suitable for INSERT."""
    return {
        "id": book.id,
        "catalog_code": book.catalog_code,
        **form_to_row(book.form_data()),
        "created_at": format_timestamp(book.created_at),
        "updated_at": format_timestamp(book.updated_at),
    }


def row_to_book(row: Any) -> Book:
    """Convert a database row (dict-like) back to a Book.

    Deserializes the JSON authors and subjects columns.
    """
    return Book(
        id=row["id"],
        catalog_code=row["catalog_code"],
        title=row["title"],
        authors=json.loads(row["authors"]) if row["authors"] else [],
        publisher=row["publisher"],
        edition=row["edition"],
        year=row["year"],
        location=row["location"],
        isbn=row["isbn"],
        language=BookLanguage(row["language"]),
        category=BookCategory(row["category"]),
        subjects=json.loads(row["subjects"]) if row["subjects"] else [],
        review=row["review"],
        created_at=parse_timestamp(row["created_at"]),
        updated_at=parse_timestamp(row["updated_at"]),
    )
