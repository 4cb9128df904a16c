# ABOUTME: Turns validated form data into persisted Book records and applies edits to them.
# ABOUTME: Assigns ids, catalog codes, and timestamps; no I/O and no re-validation.

import uuid
from collections.abc import Callable, Sequence
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from libris.catalog.codes import generate_catalog_code
from libris.catalog.types import Book, BookFormData


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_book_id() -> str:
    """Generate a collision-free opaque identifier."""
    return str(uuid.uuid4())


def _form_fields(form_data: BookFormData) -> dict[str, Any]:
    # asdict deep-copies the list fields
    return asdict(form_data)


def create_book_from_form_data(
    form_data: BookFormData,
    existing_books: Sequence[Book],
    *,
    now: datetime | None = None,
    id_factory: Callable[[], str] | None = None,
) -> Book:
    """Create a new Book from form data.

    Generates a fresh id and the next catalog code for the local calendar
    year of ``now``, sets created_at and updated_at to the same instant, and copies every
    form field unchanged.

    Args:
        form_data: Validated form input.
        existing_books: The current collection, used for code generation.
        now: Creation timestamp. Defaults to the current UTC time.
        id_factory: Callable returning a new id. Defaults to a random UUID4.
    """
    now = now or utc_now()
    make_id = id_factory or new_book_id
    return Book(
        id=make_id(),
        catalog_code=generate_catalog_code(existing_books, year=now.astimezone().year),
        **_form_fields(form_data),
        created_at=now,
        updated_at=now,
    )


def apply_update(existing: Book, form_data: BookFormData, *, now: datetime | None = None) -> Book:
    """Return a copy of ``existing`` with the editable fields replaced.

    id, catalog_code and created_at are preserved. updated_at is set to
    ``now``, but never earlier than created_at.
    """
    now = now or utc_now()
    return Book(
        id=existing.id,
        catalog_code=existing.catalog_code,
        **_form_fields(form_data),
        created_at=existing.created_at,
        updated_at=max(now, existing.created_at),
    )
