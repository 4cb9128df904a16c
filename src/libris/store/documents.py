# ABOUTME: Encoding and decoding of Book records as typed-value JSON documents.
# ABOUTME: Matches the document database REST format (stringValue, arrayValue, timestampValue).

import logging
from datetime import datetime
from typing import Any

from libris.catalog.normalizer import utc_now
from libris.catalog.types import FORM_FIELDS, Book, BookCategory, BookFormData, BookLanguage
from libris.store.mapping import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


def encode_value(value: Any) -> dict[str, Any]:
    """Encode a Python value as a typed document value."""
    if value is None:
        return {"nullValue": None}
    if isinstance(value, datetime):
        return {"timestampValue": format_timestamp(value).replace("+00:00", "Z")}
    if isinstance(value, list):
        return {"arrayValue": {"values": [encode_value(item) for item in value]}}
    return {"stringValue": str(value)}


def decode_value(value: dict[str, Any]) -> Any:
    """Decode a typed document value into a Python value.

    Unknown value types decode to None.
    """
    if "stringValue" in value:
        return value["stringValue"]
    if "arrayValue" in value:
        return [decode_value(item) for item in value["arrayValue"].get("values", [])]
    if "timestampValue" in value:
        return parse_timestamp(value["timestampValue"])
    if "integerValue" in value:
        return str(value["integerValue"])
    return None


def encode_form_fields(form_data: BookFormData) -> dict[str, Any]:
    """Encode the editable fields of a book as document fields."""
    return {name: encode_value(getattr(form_data, name)) for name in FORM_FIELDS}


def encode_book(book: Book) -> dict[str, Any]:
    """Encode a Book as a document body.

    The id is not written as a field; the document name carries it.
    """
    fields = {
        "catalogCode": encode_value(book.catalog_code),
        **encode_form_fields(book.form_data()),
        "createdAt": encode_value(book.created_at),
        "updatedAt": encode_value(book.updated_at),
    }
    return {"fields": fields}


def document_id(document: dict[str, Any]) -> str:
    """Return the id of a document: the last segment of its resource name."""
    return document["name"].rsplit("/", 1)[-1]


def _as_list(value: Any) -> list[str]:
    return [str(item) for item in value] if isinstance(value, list) else []


def decode_book(document: dict[str, Any]) -> Book:
    """Decode a document into a Book.

    Missing or non-timestamp createdAt/updatedAt values fall back to the
    current time. Missing strings
    decode as "", missing lists as [].
    """
    raw = {name: decode_value(value) for name, value in document.get("fields", {}).items()}

    created_at = _timestamp(document, raw, "createdAt")
    updated_at = _timestamp(document, raw, "updatedAt")

    return Book(
        id=document_id(document),
        catalog_code=raw.get("catalogCode") or "",
        title=raw.get("title") or "",
        authors=_as_list(raw.get("authors")),
        publisher=raw.get("publisher") or "",
        edition=raw.get("edition") or "",
        year=raw.get("year") or "",
        location=raw.get("location") or "",
        isbn=raw.get("isbn") or "",
        language=_decode_enum(BookLanguage, raw.get("language"), BookLanguage.OTHER),
        category=_decode_enum(BookCategory, raw.get("category"), BookCategory.OTHER),
        subjects=_as_list(raw.get("subjects")),
        review=raw.get("review") or "",
        created_at=created_at,
        updated_at=max(updated_at, created_at),
    )


def _timestamp(document: dict[str, Any], raw: dict[str, Any], field_name: str) -> datetime:
    value = raw.get(field_name)
    if isinstance(value, datetime):
        return value
    logger.debug(
        "Document %s has no usable %s (%r); using current time",
        document.get("name"),
        field_name,
        value,
    )
    return utc_now()


def _decode_enum(enum_cls: Any, value: Any, default: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning("Unknown %s value %r; using %s", enum_cls.__name__, value, default)
        return default
