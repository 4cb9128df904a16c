# ABOUTME: Form validation for book input collected by the CLI.
# ABOUTME: Checks required fields, year and ISBN formats, and enum values before cataloging.

import re
from collections.abc import Iterable

from libris.catalog.types import BookCategory, BookFormData, BookLanguage

_YEAR_RE = re.compile(r"\d{4}", re.ASCII)

# ISBN-10 or ISBN-13, optional "ISBN"/"ISBN-10:"/"ISBN-13:" prefix, with
# consistent hyphen/space separators. The lookahead pins the overall length.
_ISBN_RE = re.compile(
    r"(?:ISBN(?:-1[03])?:?\ )?"
    r"(?=[0-9X]{10}$|(?=(?:[0-9]+[-\ ]){3})[-\ 0-9X]{13}$"
    r"|97[89][0-9]{10}$|(?=(?:[0-9]+[-\ ]){4})[-\ 0-9]{17}$)"
    r"(?:97[89][-\ ]?)?[0-9]{1,5}[-\ ]?[0-9]+[-\ ]?[0-9]+[-\ ]?[0-9X]",
    re.IGNORECASE | re.ASCII,
)


class ValidationError(Exception):
    """Raised when form input fails validation.

    Carries a mapping of field name to message for every failing field.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        detail = "; ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Invalid book data: {detail}")


def is_valid_isbn(isbn: str) -> bool:
    """Check that a string looks like an ISBN-10 or ISBN-13."""
    return _ISBN_RE.fullmatch(isbn.strip()) is not None


def _clean_list(values: Iterable[str]) -> list[str]:
    return [value.strip() for value in values]


def validate_form_data(
    *,
    title: str,
    authors: Iterable[str] = (),
    publisher: str,
    edition: str,
    year: str,
    location: str,
    isbn: str,
    language: str | BookLanguage,
    category: str | BookCategory,
    subjects: Iterable[str] = (),
    review: str | None = None,
) -> BookFormData:
    """Validate raw form fields and build a BookFormData.

    Strings are trimmed. Author and subject lists may be empty, but each
    entry must be non-empty. Language and category accept an enum member,
    its value, or its name.

    Raises:
        ValidationError: Listing every field that failed.
    """
    errors: dict[str, str] = {}

    cleaned = {
        "title": title.strip(),
        "publisher": publisher.strip(),
        "edition": edition.strip(),
        "location": location.strip(),
    }
    for name, value in cleaned.items():
        if not value:
            errors[name] = f"{name} is required"

    author_list = _clean_list(authors)
    if any(not author for author in author_list):
        errors["authors"] = "author names must not be empty"

    subject_list = _clean_list(subjects)
    if any(not subject for subject in subject_list):
        errors["subjects"] = "subjects must not be empty"

    year = year.strip()
    if not _YEAR_RE.fullmatch(year):
        errors["year"] = "year must be a 4-digit number"

    isbn = isbn.strip()
    if not is_valid_isbn(isbn):
        errors["isbn"] = "invalid ISBN format"

    resolved_language = None
    try:
        resolved_language = BookLanguage.from_input(str(language))
    except ValueError:
        errors["language"] = "please select a language"

    resolved_category = None
    try:
        resolved_category = BookCategory.from_input(str(category))
    except ValueError:
        errors["category"] = "please select a category"

    if errors:
        raise ValidationError(errors)

    return BookFormData(
        title=cleaned["title"],
        authors=author_list,
        publisher=cleaned["publisher"],
        edition=cleaned["edition"],
        year=year,
        location=cleaned["location"],
        isbn=isbn,
        language=resolved_language,  # type: ignore[arg-type]
        category=resolved_category,  # type: ignore[arg-type]
        subjects=subject_list,
        review=(review or "").strip(),
    )
