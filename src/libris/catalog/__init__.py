# ABOUTME: Catalog package: book records, code generation, normalization, and search.
# ABOUTME: Pure domain logic with no storage or presentation dependencies.

from libris.catalog.codes import generate_catalog_code, parse_catalog_code
from libris.catalog.normalizer import apply_update, create_book_from_form_data
from libris.catalog.search import search_books
from libris.catalog.types import (
    Book,
    BookCategory,
    BookFormData,
    BookLanguage,
    SearchCriterion,
)
from libris.catalog.validation import ValidationError, validate_form_data

__all__ = [
    "Book",
    "BookCategory",
    "BookFormData",
    "BookLanguage",
    "SearchCriterion",
    "ValidationError",
    "apply_update",
    "create_book_from_form_data",
    "generate_catalog_code",
    "parse_catalog_code",
    "search_books",
    "validate_form_data",
]
