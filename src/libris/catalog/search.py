# ABOUTME: Criterion-based filtering of the in-memory book collection.
# ABOUTME: Case-insensitive substring match on one field; stable, never re-sorts.

from collections.abc import Callable, Sequence

from libris.catalog.types import Book, SearchCriterion

Predicate = Callable[[Book, str], bool]


def _match_catalog_code(book: Book, needle: str) -> bool:
    return needle in book.catalog_code.lower()


def _match_title(book: Book, needle: str) -> bool:
    return needle in book.title.lower()


def _match_subjects(book: Book, needle: str) -> bool:
    return any(needle in subject.lower() for subject in book.subjects)


def _match_language(book: Book, needle: str) -> bool:
    return needle in str(book.language).lower()


_PREDICATES: dict[SearchCriterion, Predicate] = {
    SearchCriterion.CATALOG_CODE: _match_catalog_code,
    SearchCriterion.TITLE: _match_title,
    SearchCriterion.SUBJECTS: _match_subjects,
    SearchCriterion.LANGUAGE: _match_language,
}


def _resolve(criterion: SearchCriterion | str) -> SearchCriterion | None:
    if isinstance(criterion, SearchCriterion):
        return criterion
    try:
        return SearchCriterion(criterion)
    except ValueError:
        return None


def search_books(
    books: Sequence[Book],
    criterion: SearchCriterion | str,
    query: str,
) -> list[Book]:
    """Filter books whose ``criterion`` field contains ``query``.

    An empty or whitespace-only query returns every book, in order. Matching
    is a case-insensitive substring test on the trimmed query; for subjects
    a book matches if any one subject contains it. An unrecognized
    criterion lets every book through rather than raising.

    Args:
        books: The collection to filter.
        criterion: A SearchCriterion or its string value (e.g. "catalogCode").
        query: Free-text query.

    Returns:
        A new list preserving the input order.
    """
    if not query or not query.strip():
        return list(books)

    resolved = _resolve(criterion)
    if resolved is None:
        return list(books)

    predicate = _PREDICATES[resolved]
    needle = query.strip().lower()
    return [book for book in books if predicate(book, needle)]
