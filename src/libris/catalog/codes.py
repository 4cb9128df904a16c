# ABOUTME: Catalog code generation: sequential BK-<year>-<NNNNN> identifiers per calendar year.
# ABOUTME: Pure functions over the existing collection; the year is injectable for tests.

import re
from collections.abc import Iterable
from datetime import date

from libris.catalog.types import Book

CODE_PREFIX = "BK"
SEQUENCE_WIDTH = 5

_CODE_RE = re.compile(r"BK-(\d{4})-(\d+)", re.ASCII)
_SEQUENCE_RE = re.compile(r"\d+", re.ASCII)


def year_prefix(year: int) -> str:
    """Return the catalog code prefix for a year, e.g. 'BK-2024-'."""
    return f"{CODE_PREFIX}-{year}-"


def format_catalog_code(year: int, sequence: int) -> str:
    """Format a catalog code with a zero-padded sequence.

    The sequence is padded to at least SEQUENCE_WIDTH digits. Sequences
    past 99999 widen the field instead of being truncated, so codes stay
    unique and keep sorting after their predecessors numerically.
    """
    return f"{year_prefix(year)}{sequence:0{SEQUENCE_WIDTH}d}"


def parse_catalog_code(code: str) -> tuple[int, int] | None:
    """Split a catalog code into (year, sequence), or None if malformed."""
    match = _CODE_RE.fullmatch(code)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def _parse_sequence(suffix: str) -> int | None:
    """Parse the part of a code after the year prefix, or None if it is not all digits."""
    if _SEQUENCE_RE.fullmatch(suffix) is None:
        return None
    return int(suffix)


def generate_catalog_code(existing_books: Iterable[Book], year: int | None = None) -> str:
    """Derive the next catalog code for a year from the existing collection.

    Looks at every book whose code starts with the year's prefix, takes the
    highest parseable sequence number (0 if none), and returns the code for
    the number after it. Codes with unparsable suffixes are skipped.

    Args:
        existing_books: The current collection.
        year: Calendar year for the code. Defaults to the current year,
            read at call time.

    Returns:
        The next code, e.g. 'BK-2024-00038'.
    """
    if year is None:
        year = date.today().year
    prefix = year_prefix(year)

    highest = 0
    for book in existing_books:
        if not book.catalog_code.startswith(prefix):
            continue
        sequence = _parse_sequence(book.catalog_code[len(prefix):])
        if sequence is not None and sequence > highest:
            highest = sequence

    return format_catalog_code(year, highest + 1)
