# ABOUTME: Rich renderables for book listings and single-book detail views.
# ABOUTME: Shared by the ls, search, info, add, and edit commands.

from rich.table import Table

from libris.catalog.formatting import format_authors, format_subjects
from libris.catalog.types import Book


def books_table(books: list[Book]) -> Table:
    """Build the catalog listing table."""
    table = Table()
    table.add_column("Catalog Code", style="dim", no_wrap=True, min_width=13)
    table.add_column("Title", style="bold")
    table.add_column("Authors")
    table.add_column("Publisher")
    table.add_column("Language")
    table.add_column("Category")
    table.add_column("Subjects")

    for book in books:
        table.add_row(
            book.catalog_code,
            book.title,
            format_authors(book.authors),
            book.publisher,
            str(book.language),
            str(book.category),
            format_subjects(book.subjects),
        )
    return table


def book_detail(book: Book) -> Table:
    """Build a two-column field/value table for one book."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Catalog Code", book.catalog_code)
    table.add_row("ID", book.id)
    table.add_row("Title", book.title)
    table.add_row("Authors", format_authors(book.authors))
    table.add_row("Publisher", book.publisher)
    table.add_row("Edition", book.edition)
    table.add_row("Year", book.year)
    table.add_row("Location", book.location)
    table.add_row("ISBN", book.isbn)
    table.add_row("Language", str(book.language))
    table.add_row("Category", str(book.category))
    table.add_row("Subjects", format_subjects(book.subjects))
    if book.review:
        table.add_row("Review", book.review)
    table.add_row("Added", book.created_at.isoformat(timespec="seconds"))
    table.add_row("Modified", book.updated_at.isoformat(timespec="seconds"))
    return table
