# ABOUTME: The `libris add` command for cataloging a new book.
# ABOUTME: Validates the form fields, assigns the next catalog code, and stores the record.

from datetime import date
from pathlib import Path

import click
from rich.console import Console

from libris.catalog.types import BookCategory, BookLanguage
from libris.catalog.validation import ValidationError, validate_form_data
from libris.cli.options import store_options
from libris.cli.render import book_detail
from libris.cli.session import build_config, catalog_session

console = Console()


def print_validation_errors(error: ValidationError) -> None:
    console.print("[red]Invalid book data:[/red]")
    for name, message in error.errors.items():
        console.print(f"  [bold]{name}[/bold]: {message}")


@click.command("add")
@click.option("--title", prompt=True, help="Book title.")
@click.option("-a", "--author", "authors", multiple=True, help="Author name (repeatable).")
@click.option("--publisher", prompt=True, help="Publisher.")
@click.option("--edition", prompt=True, help="Edition, e.g. '2nd'.")
@click.option(
    "--year",
    prompt=True,
    default=lambda: str(date.today().year),
    help="Publication year (4 digits).",
)
@click.option("--location", prompt=True, help="Shelf location.")
@click.option("--isbn", prompt=True, help="ISBN-10 or ISBN-13.")
@click.option(
    "--language",
    default=BookLanguage.PORTUGUESE.name.lower(),
    show_default=True,
    help="Language name (e.g. english) or stored value.",
)
@click.option(
    "--category",
    default=BookCategory.OTHER.name.lower(),
    show_default=True,
    help="Category name (e.g. non-fiction) or stored value.",
)
@click.option("-s", "--subject", "subjects", multiple=True, help="Subject (repeatable).")
@click.option("--review", default="", help="Free-text review.")
@store_options
def add(
    title: str,
    authors: tuple[str, ...],
    publisher: str,
    edition: str,
    year: str,
    location: str,
    isbn: str,
    language: str,
    category: str,
    subjects: tuple[str, ...],
    review: str,
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
    token_path: Path | None,
) -> None:
    """Add a book to the catalog."""
    try:
        form_data = validate_form_data(
            title=title,
            authors=authors,
            publisher=publisher,
            edition=edition,
            year=year,
            location=location,
            isbn=isbn,
            language=language,
            category=category,
            subjects=subjects,
            review=review,
        )
    except ValidationError as exc:
        print_validation_errors(exc)
        raise SystemExit(1) from exc

    config = build_config(backend, db_path, project_id, api_key)
    with catalog_session(console, config, token_path) as service:
        book = service.add(form_data)

    console.print(f"Added [bold]{book.title}[/bold] as [cyan]{book.catalog_code}[/cyan].\n")
    console.print(book_detail(book))
