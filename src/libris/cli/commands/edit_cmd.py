# ABOUTME: The `libris edit` command for changing a cataloged book's fields.
# ABOUTME: Unspecified fields keep their current values; the catalog code never changes.

from pathlib import Path

import click
from rich.console import Console

from libris.catalog.validation import ValidationError, validate_form_data
from libris.cli.commands.add_cmd import print_validation_errors
from libris.cli.options import store_options
from libris.cli.render import book_detail
from libris.cli.session import build_config, catalog_session
from libris.store import NotFound

console = Console()


def _pick(new: str | None, current: str) -> str:
    return current if new is None else new


def _pick_list(new: tuple[str, ...], clear: bool, current: list[str]) -> list[str]:
    if clear:
        return []
    return list(new) if new else current


@click.command("edit")
@click.argument("book_ref")
@click.option("--title", default=None, help="New title.")
@click.option("-a", "--author", "authors", multiple=True, help="Replace authors (repeatable).")
@click.option("--no-authors", is_flag=True, default=False, help="Remove all authors.")
@click.option("--publisher", default=None, help="New publisher.")
@click.option("--edition", default=None, help="New edition.")
@click.option("--year", default=None, help="New publication year.")
@click.option("--location", default=None, help="New shelf location.")
@click.option("--isbn", default=None, help="New ISBN.")
@click.option("--language", default=None, help="New language.")
@click.option("--category", default=None, help="New category.")
@click.option("-s", "--subject", "subjects", multiple=True, help="Replace subjects (repeatable).")
@click.option("--no-subjects", is_flag=True, default=False, help="Remove all subjects.")
@click.option("--review", default=None, help="New review.")
@store_options
def edit(
    book_ref: str,
    title: str | None,
    authors: tuple[str, ...],
    no_authors: bool,
    publisher: str | None,
    edition: str | None,
    year: str | None,
    location: str | None,
    isbn: str | None,
    language: str | None,
    category: str | None,
    subjects: tuple[str, ...],
    no_subjects: bool,
    review: str | None,
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
    token_path: Path | None,
) -> None:
    """Edit a book by id or catalog code."""
    config = build_config(backend, db_path, project_id, api_key)
    with catalog_session(console, config, token_path) as service:
        book = service.get(book_ref)
        if book is None:
            console.print(f"[red]Book {book_ref} not found.[/red]")
            raise SystemExit(1)

        current = book.form_data()
        try:
            form_data = validate_form_data(
                title=_pick(title, current.title),
                authors=_pick_list(authors, no_authors, current.authors),
                publisher=_pick(publisher, current.publisher),
                edition=_pick(edition, current.edition),
                year=_pick(year, current.year),
                location=_pick(location, current.location),
                isbn=_pick(isbn, current.isbn),
                language=_pick(language, str(current.language)),
                category=_pick(category, str(current.category)),
                subjects=_pick_list(subjects, no_subjects, current.subjects),
                review=_pick(review, current.review),
            )
        except ValidationError as exc:
            print_validation_errors(exc)
            raise SystemExit(1) from exc

        try:
            updated = service.update(book.id, form_data)
        except NotFound as exc:
            console.print(f"[red]Book {book_ref} not found.[/red]")
            raise SystemExit(1) from exc

    console.print(f"Updated [cyan]{updated.catalog_code}[/cyan].\n")
    console.print(book_detail(updated))
