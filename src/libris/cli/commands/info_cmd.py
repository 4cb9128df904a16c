# ABOUTME: The `libris info` command for displaying every field of one book.
# ABOUTME: Looks the book up by id or catalog code.

from pathlib import Path

import click
from rich.console import Console

from libris.cli.options import store_options
from libris.cli.render import book_detail
from libris.cli.session import build_config, catalog_session

console = Console()


@click.command("info")
@click.argument("book_ref")
@store_options
def info(
    book_ref: str,
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
    token_path: Path | None,
) -> None:
    """Show details for a book by id or catalog code."""
    config = build_config(backend, db_path, project_id, api_key)
    with catalog_session(console, config, token_path) as service:
        book = service.get(book_ref)

    if book is None:
        console.print(f"[red]Book {book_ref} not found.[/red]")
        raise SystemExit(1)

    console.print(book_detail(book))
