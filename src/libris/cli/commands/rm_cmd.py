# ABOUTME: The `libris rm` command for permanently deleting a book.
# ABOUTME: Asks for confirmation unless --yes is given.

from pathlib import Path

import click
from rich.console import Console

from libris.cli.options import store_options
from libris.cli.session import build_config, catalog_session
from libris.store import NotFound

console = Console()


@click.command("rm")
@click.argument("book_ref")
@click.option("-y", "--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@store_options
def rm(
    book_ref: str,
    yes: bool,
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
    token_path: Path | None,
) -> None:
    """Delete a book by id or catalog code."""
    config = build_config(backend, db_path, project_id, api_key)
    with catalog_session(console, config, token_path) as service:
        book = service.get(book_ref)
        if book is None:
            console.print(f"[red]Book {book_ref} not found.[/red]")
            raise SystemExit(1)

        if not yes and not click.confirm(
            f"Delete {book.catalog_code} \"{book.title}\"?", default=False
        ):
            console.print("[dim]Cancelled.[/dim]")
            return

        try:
            removed = service.delete(book.id)
        except NotFound as exc:
            console.print(f"[red]Book {book_ref} not found.[/red]")
            raise SystemExit(1) from exc

    console.print(f"Removed [bold]{removed.title}[/bold] ([cyan]{removed.catalog_code}[/cyan]).")
