# ABOUTME: The `libris ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of the collection, optionally filtered by criterion and query.

from pathlib import Path

import click
from rich.console import Console

from libris.cli.options import criterion_option, store_options
from libris.cli.render import books_table
from libris.cli.session import build_config, catalog_session

console = Console()


@click.command("ls")
@criterion_option
@click.option("-q", "--query", default="", help="Only show books whose field contains this text.")
@store_options
def ls(
    criterion: str,
    query: str,
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
    token_path: Path | None,
) -> None:
    """List the books in the catalog."""
    config = build_config(backend, db_path, project_id, api_key)
    with catalog_session(console, config, token_path, tolerate_load_failure=True) as service:
        service.set_criterion(criterion)
        service.set_query(query)
        books = service.filtered_list()
        total = len(service.list())

    if not books:
        console.print("[yellow]No books found.[/yellow]")
        return

    console.print(books_table(books))
    if len(books) == total:
        console.print(f"\n[dim]{total} book(s)[/dim]")
    else:
        console.print(f"\n[dim]{len(books)} of {total} book(s)[/dim]")
