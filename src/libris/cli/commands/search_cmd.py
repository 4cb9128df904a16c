# ABOUTME: The `libris search` command for one-off searches of the catalog.
# ABOUTME: Matches the query against a single field: catalog code, title, subjects, or language.

from pathlib import Path

import click
from rich.console import Console

from libris.cli.options import criterion_option, store_options
from libris.cli.render import books_table
from libris.cli.session import build_config, catalog_session

console = Console()


@click.command("search")
@click.argument("query")
@criterion_option
@store_options
def search(
    query: str,
    criterion: str,
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
    token_path: Path | None,
) -> None:
    """Search the catalog by catalog code, title, subject, or language."""
    config = build_config(backend, db_path, project_id, api_key)
    with catalog_session(console, config, token_path, tolerate_load_failure=True) as service:
        results = service.search(criterion, query)

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(books_table(results))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
