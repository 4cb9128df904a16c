# ABOUTME: Opens a loaded CatalogService for one CLI command and closes its store afterwards.
# ABOUTME: Enforces the login check and turns store failures into console errors and exit code 1.

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from libris.auth import SessionStore
from libris.config import StoreConfig
from libris.service import CatalogService
from libris.store import StoreError, StoreUnavailable, open_store


def require_login(console: Console, token_path: Path | None) -> None:
    """Exit with status 1 unless a session token is present."""
    if not SessionStore(token_path).is_authenticated():
        console.print("[red]Not logged in.[/red] Run [bold]libris login[/bold] first.")
        raise SystemExit(1)


def build_config(
    backend: str,
    db_path: Path | None,
    project_id: str | None,
    api_key: str | None,
) -> StoreConfig:
    """Build a StoreConfig from CLI options, reporting bad combinations as usage errors."""
    try:
        return StoreConfig(
            backend=backend, db_path=db_path, project_id=project_id, api_key=api_key
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@contextmanager
def catalog_session(
    console: Console,
    config: StoreConfig,
    token_path: Path | None,
    *,
    tolerate_load_failure: bool = False,
) -> Iterator[CatalogService]:
    """Yield a loaded CatalogService, closing its store on exit.

    When the load fails and ``tolerate_load_failure`` is set, a warning is
    printed and the service is yielded with its empty fallback collection.
    Otherwise the command stops with exit code 1. StoreErrors raised by the
    command body are printed and also end in exit code 1.
    """
    require_login(console, token_path)

    store = open_store(config)
    try:
        service = CatalogService(store)
        try:
            service.load()
        except StoreUnavailable as exc:
            if not tolerate_load_failure:
                console.print(f"[red]Could not load the catalog: {escape(str(exc))}[/red]")
                raise SystemExit(1) from exc
            console.print(
                f"[yellow]Could not load the catalog: {escape(str(exc))}. "
                "Showing an empty collection.[/yellow]"
            )
        try:
            yield service
        except StoreError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1) from exc
    finally:
        store.close()
