# ABOUTME: The `libris login` and `libris logout` commands.
# ABOUTME: Write or remove the placeholder session token that gates catalog commands.

from pathlib import Path

import click
from rich.console import Console

from libris.auth import PLACEHOLDER_TOKEN, SessionStore
from libris.cli.options import token_option

console = Console()


@click.command("login")
@token_option
@click.option(
    "--token",
    default=PLACEHOLDER_TOKEN,
    show_default=True,
    help="Token to store for the session.",
)
def login(token_path: Path | None, token: str) -> None:
    """Start a session so catalog commands can run."""
    session = SessionStore(token_path)
    if session.is_authenticated():
        console.print("[dim]Already logged in.[/dim]")
        return
    session.login(token)
    console.print("[green]Logged in.[/green]")


@click.command("logout")
@token_option
def logout(token_path: Path | None) -> None:
    """End the current session."""
    if SessionStore(token_path).logout():
        console.print("Logged out.")
    else:
        console.print("[dim]No active session.[/dim]")
