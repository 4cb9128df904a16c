# ABOUTME: CLI package for Libris, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from libris.cli.commands import (
    add_cmd,
    auth_cmd,
    edit_cmd,
    info_cmd,
    ls_cmd,
    rm_cmd,
    search_cmd,
)


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="libris")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Libris - a personal library catalog."""
    configure_logging(verbose)


cli.add_command(auth_cmd.login)
cli.add_command(auth_cmd.logout)
cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(info_cmd.info)
cli.add_command(edit_cmd.edit)
cli.add_command(rm_cmd.rm)
