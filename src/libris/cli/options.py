# ABOUTME: Shared Click options for Libris CLI commands.
# ABOUTME: Store selection (--backend, --db, --project, --api-key) and --token-file, each env-overridable.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from libris.catalog.types import SearchCriterion
from libris.config import BACKENDS, DEFAULT_DB_PATH, DEFAULT_TOKEN_PATH

backend_option = click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default=BACKENDS[0],
    envvar="LIBRIS_BACKEND",
    show_default=True,
    help="Storage backend.",
)

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="LIBRIS_DB",
    help=f"Path to library database for the local backend (default: {DEFAULT_DB_PATH})",
)

project_option = click.option(
    "--project",
    "project_id",
    default=None,
    envvar="LIBRIS_PROJECT_ID",
    help="Document database project id for the remote backend.",
)

api_key_option = click.option(
    "--api-key",
    default=None,
    envvar="LIBRIS_API_KEY",
    help="API key for the remote backend.",
)

token_option = click.option(
    "--token-file",
    "token_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="LIBRIS_TOKEN_FILE",
    help=f"Session token file (default: {DEFAULT_TOKEN_PATH})",
)

criterion_option = click.option(
    "--by",
    "criterion",
    type=click.Choice([c.value for c in SearchCriterion], case_sensitive=False),
    default=SearchCriterion.TITLE.value,
    show_default=True,
    help="Field to match the query against.",
)


def store_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply every store-selection option plus --token-file."""
    for option in (token_option, api_key_option, project_option, db_option, backend_option):
        func = option(func)
    return func
