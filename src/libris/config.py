# ABOUTME: Default locations and store configuration for Libris.
# ABOUTME: StoreConfig selects the storage backend once, when the store is opened.

from dataclasses import dataclass
from pathlib import Path

LIBRIS_HOME = Path.home() / ".libris"
DEFAULT_DB_PATH = LIBRIS_HOME / "library.db"
DEFAULT_TOKEN_PATH = LIBRIS_HOME / "token"

BACKEND_LOCAL = "local"
BACKEND_REMOTE = "remote"
BACKENDS = (BACKEND_LOCAL, BACKEND_REMOTE)

DEFAULT_DATABASE = "(default)"


@dataclass
class StoreConfig:
    """Which backend to use and how to reach it.

    ``db_path`` applies to the local backend; ``project_id``, ``api_key``
    and ``database`` to the remote document store.
    """

    backend: str = BACKEND_LOCAL
    db_path: Path | None = None
    project_id: str | None = None
    api_key: str | None = None
    database: str = DEFAULT_DATABASE

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            msg = f"backend must be one of {', '.join(BACKENDS)}, got {self.backend!r}"
            raise ValueError(msg)
        if self.backend == BACKEND_REMOTE and not self.project_id:
            raise ValueError("the remote backend requires a project id")
