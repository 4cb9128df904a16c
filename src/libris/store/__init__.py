# ABOUTME: Public API for the Libris storage layer.
# ABOUTME: Exports the store contract, its errors, both backends, and backend selection.

import logging

from libris.config import BACKEND_REMOTE, StoreConfig
from libris.store.base import (
    CollectionStore,
    DuplicateCatalogCode,
    NotFound,
    StoreError,
    StoreUnavailable,
)
from libris.store.http import LibrisHttpClient
from libris.store.local import LocalStore
from libris.store.remote import RemoteStore

logger = logging.getLogger(__name__)


def open_store(config: StoreConfig) -> CollectionStore:
    """Construct the backend named by ``config``.

    The backend is fixed for the lifetime of the returned store. The local
    database is opened on first use, so open failures surface from
    ``load_all``.
    """
    if config.backend == BACKEND_REMOTE:
        logger.debug("Using remote store for project %s", config.project_id)
        http_client = LibrisHttpClient(api_key=config.api_key)
        return RemoteStore(http_client, config.project_id or "", database=config.database)

    logger.debug("Using local store at %s", config.db_path)
    return LocalStore(path=config.db_path)


__all__ = [
    "CollectionStore",
    "DuplicateCatalogCode",
    "LocalStore",
    "NotFound",
    "RemoteStore",
    "StoreError",
    "StoreUnavailable",
    "open_store",
]
