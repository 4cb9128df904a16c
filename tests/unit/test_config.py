# ABOUTME: Unit tests for store configuration and backend selection.
# ABOUTME: Validates StoreConfig checks and that open_store builds the configured backend.

from pathlib import Path

import pytest

from libris.config import BACKEND_LOCAL, BACKEND_REMOTE, StoreConfig
from libris.store import LocalStore, RemoteStore, StoreUnavailable, open_store


class TestStoreConfig:
    """Tests for StoreConfig validation."""

    def test_defaults_to_local(self) -> None:
        assert StoreConfig().backend == BACKEND_LOCAL

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValueError, match="backend must be one of"):
            StoreConfig(backend="cloud")

    def test_remote_requires_project(self) -> None:
        with pytest.raises(ValueError, match="project id"):
            StoreConfig(backend=BACKEND_REMOTE)


class TestOpenStore:
    """Tests for open_store backend selection."""

    def test_local_backend(self, tmp_path: Path) -> None:
        store = open_store(StoreConfig(db_path=tmp_path / "lib.db"))
        try:
            assert isinstance(store, LocalStore)
            assert store.load_all() == []
            assert (tmp_path / "lib.db").exists()
        finally:
            store.close()

    def test_unopenable_local_path_fails_at_load_not_open(self, tmp_path: Path) -> None:
        store = open_store(StoreConfig(db_path=tmp_path))
        try:
            with pytest.raises(StoreUnavailable):
                store.load_all()
        finally:
            store.close()

    def test_remote_backend(self) -> None:
        store = open_store(StoreConfig(backend=BACKEND_REMOTE, project_id="demo"))
        try:
            assert isinstance(store, RemoteStore)
            assert "/projects/demo/" in store.collection_url
        finally:
            store.close()
