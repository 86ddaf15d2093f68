"""
Shared pytest fixtures for optbridge tests.

This module provides:
- isolated_env: autouse fixture that clears OPTBRIDGE_* variables, runs each
  test from its own tmp_path and resets container and platform state
- memory_store / sqlite_store: store instances installed as the platform default
- store: parametrized over both backends
"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from optbridge.core.bootstrap import reset
from optbridge.db.repositories.option import SQLAlchemyOptionStore
from optbridge.platform import set_default_store
from optbridge.stores.memory import InMemoryOptionStore


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run every test in a clean working directory with no optbridge state."""
    for key in list(os.environ):
        if key.startswith("OPTBRIDGE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset()
    yield tmp_path
    reset()


@pytest.fixture
def memory_store() -> InMemoryOptionStore:
    """In-memory store installed as the platform default."""
    store = InMemoryOptionStore()
    set_default_store(store)
    return store


@pytest.fixture
def sqlite_store(tmp_path: Path) -> Iterator[SQLAlchemyOptionStore]:
    """SQLite store in tmp_path installed as the platform default."""
    store = SQLAlchemyOptionStore(tmp_path / "options.db")
    set_default_store(store)
    yield store
    store.close()


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest):
    """Each platform-level test runs against both backends."""
    return request.getfixturevalue(f"{request.param}_store")
