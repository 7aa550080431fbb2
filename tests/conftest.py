"""Shared test fixtures for saar-todo."""

from __future__ import annotations

from pathlib import Path

import pytest

from saar_todo.store import TodoStore

# ---------------------------------------------------------------------------
# Shared helpers (plain functions, not fixtures, importable by test files)
# ---------------------------------------------------------------------------


def make_settings(**overrides):
    """Create a Settings object with sensible defaults for testing.

    Accepts model fields (server, store, logging) plus the shortcuts
    ``store_path`` and ``seed_examples`` for the common store overrides.

    Usage::

        s = make_settings(store_path=tmp_path / "todos.json")
        s = make_settings(server=ServerConfig(name="other"))
    """
    from saar_todo.config import LoggingConfig, ServerConfig, Settings, StoreConfig

    store_kwargs = {}
    if "store_path" in overrides:
        store_kwargs["path"] = overrides.pop("store_path")
    if "seed_examples" in overrides:
        store_kwargs["seed_examples"] = overrides.pop("seed_examples")

    defaults = {
        "server": ServerConfig(),
        "store": StoreConfig(**store_kwargs),
        "logging": LoggingConfig(),
    }
    defaults.update(overrides)
    return Settings.model_construct(**defaults)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def todo_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def store(todo_path: Path) -> TodoStore:
    """An empty store backed by a temp file."""
    return TodoStore.load(todo_path)


@pytest.fixture()
def three_todos(store: TodoStore) -> TodoStore:
    store.create_todo("alpha", "first")
    store.create_todo("beta", "second")
    store.create_todo("gamma", "third")
    return store
