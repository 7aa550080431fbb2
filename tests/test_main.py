"""Tests for the saar-todo entry point."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from conftest import make_settings

from saar_todo.__main__ import main


class TestMain:
    def test_serves_loaded_store(self, todo_path):
        run = AsyncMock()
        with (
            patch("saar_todo.config.get_settings", return_value=make_settings(store_path=todo_path)),
            patch("saar_todo.server.TodoServer.run", run),
        ):
            main()

        run.assert_awaited_once()
        assert todo_path.exists()

    def test_seeds_examples_when_configured(self, todo_path):
        settings = make_settings(store_path=todo_path, seed_examples=True)
        with (
            patch("saar_todo.config.get_settings", return_value=settings),
            patch("saar_todo.server.TodoServer.run", AsyncMock()),
        ):
            main()

        assert '"First Note"' in todo_path.read_text()

    def test_unreadable_store_exits_nonzero(self, tmp_path):
        """The store path is a directory, so reading it fails with an OSError."""
        run = AsyncMock()
        with (
            patch("saar_todo.config.get_settings", return_value=make_settings(store_path=tmp_path)),
            patch("saar_todo.server.TodoServer.run", run),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
        run.assert_not_awaited()

    def test_invalid_config_exits_nonzero(self):
        with (
            patch("saar_todo.config.get_settings", side_effect=ValueError("bad config")),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1
