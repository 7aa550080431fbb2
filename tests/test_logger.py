"""Tests for saar_todo.logger: level driven by LoggingConfig."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, patch

import pytest
from conftest import make_settings

from saar_todo.__main__ import main
from saar_todo.config import LoggingConfig
from saar_todo.logger import configure_logging, logger


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestConfigureLogging:
    @pytest.mark.parametrize(
        ("configured", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("error", logging.ERROR)],
    )
    def test_applies_configured_level(self, configured, expected):
        configure_logging(LoggingConfig(level=configured))
        assert logging.getLogger().level == expected

    def test_default_config_is_info(self):
        configure_logging(LoggingConfig(level="debug"))
        configure_logging(LoggingConfig())
        assert logging.getLogger().level == logging.INFO

    def test_filters_structlog_events_below_level(self, caplog):
        configure_logging(LoggingConfig(level="WARNING"))
        logger.info("hidden event")
        logger.warning("shown event")

        assert "shown event" in caplog.text
        assert "hidden event" not in caplog.text


class TestMainAppliesLevel:
    def test_settings_level_reaches_root_logger(self, todo_path):
        settings = make_settings(store_path=todo_path, logging=LoggingConfig(level="ERROR"))
        with (
            patch("saar_todo.config.get_settings", return_value=settings),
            patch("saar_todo.server.TodoServer.run", AsyncMock()),
        ):
            main()

        assert logging.getLogger().level == logging.ERROR
