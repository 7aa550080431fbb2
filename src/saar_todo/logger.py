"""Structured logging singleton.

The logger is usable as soon as this module is imported, at the default
``LoggingConfig`` level. ``configure_logging()`` re-applies the level once
Settings have loaded (``[logging] level`` or ``LOGGING__LEVEL``).

Everything goes to stderr: stdout carries the MCP stdio channel.
"""

from __future__ import annotations

import logging
import sys

import structlog

from saar_todo.config import LoggingConfig


def _stdlib_level(config: LoggingConfig) -> int:
    return logging.getLevelName(config.level)


def _setup_logging(config: LoggingConfig) -> structlog.stdlib.BoundLogger:
    # Configure stdlib root logger first so structlog's filter_by_level works
    logging.basicConfig(level=_stdlib_level(config), format="%(message)s", stream=sys.stderr)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("saar_todo")


logger = _setup_logging(LoggingConfig())


def configure_logging(config: LoggingConfig) -> None:
    """Apply the configured level to the root logger."""
    logging.getLogger().setLevel(_stdlib_level(config))


def _uncaught_exception_handler(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_tb: object,
) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)  # type: ignore[arg-type]
        return
    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
    sys.exit(1)


sys.excepthook = _uncaught_exception_handler
