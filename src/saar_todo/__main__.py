"""Entry point for ``python -m saar_todo`` / ``saar-todo``.

Loads the todo file and serves it over MCP stdio until the client disconnects.
"""

from __future__ import annotations

import asyncio
import sys


def main() -> None:
    from saar_todo.config import get_settings
    from saar_todo.errors import PersistenceError, StoreLoadError
    from saar_todo.logger import configure_logging, logger
    from saar_todo.server import TodoServer
    from saar_todo.store import TodoStore

    try:
        settings = get_settings()
    except ValueError as exc:
        logger.error("Invalid configuration", err=str(exc))
        sys.exit(1)
    configure_logging(settings.logging)

    try:
        store = TodoStore.load(settings.store.path, seed_examples=settings.store.seed_examples)
    except (StoreLoadError, PersistenceError) as exc:
        logger.error("Failed to open todo store", err=str(exc))
        sys.exit(1)

    logger.info("Starting todo server", name=settings.server.name, path=str(store.path))
    asyncio.run(TodoServer(store, settings).run())


if __name__ == "__main__":
    main()
