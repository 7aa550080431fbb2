"""Failure taxonomy for todo operations.

Each error carries the JSON-RPC code the server reports when it turns the
exception into a protocol error response.
"""

from __future__ import annotations

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

# MCP's reserved code for an unknown resource URI.
RESOURCE_NOT_FOUND = -32002


class TodoError(Exception):
    """Base class for failures surfaced to the caller."""

    code: int = INTERNAL_ERROR


class InvalidArgument(TodoError):
    code = INVALID_PARAMS


class NotFound(TodoError):
    code = RESOURCE_NOT_FOUND

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class UnknownOperation(TodoError):
    code = METHOD_NOT_FOUND

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind}: {name}")
        self.kind = kind
        self.name = name


class PersistenceError(TodoError):
    """Writing the backing file failed; the in-memory collection is unchanged."""


class StoreLoadError(Exception):
    """The backing file exists but could not be read. Fatal at startup."""
