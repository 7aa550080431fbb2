"""Tool registry for the todo MCP server."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mcp.types import CallToolResult, TextContent, Tool

if TYPE_CHECKING:
    from saar_todo.store import TodoStore

ToolHandler = Callable[["TodoStore", dict], Awaitable[list[TextContent]]]


@dataclass
class ToolEntry:
    """A registered tool with its definition and handler."""

    definition: Callable[[], Tool]
    handler: ToolHandler


_TOOLS: dict[str, ToolEntry] = {}


def register(name: str, entry: ToolEntry) -> None:
    """Register a tool by name."""
    _TOOLS[name] = entry


def all_tools() -> list[Tool]:
    """Return all tool definitions in registration order."""
    return [e.definition() for e in _TOOLS.values()]


def tool_error(msg: str) -> CallToolResult:
    """Return an MCP error result with a text message."""
    return CallToolResult(
        content=[TextContent(type="text", text=msg)],
        isError=True,
    )


def get_handler(name: str) -> ToolHandler | None:
    """Look up the handler for a tool name."""
    entry = _TOOLS.get(name)
    return entry.handler if entry else None
