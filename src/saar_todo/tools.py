"""Todo MCP tools: create_todo, mark_todo_done, get_all_todos, delete_todo.

Every handler takes the store explicitly and returns a single text block.
Validation failures and unknown ids surface as TodoError subclasses; the
server turns them into error results.
"""

from __future__ import annotations

from mcp.types import TextContent, Tool

from saar_todo.errors import InvalidArgument
from saar_todo.registry import ToolEntry, register
from saar_todo.store import TodoStore


def _text(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]


def _todo_id(arguments: dict) -> str:
    todo_id = arguments.get("id")
    if todo_id is None or str(todo_id) == "":
        raise InvalidArgument("Todo id is required")
    return str(todo_id)


# -- create_todo ---------------------------------------------------------------


def _create_todo_definition() -> Tool:
    return Tool(
        name="create_todo",
        description="Create a new todo",
        inputSchema={
            "type": "object",
            "properties": {
                "title": {
                    "type": "string",
                    "description": "Title of the todo",
                },
                "content": {
                    "type": "string",
                    "description": "Text content of the todo",
                },
            },
            "required": ["title", "content"],
        },
    )


async def _create_todo_handle(store: TodoStore, arguments: dict) -> list[TextContent]:
    return _text(store.create_todo(arguments.get("title"), arguments.get("content")))


# -- mark_todo_done ------------------------------------------------------------


def _mark_todo_done_definition() -> Tool:
    return Tool(
        name="mark_todo_done",
        description="Mark a todo as done or not done",
        inputSchema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": "ID of the todo",
                },
                "done": {
                    "type": "boolean",
                    "default": True,
                    "description": "Whether the todo is done",
                },
            },
            "required": ["id"],
        },
    )


async def _mark_todo_done_handle(store: TodoStore, arguments: dict) -> list[TextContent]:
    todo_id = _todo_id(arguments)
    done = arguments.get("done", True)
    if not isinstance(done, bool):
        raise InvalidArgument("'done' must be a boolean")
    return _text(store.mark_done(todo_id, done))


# -- get_all_todos -------------------------------------------------------------


def _get_all_todos_definition() -> Tool:
    return Tool(
        name="get_all_todos",
        description="List every todo with its done status",
        inputSchema={"type": "object", "properties": {}},
    )


async def _get_all_todos_handle(store: TodoStore, arguments: dict) -> list[TextContent]:
    return _text(store.get_all_todos())


# -- delete_todo ---------------------------------------------------------------


def _delete_todo_definition() -> Tool:
    return Tool(
        name="delete_todo",
        description=(
            "Delete a todo. Remaining todos are renumbered 1..N, so previously "
            "seen ids may change."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "description": "ID of the todo to delete",
                },
            },
            "required": ["id"],
        },
    )


async def _delete_todo_handle(store: TodoStore, arguments: dict) -> list[TextContent]:
    return _text(store.delete_todo(_todo_id(arguments)))


# -- registration --------------------------------------------------------------

register(
    "create_todo",
    ToolEntry(definition=_create_todo_definition, handler=_create_todo_handle),
)
register(
    "mark_todo_done",
    ToolEntry(definition=_mark_todo_done_definition, handler=_mark_todo_done_handle),
)
register(
    "get_all_todos",
    ToolEntry(definition=_get_all_todos_definition, handler=_get_all_todos_handle),
)
register(
    "delete_todo",
    ToolEntry(definition=_delete_todo_definition, handler=_delete_todo_handle),
)
