"""Todo store: the in-memory collection and its JSON backing file.

The whole collection is rewritten on every mutation (temp file + rename).
Mutations are computed on a copy and committed in memory only after the
write succeeds, so a failed save leaves the store as it was.

Identifiers are decimal strings. New todos get ``max(existing) + 1``; after a
delete the survivors are renumbered ``"1".."N"`` in their existing order, so
callers must not hold on to ids across deletes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from mcp.types import (
    EmbeddedResource,
    PromptMessage,
    Resource,
    TextContent,
    TextResourceContents,
)

from saar_todo.errors import InvalidArgument, NotFound, PersistenceError, StoreLoadError
from saar_todo.logger import logger
from saar_todo.types import Todo

MIME_TYPE = "text/plain"
URI_SCHEME = "todo"

SUMMARY_INSTRUCTION = "Please summarize the following todos:"
SUMMARY_CLOSING = "Provide a concise summary of all the todos above."

_EXAMPLE_TODOS = {
    "1": Todo(title="First Note", content="This is todo 1"),
    "2": Todo(title="Second Note", content="This is todo 2"),
}


def todo_uri(todo_id: str) -> str:
    return f"{URI_SCHEME}:///{todo_id}"


def _id_from_uri(uri: str) -> str:
    return urlparse(str(uri)).path.removeprefix("/")


def _next_id(todos: dict[str, Todo]) -> str:
    numeric = [int(k) for k in todos if k.isdecimal()]
    return str(max(numeric, default=0) + 1)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class TodoStore:
    """Owns the todo collection and its backing file."""

    def __init__(self, path: Path, todos: dict[str, Todo] | None = None) -> None:
        self.path = path
        self._todos: dict[str, Todo] = dict(todos or {})

    @property
    def todos(self) -> dict[str, Todo]:
        """Snapshot of the collection in listing order."""
        return dict(self._todos)

    # -- lifecycle -------------------------------------------------------------

    @classmethod
    def load(cls, path: Path, *, seed_examples: bool = False) -> TodoStore:
        """Read the backing file, falling back to a default collection.

        A missing or malformed file yields the default (empty, or the two
        example todos when ``seed_examples`` is set), which is written back
        immediately. Any other I/O failure raises StoreLoadError.
        """
        store = cls(path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.info("No todo file, starting fresh", path=str(path), seeded=seed_examples)
            store._init_default(seed_examples)
            return store
        except OSError as exc:
            raise StoreLoadError(f"Cannot read todo file {path}: {exc}") from exc

        try:
            store._todos = _parse_collection(raw)
        except ValueError as exc:
            logger.warning(
                "Todo file is malformed, starting fresh",
                path=str(path),
                err=str(exc),
                seeded=seed_examples,
            )
            store._init_default(seed_examples)
            return store

        logger.info("Loaded todos", path=str(path), count=len(store._todos))
        return store

    def _init_default(self, seed_examples: bool) -> None:
        todos = dict(_EXAMPLE_TODOS) if seed_examples else {}
        self._todos = {k: Todo(t.title, t.content, t.done) for k, t in todos.items()}
        self.save()

    def save(self) -> None:
        """Rewrite the backing file from the in-memory collection."""
        self._write(self._todos)

    def _write(self, todos: dict[str, Todo]) -> None:
        payload = {todo_id: todo.to_dict() for todo_id, todo in todos.items()}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".json.tmp")
            tmp.write_text(json.dumps(payload, indent=2))
            tmp.replace(self.path)
        except OSError as exc:
            logger.error("Failed to save todos", path=str(self.path), err=str(exc))
            raise PersistenceError(f"Failed to save todos: {exc}") from exc

    def _commit(self, todos: dict[str, Todo]) -> None:
        self._write(todos)
        self._todos = todos

    def _get(self, todo_id: str) -> Todo:
        todo = self._todos.get(todo_id)
        if todo is None:
            raise NotFound(todo_id)
        return todo

    # -- resources -------------------------------------------------------------

    def list_resources(self) -> list[Resource]:
        return [
            Resource(
                uri=todo_uri(todo_id),
                mimeType=MIME_TYPE,
                name=todo.title,
                description=f"A text todo: {todo.title}",
                done=todo.done,
            )
            for todo_id, todo in self._todos.items()
        ]

    def read_resource(self, uri: str) -> TextResourceContents:
        todo = self._get(_id_from_uri(uri))
        return TextResourceContents(
            uri=str(uri),
            mimeType=MIME_TYPE,
            text=todo.content,
            done=todo.done,
        )

    # -- tools -----------------------------------------------------------------

    def create_todo(self, title: Any, content: Any) -> str:
        title = _as_text(title)
        content = _as_text(content)
        if not title.strip() or not content.strip():
            raise InvalidArgument("Title and content are required")

        todo_id = _next_id(self._todos)
        todos = self.todos
        todos[todo_id] = Todo(title=title, content=content)
        self._commit(todos)
        logger.info("Created todo", todo_id=todo_id, title=title)
        return f"Created todo {todo_id}: {title}"

    def mark_done(self, todo_id: str, done: bool) -> str:
        current = self._get(todo_id)
        todos = self.todos
        todos[todo_id] = Todo(title=current.title, content=current.content, done=done)
        self._commit(todos)
        state = "done" if done else "not done"
        logger.info("Marked todo", todo_id=todo_id, done=done)
        return f"Marked todo {todo_id} as {state}"

    def get_all_todos(self) -> str:
        if not self._todos:
            return "No todos available"
        return "\n".join(
            f"{todo_id}: {todo.title} - {'Done' if todo.done else 'Not Done'}"
            for todo_id, todo in self._todos.items()
        )

    def delete_todo(self, todo_id: str) -> str:
        self._get(todo_id)
        survivors = [todo for key, todo in self._todos.items() if key != todo_id]
        self._commit({str(i): todo for i, todo in enumerate(survivors, start=1)})
        logger.info("Deleted todo", todo_id=todo_id, remaining=len(survivors))
        return f"Deleted todo {todo_id} and reindexed remaining todos"

    # -- prompts ---------------------------------------------------------------

    def build_summary_prompt(self) -> list[PromptMessage]:
        embedded = [
            PromptMessage(
                role="user",
                content=EmbeddedResource(
                    type="resource",
                    resource=TextResourceContents(
                        uri=todo_uri(todo_id),
                        mimeType=MIME_TYPE,
                        text=todo.content,
                        done=todo.done,
                    ),
                ),
            )
            for todo_id, todo in self._todos.items()
        ]
        return [
            PromptMessage(role="user", content=TextContent(type="text", text=SUMMARY_INSTRUCTION)),
            *embedded,
            PromptMessage(role="user", content=TextContent(type="text", text=SUMMARY_CLOSING)),
        ]


def _parse_collection(raw: bytes) -> dict[str, Todo]:
    """Decode the backing file; any structural problem raises ValueError."""
    data = json.loads(raw)  # JSONDecodeError and UnicodeDecodeError are ValueErrors
    if not isinstance(data, dict):
        raise ValueError(f"expected an object of todos, got {type(data).__name__}")
    return {str(todo_id): Todo.from_dict(record) for todo_id, record in data.items()}
