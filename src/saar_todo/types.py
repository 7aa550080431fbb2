"""Data models for saar-todo."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Todo:
    title: str
    content: str
    done: bool = False

    @classmethod
    def from_dict(cls, raw: Any) -> Todo:
        """Build a Todo from a backing-file record, rejecting malformed entries."""
        if not isinstance(raw, dict):
            raise ValueError(f"todo record must be an object, got {type(raw).__name__}")
        title = raw.get("title")
        content = raw.get("content")
        done = raw.get("done", False)
        if not isinstance(title, str) or not title.strip():
            raise ValueError("todo record has no title")
        if not isinstance(content, str) or not content.strip():
            raise ValueError("todo record has no content")
        if not isinstance(done, bool):
            raise ValueError("todo 'done' must be a boolean")
        return cls(title=title, content=content, done=done)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
