"""Tests for saar_todo.types: Todo record parsing."""

from __future__ import annotations

import pytest

from saar_todo.types import Todo


class TestTodoFromDict:
    def test_parses_full_record(self):
        todo = Todo.from_dict({"title": "t", "content": "c", "done": True})
        assert todo == Todo(title="t", content="c", done=True)

    def test_done_defaults_to_false(self):
        assert Todo.from_dict({"title": "t", "content": "c"}).done is False

    @pytest.mark.parametrize(
        "raw",
        [
            ["not", "a", "dict"],
            {"content": "c"},
            {"title": "", "content": "c"},
            {"title": "t", "content": ""},
            {"title": "   ", "content": "c"},
            {"title": "t", "content": "\n\t"},
            {"title": "t", "content": 3},
            {"title": "t", "content": "c", "done": "yes"},
        ],
    )
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            Todo.from_dict(raw)


class TestTodoToDict:
    def test_round_trips(self):
        todo = Todo(title="t", content="c", done=True)
        assert todo.to_dict() == {"title": "t", "content": "c", "done": True}
        assert Todo.from_dict(todo.to_dict()) == todo
