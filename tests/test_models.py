"""Tests for the Todo record and its serialization contract."""

from __future__ import annotations

import pytest

from todo.errors import ParseError
from todo.models import FIELDS, Todo


def _entry(**overrides):
    data = {"id": 1, "title": "Buy milk", "description": "2 litres", "completed": False}
    data.update(overrides)
    return data


class TestToDict:
    def test_keys_follow_field_order(self):
        todo = Todo(id=3, title="t", description="d", completed=True)
        assert tuple(todo.to_dict().keys()) == FIELDS

    def test_values(self):
        todo = Todo(id=3, title="t", description="d", completed=True, created_at="c", updated_at="u")
        assert todo.to_dict() == {
            "id": 3,
            "title": "t",
            "description": "d",
            "completed": True,
            "created_at": "c",
            "updated_at": "u",
        }

    def test_status_label(self):
        assert Todo(id=1, title="t").status == "Pending"
        assert Todo(id=1, title="t", completed=True).status == "Completed"


class TestFromDict:
    def test_minimal_entry(self):
        todo = Todo.from_dict(_entry())
        assert todo == Todo(id=1, title="Buy milk", description="2 litres", completed=False)
        assert todo.created_at is None
        assert todo.updated_at is None

    def test_timestamps_kept(self):
        todo = Todo.from_dict(_entry(created_at="2026-01-01T00:00:00", updated_at=None))
        assert todo.created_at == "2026-01-01T00:00:00"

    def test_unknown_keys_ignored(self):
        todo = Todo.from_dict(_entry(priority="high"))
        assert not hasattr(todo, "priority")

    def test_not_an_object(self):
        with pytest.raises(ParseError, match="must be an object"):
            Todo.from_dict(["id", 1])

    @pytest.mark.parametrize("field", ["id", "title", "description", "completed"])
    def test_missing_required_field(self, field):
        data = _entry()
        del data[field]
        with pytest.raises(ParseError, match=field):
            Todo.from_dict(data)

    @pytest.mark.parametrize("bad_id", ["1", 0, -4, True, 1.5])
    def test_bad_id(self, bad_id):
        with pytest.raises(ParseError, match="'id'"):
            Todo.from_dict(_entry(id=bad_id))

    def test_completed_must_be_bool(self):
        with pytest.raises(ParseError, match="'completed'"):
            Todo.from_dict(_entry(completed="yes"))

    def test_title_must_be_string(self):
        with pytest.raises(ParseError, match="'title'"):
            Todo.from_dict(_entry(title=7))

    def test_timestamp_must_be_string(self):
        with pytest.raises(ParseError, match="'updated_at'"):
            Todo.from_dict(_entry(updated_at=12))
