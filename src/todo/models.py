"""Todo record and its on-disk serialization contract.

The file format is a JSON array of objects whose keys follow FIELDS in order.
Only the first four fields are required on load; timestamps are optional so
hand-written files stay valid.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any

from todo.errors import ParseError

# ---------------------------------------------------------------------------
# Serialization contract
# ---------------------------------------------------------------------------

FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "description",
    "completed",
    "created_at",
    "updated_at",
)

REQUIRED_FIELDS: tuple[str, ...] = ("id", "title", "description", "completed")


def now_iso() -> str:
    """Current local timestamp in ISO 8601 format."""
    return datetime.datetime.now().astimezone().isoformat()


@dataclass
class Todo:
    id: int
    title: str
    description: str = ""
    completed: bool = False
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def status(self) -> str:
        return "Completed" if self.completed else "Pending"

    def to_dict(self) -> dict[str, Any]:
        """Emit the record with keys in FIELDS order."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: object) -> Todo:
        """Build a Todo from one decoded JSON entry, checking every field.

        Raises ParseError naming the first field that is missing or has the
        wrong type. Keys outside FIELDS are ignored.
        """
        if not isinstance(data, dict):
            raise ParseError(f"todo entry must be an object, got {type(data).__name__}")

        for name in REQUIRED_FIELDS:
            if name not in data:
                raise ParseError(f"todo entry is missing field '{name}'")

        todo_id = data["id"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(todo_id, int) or isinstance(todo_id, bool) or todo_id < 1:
            raise ParseError(f"field 'id' must be a positive integer, got {todo_id!r}")
        if not isinstance(data["title"], str):
            raise ParseError(f"todo {todo_id}: field 'title' must be a string")
        if not isinstance(data["description"], str):
            raise ParseError(f"todo {todo_id}: field 'description' must be a string")
        if not isinstance(data["completed"], bool):
            raise ParseError(f"todo {todo_id}: field 'completed' must be a boolean")

        for name in ("created_at", "updated_at"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ParseError(f"todo {todo_id}: field '{name}' must be a string or null")

        return cls(
            id=todo_id,
            title=data["title"],
            description=data["description"],
            completed=data["completed"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
