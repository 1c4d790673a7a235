"""Todo Store — ordered todo collection with CRUD and JSON persistence.

The store owns its Todo records. Ids come from a high-water mark that only
grows, so an id is never handed out twice, even after deletes.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

from todo.errors import NotFoundError, ParseError, StoreIOError
from todo.fs import atomic_write_file, read_text_file
from todo.models import Todo, now_iso

log = logging.getLogger(__name__)


class TodoStore:
    def __init__(self, todos: list[Todo] | None = None, next_id: int | None = None) -> None:
        self._todos: list[Todo] = list(todos or [])
        seen: set[int] = set()
        for todo in self._todos:
            if todo.id in seen:
                raise ValueError(f"duplicate todo id {todo.id}")
            seen.add(todo.id)
        floor = max(seen, default=0) + 1
        self._next_id = max(next_id or 1, floor)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str) -> TodoStore:
        """Read the todo file at path. A missing file yields an empty store.

        Accepts the JSON array format and the older {"todos": [...],
        "next_id": N} object. Raises ParseError for anything else.
        """
        try:
            raw = read_text_file(path)
        except UnicodeDecodeError as exc:
            raise ParseError(f"todo file is not valid UTF-8: {exc}", path) from exc
        except OSError as exc:
            raise StoreIOError(f"cannot read todo file: {exc.strerror or exc}", path) from exc

        if raw is None:
            log.debug("no todo file at %s, starting empty", path)
            return cls()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ParseError(f"malformed JSON: {exc}", path) from exc

        next_id: int | None = None
        if isinstance(data, dict) and "todos" in data:
            next_id = data.get("next_id")
            if next_id is not None and (not isinstance(next_id, int) or isinstance(next_id, bool)):
                raise ParseError("field 'next_id' must be an integer", path)
            data = data["todos"]

        if not isinstance(data, list):
            raise ParseError(f"expected a JSON array of todos, got {type(data).__name__}", path)

        todos: list[Todo] = []
        seen: set[int] = set()
        for entry in data:
            try:
                todo = Todo.from_dict(entry)
            except ParseError as exc:
                raise ParseError(exc.args[0], path) from exc
            if todo.id in seen:
                raise ParseError(f"duplicate todo id {todo.id}", path)
            seen.add(todo.id)
            todos.append(todo)

        store = cls(todos, next_id=next_id)
        log.debug("loaded %d todo(s) from %s", len(todos), path)
        return store

    def save(self, path: str) -> None:
        """Write the todos to path as a JSON array, replacing the file."""
        content = json.dumps([t.to_dict() for t in self._todos], indent=2, ensure_ascii=False)
        try:
            atomic_write_file(path, content + "\n")
        except OSError as exc:
            raise StoreIOError(f"cannot write todo file: {exc.strerror or exc}", path) from exc
        log.debug("saved %d todo(s) to %s", len(self._todos), path)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    @property
    def next_id(self) -> int:
        return self._next_id

    def add(self, title: str, description: str = "") -> Todo:
        now = now_iso()
        todo = Todo(
            id=self._next_id,
            title=title,
            description=description,
            completed=False,
            created_at=now,
            updated_at=now,
        )
        self._todos.append(todo)
        self._next_id += 1
        log.info("added todo %d: %s", todo.id, title)
        return todo

    def get(self, todo_id: int) -> Todo:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise NotFoundError(todo_id)

    def edit(self, todo_id: int, title: str | None = None, description: str | None = None) -> Todo:
        """Update the given fields of a todo. None means leave unchanged."""
        todo = self.get(todo_id)
        if title is None and description is None:
            return todo
        if title is not None:
            todo.title = title
        if description is not None:
            todo.description = description
        todo.updated_at = now_iso()
        log.info("edited todo %d", todo_id)
        return todo

    def toggle(self, todo_id: int) -> Todo:
        todo = self.get(todo_id)
        todo.completed = not todo.completed
        todo.updated_at = now_iso()
        log.info("toggled todo %d -> %s", todo_id, todo.status.lower())
        return todo

    def delete(self, todo_id: int) -> Todo:
        todo = self.get(todo_id)
        self._todos.remove(todo)
        log.info("deleted todo %d", todo_id)
        return todo

    def list(self) -> list[Todo]:
        return list(self._todos)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._todos)

    def __iter__(self) -> Iterator[Todo]:
        return iter(list(self._todos))

    def __contains__(self, todo_id: object) -> bool:
        return any(t.id == todo_id for t in self._todos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TodoStore):
            return NotImplemented
        return self._todos == other._todos

    def __repr__(self) -> str:
        return f"TodoStore({len(self._todos)} todos, next_id={self._next_id})"
