"""Errors raised by the todo store."""

from __future__ import annotations


class TodoError(Exception):
    """Base class for every failure the store reports."""


class NotFoundError(TodoError, KeyError):
    def __init__(self, todo_id: int) -> None:
        super().__init__(todo_id)
        self.todo_id = todo_id

    def __str__(self) -> str:
        return f"Todo with ID {self.todo_id} not found."


class ParseError(TodoError, ValueError):
    """The todo file exists but does not hold a valid todo list."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = self.args[0]
        return f"{self.path}: {msg}" if self.path else msg


class StoreIOError(TodoError, OSError):
    """Reading or writing the todo file failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = self.args[0]
        return f"{self.path}: {msg}" if self.path else msg
