"""todo — a small JSON-backed todo tracker with a click CLI."""

from todo.errors import NotFoundError, ParseError, StoreIOError, TodoError
from todo.models import Todo
from todo.store import TodoStore

__all__: list[str] = [
    "NotFoundError",
    "ParseError",
    "StoreIOError",
    "Todo",
    "TodoError",
    "TodoStore",
]
