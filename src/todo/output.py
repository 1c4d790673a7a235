"""CLI output formatting — JSON, human-readable, and compact modes."""
from __future__ import annotations

import json
import sys

import click

from todo.models import Todo

TABLE_WIDTH = 100


def output(data: dict[str, object], human: bool = False, compact: bool = False) -> None:
    """Print result as JSON (default), human-readable, or compact text."""
    if "error" in data:
        click.echo(json.dumps(data, indent=2, default=str), err=True)
        sys.exit(1)
    if compact:
        click.echo(_format_compact(data))
    elif human:
        todos = data.get("todos")
        if isinstance(todos, list):
            click.echo(format_table(todos))
            return
        for k, v in data.items():
            if isinstance(v, (list, dict)):
                click.echo(f"{k}: {json.dumps(v, indent=2, default=str)}")
            else:
                click.echo(f"{k}: {v}")
    else:
        click.echo(json.dumps(data, indent=2, default=str))


def truncate(text: str, max_chars: int) -> str:
    """Shorten text to max_chars, ending in '...' when cut."""
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 3] + "..."


def format_table(todos: list[dict[str, object]]) -> str:
    """Render todo dicts as a fixed-width ID/TITLE/DESCRIPTION/STATUS table."""
    if not todos:
        return "No todos found."
    lines = [
        f"{'ID':<5} {'TITLE':<30} {'DESCRIPTION':<50} {'STATUS':<10}",
        "-" * TABLE_WIDTH,
    ]
    for t in todos:
        status = "Completed" if t.get("completed") else "Pending"
        lines.append(
            f"{t.get('id', ''):<5} "
            f"{truncate(str(t.get('title', '')), 27):<30} "
            f"{truncate(str(t.get('description', '')), 47):<50} "
            f"{status:<10}"
        )
    return "\n".join(lines)


def todo_payload(todo: Todo, status: str | None = None) -> dict[str, object]:
    """Wrap a todo for output, optionally tagged with the action status."""
    data: dict[str, object] = {}
    if status:
        data["status"] = status
    data.update(todo.to_dict())
    return data


def _format_compact(data: dict[str, object]) -> str:
    """One line per todo: `[x] 3 title`."""
    todos = data.get("todos")
    if isinstance(todos, list):
        if not todos:
            return "No todos found."
        return "\n".join(_compact_line(t) for t in todos if isinstance(t, dict))

    if "id" in data and "title" in data:
        line = _compact_line(data)
        status = data.get("status")
        return f"{status}: {line}" if status else line

    return json.dumps(data, indent=2, default=str)


def _compact_line(todo: dict[str, object]) -> str:
    mark = "x" if todo.get("completed") else " "
    return f"[{mark}] {todo.get('id')} {todo.get('title', '')}"
