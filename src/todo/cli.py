"""Click CLI entrypoint — `todo <subcommand>`.

Every call loads the todo file, applies one change, and saves it back.
JSON output by default, --human for tables, --compact for one-liners.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

import click

from todo.config import Config, load_config
from todo.defaults import resolve_todo_file
from todo.errors import TodoError
from todo.models import Todo
from todo.output import format_table, output, todo_payload
from todo.store import TodoStore

log = logging.getLogger(__name__)


def _configure_logging(verbose: int, config_level: str) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, config_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _emit(ctx: click.Context, data: dict[str, object]) -> None:
    output(data, ctx.obj["human"], ctx.obj["compact"])


def _load(ctx: click.Context) -> TodoStore:
    try:
        return TodoStore.load(ctx.obj["file"])
    except TodoError as e:
        output({"error": str(e)})
        sys.exit(1)


def _mutate(ctx: click.Context, action: Callable[[TodoStore], Todo], status: str) -> None:
    """Load, apply one store operation, save, and print the touched todo."""
    store = _load(ctx)
    try:
        todo = action(store)
        store.save(ctx.obj["file"])
    except TodoError as e:
        output({"error": str(e)})
        return
    _emit(ctx, todo_payload(todo, status))


@click.group()
@click.version_option(package_name="todo-store")
@click.option("--file", "file_path", default=None, help="Todo JSON file (overrides TODO_FILE and config)")
@click.option("-C", "--project-dir", default=None, help="Project directory holding todos.json and .todo.yaml")
@click.option("--config", "config_path", default=None, help="Explicit YAML config file")
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.option("--compact", is_flag=True, help="One line per todo")
@click.option("-v", "--verbose", count=True, help="-v for INFO logs, -vv for DEBUG")
@click.pass_context
def cli(
    ctx: click.Context,
    file_path: str | None,
    project_dir: str | None,
    config_path: str | None,
    human: bool,
    compact: bool,
    verbose: int,
) -> None:
    """todo — track tasks in a JSON file."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path, project_dir)
    except (OSError, ValueError) as e:
        output({"error": f"config: {e}"})
        return
    _configure_logging(verbose, config.log_level)
    ctx.obj["config"] = config
    ctx.obj["file"] = resolve_todo_file(file_path, config.file, project_dir)
    ctx.obj["human"] = human
    ctx.obj["compact"] = compact
    log.debug("using todo file %s", ctx.obj["file"])


# =========================================================================
# CRUD commands
# =========================================================================

@cli.command("add")
@click.argument("title")
@click.option("-d", "--description", default="", help="Longer description")
@click.pass_context
def add_cmd(ctx: click.Context, title: str, description: str) -> None:
    """Add a new todo."""
    _mutate(ctx, lambda s: s.add(title, description), "added")


@cli.command("edit")
@click.argument("todo_id", type=int)
@click.option("--title", default=None, help="New title")
@click.option("-d", "--description", default=None, help="New description")
@click.pass_context
def edit_cmd(ctx: click.Context, todo_id: int, title: str | None, description: str | None) -> None:
    """Edit the title and/or description of a todo."""
    if title is None and description is None:
        output({"error": "Provide at least one field to update: --title, --description."})
        return
    _mutate(ctx, lambda s: s.edit(todo_id, title=title, description=description), "updated")


@cli.command("toggle")
@click.argument("todo_id", type=int)
@click.pass_context
def toggle_cmd(ctx: click.Context, todo_id: int) -> None:
    """Flip a todo between pending and completed."""
    _mutate(ctx, lambda s: s.toggle(todo_id), "toggled")


@cli.command("delete")
@click.argument("todo_id", type=int)
@click.option("-y", "--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_cmd(ctx: click.Context, todo_id: int, yes: bool) -> None:
    """Delete a todo after confirmation."""
    store = _load(ctx)
    config: Config = ctx.obj["config"]
    try:
        todo = store.get(todo_id)
    except TodoError as e:
        output({"error": str(e)})
        return

    if config.confirm_delete and not yes:
        click.echo(f"Title: {todo.title}", err=True)
        click.echo(f"Description: {todo.description}", err=True)
        if not click.confirm("Are you sure you want to delete this todo?", default=False, err=True):
            _emit(ctx, {"status": "cancelled", "id": todo_id})
            return

    _mutate(ctx, lambda s: s.delete(todo_id), "deleted")


@cli.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List all todos in insertion order."""
    store = _load(ctx)
    _emit(ctx, {"todos": [t.to_dict() for t in store.list()]})


@cli.command("show")
@click.argument("todo_id", type=int)
@click.pass_context
def show_cmd(ctx: click.Context, todo_id: int) -> None:
    """Show a single todo."""
    store = _load(ctx)
    try:
        todo = store.get(todo_id)
    except TodoError as e:
        output({"error": str(e)})
        return
    _emit(ctx, todo_payload(todo))


# =========================================================================
# Interactive menu
# =========================================================================

_MENU = """
===== TODO APP =====
1. List all todos
2. Add a new todo
3. Edit a todo
4. Toggle todo completion status
5. Delete a todo
0. Exit
===================="""


def _prompt_id(message: str) -> int | None:
    raw = click.prompt(message, default="", show_default=False).strip()
    try:
        return int(raw)
    except ValueError:
        click.echo("Invalid ID format.")
        return None


def _menu_save(store: TodoStore, path: str, message: str) -> None:
    store.save(path)
    click.echo(message)


@cli.command("menu")
@click.pass_context
def menu_cmd(ctx: click.Context) -> None:
    """Interactive numbered menu over the same store operations."""
    path = ctx.obj["file"]
    config: Config = ctx.obj["config"]
    # an unreadable file must not be replaced by the first save
    store = _load(ctx)

    while True:
        click.echo(_MENU)
        choice = click.prompt("Enter your choice", default="", show_default=False).strip()
        try:
            if choice == "1":
                click.echo("\n--- All Todos ---")
                click.echo(format_table([t.to_dict() for t in store.list()]))
            elif choice == "2":
                title = click.prompt("Enter todo title")
                description = click.prompt("Enter todo description", default="", show_default=False)
                store.add(title, description)
                _menu_save(store, path, "Todo added successfully!")
            elif choice == "3":
                click.echo(format_table([t.to_dict() for t in store.list()]))
                todo_id = _prompt_id("Enter the ID of the todo to edit")
                if todo_id is None:
                    continue
                todo = store.get(todo_id)
                click.echo(f"Editing todo: {todo.title}")
                title = click.prompt("Enter new title", default=todo.title)
                description = click.prompt("Enter new description", default=todo.description)
                store.edit(todo_id, title=title, description=description)
                _menu_save(store, path, "Todo updated successfully!")
            elif choice == "4":
                click.echo(format_table([t.to_dict() for t in store.list()]))
                todo_id = _prompt_id("Enter the ID of the todo to toggle completion status")
                if todo_id is None:
                    continue
                store.toggle(todo_id)
                _menu_save(store, path, "Todo status toggled successfully!")
            elif choice == "5":
                click.echo(format_table([t.to_dict() for t in store.list()]))
                todo_id = _prompt_id("Enter the ID of the todo to delete")
                if todo_id is None:
                    continue
                todo = store.get(todo_id)
                click.echo("You are about to delete the following todo:")
                click.echo(f"Title: {todo.title}")
                click.echo(f"Description: {todo.description}")
                if config.confirm_delete and not click.confirm(
                    "Are you sure you want to delete this todo?", default=False
                ):
                    click.echo("Deletion cancelled.")
                    continue
                store.delete(todo_id)
                _menu_save(store, path, "Todo deleted successfully!")
            elif choice == "0":
                click.echo("Exiting. Goodbye!")
                break
            else:
                click.echo("Invalid choice. Please try again.")
        except TodoError as e:
            click.echo(str(e))


if __name__ == "__main__":
    cli()
