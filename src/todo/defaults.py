"""Shared constants — env var names, default paths, resolvers.

Single source of truth for where the todo file and config file live.
"""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_TODO_FILE = "TODO_FILE"
ENV_CONFIG = "TODO_CONFIG"

# ---------------------------------------------------------------------------
# Default paths
# ---------------------------------------------------------------------------

DEFAULT_FILE_NAME = "todos.json"
PROJECT_CONFIG_NAME = ".todo.yaml"
USER_CONFIG_PATH = "~/.config/todo/config.yaml"


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def resolve_path(raw_value: str, base: Path) -> Path:
    """Resolve a possibly-relative path against a base directory."""
    path = Path(raw_value).expanduser()
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def resolve_project_dir(project_dir: str | Path | None = None) -> Path:
    return Path(project_dir) if project_dir else Path.cwd()


def resolve_config_path(project_dir: str | Path | None = None) -> Path | None:
    """Resolve config: ENV_CONFIG > <project>/.todo.yaml > user config.

    Returns None when no candidate exists.
    """
    explicit = os.getenv(ENV_CONFIG)
    if explicit:
        return Path(explicit).expanduser()
    local = resolve_project_dir(project_dir) / PROJECT_CONFIG_NAME
    if local.exists():
        return local
    user = Path(USER_CONFIG_PATH).expanduser()
    if user.exists():
        return user
    return None


def resolve_todo_file(
    explicit: str | None = None,
    configured: str | None = None,
    project_dir: str | Path | None = None,
) -> str:
    """Resolve todo file: --file > ENV_TODO_FILE > config 'file' > <project>/todos.json."""
    base = resolve_project_dir(project_dir)
    for candidate in (explicit, os.getenv(ENV_TODO_FILE), configured):
        if candidate:
            return str(resolve_path(candidate, base))
    return str(base / DEFAULT_FILE_NAME)
