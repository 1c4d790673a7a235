"""Load user settings from YAML — todo file location, delete confirmation, log level."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from todo.defaults import resolve_config_path

log = logging.getLogger(__name__)

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    file: str | None = None
    confirm_delete: bool = True
    log_level: str = "WARNING"
    source: str | None = None


def load_config(path: str | Path | None = None, project_dir: str | Path | None = None) -> Config:
    """Load and validate the config file. Hard fail on any error.

    With no explicit path the usual search order applies; finding nothing
    returns defaults. An explicit path that does not exist is an error.
    """
    if path is None:
        path = resolve_config_path(project_dir)
        if path is None:
            return Config()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path}")

    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    unknown = set(raw) - {"file", "confirm_delete", "log_level"}
    if unknown:
        raise ValueError(f"{path}: unknown keys {sorted(unknown)}")

    cfg = Config(source=str(path))

    if "file" in raw and raw["file"] is not None:
        if not isinstance(raw["file"], str):
            raise ValueError(f"{path}: 'file' must be a string")
        cfg.file = raw["file"]

    if "confirm_delete" in raw:
        if not isinstance(raw["confirm_delete"], bool):
            raise ValueError(f"{path}: 'confirm_delete' must be true or false")
        cfg.confirm_delete = raw["confirm_delete"]

    if "log_level" in raw:
        level = str(raw["log_level"]).upper()
        if level not in _VALID_LEVELS:
            raise ValueError(
                f"{path}: 'log_level' must be one of {', '.join(sorted(_VALID_LEVELS))}"
            )
        cfg.log_level = level

    log.debug("loaded config from %s", path)
    return cfg
