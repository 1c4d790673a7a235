"""Tests for config loading and todo file resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from todo.config import Config, load_config
from todo.defaults import ENV_CONFIG, ENV_TODO_FILE, resolve_config_path, resolve_todo_file


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """No ambient env vars or user config leak into these tests."""
    monkeypatch.delenv(ENV_TODO_FILE, raising=False)
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path):
        cfg = load_config(project_dir=tmp_path)
        assert cfg == Config()

    def test_project_file(self, tmp_path):
        (tmp_path / ".todo.yaml").write_text("file: work.json\nconfirm_delete: false\nlog_level: debug\n")
        cfg = load_config(project_dir=tmp_path)
        assert cfg.file == "work.json"
        assert cfg.confirm_delete is False
        assert cfg.log_level == "DEBUG"
        assert cfg.source == str(tmp_path / ".todo.yaml")

    def test_empty_file_gives_defaults(self, tmp_path):
        (tmp_path / ".todo.yaml").write_text("")
        cfg = load_config(project_dir=tmp_path)
        assert cfg.confirm_delete is True
        assert cfg.file is None

    def test_env_var_wins(self, tmp_path, monkeypatch):
        (tmp_path / ".todo.yaml").write_text("file: local.json\n")
        other = tmp_path / "other.yaml"
        other.write_text("file: env.json\n")
        monkeypatch.setenv(ENV_CONFIG, str(other))
        assert load_config(project_dir=tmp_path).file == "env.json"

    def test_user_config_fallback(self, tmp_path):
        user_cfg = tmp_path / "home" / ".config" / "todo" / "config.yaml"
        user_cfg.parent.mkdir(parents=True)
        user_cfg.write_text("confirm_delete: false\n")
        assert load_config(project_dir=tmp_path).confirm_delete is False

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("colour: red\n")
        with pytest.raises(ValueError, match="unknown keys"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_bad_confirm_type(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("confirm_delete: sometimes\n")
        with pytest.raises(ValueError, match="confirm_delete"):
            load_config(path)

    def test_bad_log_level(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("log_level: loud\n")
        with pytest.raises(ValueError, match="log_level"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("file: [unclosed\n")
        with pytest.raises(ValueError, match="invalid YAML"):
            load_config(path)


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


class TestResolveTodoFile:
    def test_default_in_project_dir(self, tmp_path):
        assert resolve_todo_file(project_dir=tmp_path) == str(tmp_path / "todos.json")

    def test_default_in_cwd(self, tmp_path):
        assert resolve_todo_file() == str(Path.cwd() / "todos.json")

    def test_configured_relative_to_project(self, tmp_path):
        result = resolve_todo_file(configured="lists/home.json", project_dir=tmp_path)
        assert result == str((tmp_path / "lists" / "home.json").resolve())

    def test_env_beats_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_TODO_FILE, str(tmp_path / "env.json"))
        assert resolve_todo_file(configured="cfg.json", project_dir=tmp_path) == str(tmp_path / "env.json")

    def test_explicit_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_TODO_FILE, str(tmp_path / "env.json"))
        result = resolve_todo_file(explicit=str(tmp_path / "cli.json"), project_dir=tmp_path)
        assert result == str(tmp_path / "cli.json")


def test_resolve_config_path_none(tmp_path):
    assert resolve_config_path(tmp_path) is None
