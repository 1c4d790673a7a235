"""Filesystem helpers for the todo file — whole-file reads and replace-on-write."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write_file(path: str, content: str) -> str:
    """Replace the todo file with content in one rename.

    The text goes to a sibling temp file first, so readers see either the
    old list or the new one. Missing parent directories are created.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
    ) as tmp:
        tmp_path = Path(tmp.name)
    try:
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return path


def read_text_file(path: str) -> str | None:
    """Return the file's text, or None when it does not exist.

    Raises UnicodeDecodeError when the bytes are not UTF-8.
    """
    target = Path(path)
    if not target.exists():
        return None
    return target.read_text(encoding="utf-8")
