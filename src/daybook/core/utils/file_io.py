"""
File I/O utilities: atomic writes and create-new text files.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


def _discard(tmp: str) -> None:
    try:
        os.unlink(tmp)
    except OSError:
        pass


def atomic_write(path: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Atomic write: temp file + rename so a kill can't corrupt."""
    parent = os.path.dirname(os.fspath(path)) or "."
    os.makedirs(parent, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
        os.replace(tmp, path)  # atomic on POSIX
    except BaseException:
        _discard(tmp)
        raise


@contextmanager
def atomic_target(path: str | Path, suffix: str = ".tmp") -> Iterator[Path]:
    """Yield a temp path next to ``path``; rename it into place on clean exit.

    If the body raises, the temp file is removed and ``path`` is untouched.
    """
    parent = os.path.dirname(os.fspath(path)) or "."
    os.makedirs(parent, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=parent, suffix=suffix)
    os.close(fd)
    try:
        yield Path(tmp)
        os.replace(tmp, path)
    except BaseException:
        _discard(tmp)
        raise


def write_new_text(path: str | Path, lines: list[str], encoding: str = "utf-8") -> None:
    """Write ``lines`` to a file that must not exist yet.

    Raises FileExistsError if ``path`` is already present. A failure after the
    file was created removes the partial file before re-raising.
    """
    with open(path, "x", encoding=encoding, newline="\n") as f:
        try:
            f.writelines(line + "\n" for line in lines)
        except BaseException:
            f.close()
            _discard(os.fspath(path))
            raise
