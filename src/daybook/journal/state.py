"""Session state and its persistence across runs.

Only one value survives a restart: the last search keyword. It is loaded once
at startup, changed in memory by searches, and saved once at graceful exit.

The file holds a single JSON line::

    {"version": 1, "last_search_keyword": "fox"}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from daybook.core.exceptions import FileIOError
from daybook.core.utils.file_io import atomic_write

from .models import Entry

STATE_VERSION = 1


@dataclass
class DiarySession:
    """Mutable per-process state shared by the front end and the searcher.

    Attributes:
        last_search_keyword: Most recent non-blank keyword searched for.
        last_results: Entries matched by that search, in listing order.
            Used to resolve ordinals typed after a search; never persisted.
    """

    last_search_keyword: str = ""
    last_results: list[Entry] = field(default_factory=list)

    def remember_search(self, keyword: str, results: list[Entry]) -> None:
        self.last_search_keyword = keyword
        self.last_results = list(results)


class StateStore:
    """Persists a single string in a small versioned JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> str:
        """Return the saved keyword, or ``""`` if absent, empty, or corrupt."""
        if not self.path.exists():
            return ""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not load previous state from {self.path}: {e}")
            return ""
        if not raw.strip():
            return ""

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupt state file {self.path}: {e}")
            return ""

        if not isinstance(data, dict) or data.get("version") != STATE_VERSION:
            logger.warning(f"Ignoring state file {self.path} with unknown layout")
            return ""
        value = data.get("last_search_keyword", "")
        if not isinstance(value, str):
            logger.warning(f"Ignoring non-text keyword in {self.path}")
            return ""
        return value

    def save(self, value: str) -> None:
        """Persist ``value``, replacing the previous file atomically.

        Raises:
            FileIOError: The state file could not be written.
        """
        payload = json.dumps({"version": STATE_VERSION, "last_search_keyword": value}, ensure_ascii=False)
        try:
            atomic_write(self.path, payload + "\n")
        except (OSError, UnicodeError) as e:
            raise FileIOError(f"Could not save application state: {e}") from e
        logger.debug(f"Saved state to {self.path}")

    def load_session(self) -> DiarySession:
        return DiarySession(last_search_keyword=self.load())

    def save_session(self, session: DiarySession) -> None:
        self.save(session.last_search_keyword)
