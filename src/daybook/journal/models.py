"""Core data models for the journal.

Plain descriptors: an Entry names a file on disk and never caches its body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """A single diary record stored as one file.

    Attributes:
        created_at: Creation time at second precision, recovered from the filename.
        path: Location of the entry file.
    """

    created_at: datetime
    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    def __repr__(self) -> str:
        return f"Entry(filename='{self.filename}', created_at='{self.created_at.isoformat()}')"


@dataclass(frozen=True)
class SearchResult:
    """An entry that matched a keyword search.

    Attributes:
        entry: The matched entry.
        match_count: Number of body lines containing the keyword.
    """

    entry: Entry
    match_count: int

    @property
    def matched(self) -> bool:
        return self.match_count > 0

    def __repr__(self) -> str:
        return f"SearchResult(filename='{self.entry.filename}', match_count={self.match_count})"


@dataclass(frozen=True)
class HighlightedLine:
    """One body line, flagged when it contains the keyword."""

    text: str
    is_match: bool


@dataclass(frozen=True)
class BackupArchive:
    """A ZIP snapshot of the entries that existed at backup time."""

    path: Path
    created_at: datetime
    members: tuple[str, ...] = field(default_factory=tuple)

    @property
    def member_count(self) -> int:
        return len(self.members)
