"""Entry storage: a directory of append-only, timestamp-named text files.

Each entry is ``<entries_dir>/diary_YYYY_MM_DD_HH_MM_SS.txt`` holding a
header line, a dash separator, and the verbatim body. The directory is the
only source of truth; nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterator, Sequence
from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from daybook.core.exceptions import (
    AlreadyExistsError,
    EntryNotFoundError,
    FileIOError,
    OutOfRangeError,
    ValidationError,
)
from daybook.core.utils.file_io import write_new_text

from .config import EntryOrder, JournalConfig
from .models import Entry


@runtime_checkable
class JournalStore(Protocol):
    """Read-side contract the searcher and front ends rely on."""

    def list_all(self) -> list[Entry]:
        """Return entries, most recent first."""
        ...

    def read_lines(self, entry: Entry) -> Iterator[str]:
        """Stream every line of an entry file."""
        ...

    def iter_body(self, entry: Entry) -> Iterator[str]:
        """Stream the body lines of an entry."""
        ...

    def read_body(self, entry: Entry) -> list[str]:
        """Return the body lines of an entry (header dropped)."""
        ...


def _normalize_body(body: str | Sequence[str]) -> list[str]:
    if isinstance(body, str):
        return body.splitlines()
    lines: list[str] = []
    for line in body:
        lines.extend(str(line).splitlines() or [""])
    return lines


class EntryStore:
    """File-backed diary entries, one file per entry."""

    def __init__(
        self,
        entries_dir: str | Path,
        config: JournalConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.entries_dir = Path(entries_dir)
        self.config = config or JournalConfig()
        self._clock = clock

    # -- Naming -------------------------------------------------------------

    def filename_for(self, created_at: datetime) -> str:
        cfg = self.config
        return f"{cfg.entry_prefix}{created_at.strftime(cfg.timestamp_format)}{cfg.entry_suffix}"

    def entry_from_path(self, path: Path) -> Entry | None:
        """Parse an entry descriptor from a filename. None if it doesn't conform."""
        cfg = self.config
        name = path.name
        width = cfg.timestamp_width
        if not (name.startswith(cfg.entry_prefix) and name.endswith(cfg.entry_suffix)):
            return None
        if len(name) != len(cfg.entry_prefix) + width + len(cfg.entry_suffix):
            return None

        stamp = name[len(cfg.entry_prefix) : len(cfg.entry_prefix) + width]
        try:
            created_at = datetime.strptime(stamp, cfg.timestamp_format)
        except ValueError:
            return None
        # strptime tolerates unpadded fields; the filename must be canonical.
        if created_at.strftime(cfg.timestamp_format) != stamp:
            return None
        return Entry(created_at=created_at, path=path)

    # -- Create -------------------------------------------------------------

    def create(self, body: str | Sequence[str]) -> Entry:
        """Write a new entry file and return its descriptor.

        Args:
            body: Body lines (a single string is split on newlines).

        Raises:
            ValidationError: The body is empty or whitespace-only.
            AlreadyExistsError: An entry for the same second already exists.
            FileIOError: The file could not be written.
        """
        lines = _normalize_body(body)
        if not any(line.strip() for line in lines):
            raise ValidationError("Empty entry discarded.")

        cfg = self.config
        created_at = self._clock().replace(microsecond=0)
        path = self.entries_dir / self.filename_for(created_at)
        header = [f"{cfg.header_prefix}{created_at.strftime(cfg.display_format)}", cfg.separator]

        try:
            self.entries_dir.mkdir(parents=True, exist_ok=True)
            write_new_text(path, header + lines)
        except FileExistsError as e:
            raise AlreadyExistsError(f"An entry named {path.name} already exists.") from e
        except (OSError, UnicodeError) as e:
            raise FileIOError(f"Cannot write entry {path.name}: {e}") from e

        logger.info(f"Created entry {path.name} ({len(lines)} lines)")
        return Entry(created_at=created_at, path=path)

    # -- Query --------------------------------------------------------------

    def _sort_key(self, entry: Entry) -> float:
        if self.config.order == EntryOrder.MODIFIED:
            try:
                return entry.path.stat().st_mtime
            except OSError:
                return 0.0
        return entry.created_at.timestamp()

    def list_all(self) -> list[Entry]:
        """Return every conforming entry, most recent first.

        A missing directory yields an empty list. Files whose names don't
        match the entry pattern are ignored.
        """
        if not self.entries_dir.is_dir():
            return []

        entries: list[Entry] = []
        try:
            candidates = sorted(self.entries_dir.iterdir())
        except OSError as e:
            raise FileIOError(f"Cannot list {self.entries_dir}: {e}") from e

        for path in candidates:
            entry = self.entry_from_path(path)
            if entry is None or not path.is_file():
                logger.debug(f"Ignoring non-entry file {path.name}")
                continue
            entries.append(entry)

        # list.sort is stable, so ties keep name order even when reversed.
        entries.sort(key=self._sort_key, reverse=True)
        return entries

    def resolve_ordinal(self, ordinal: int, listing: Sequence[Entry] | None = None) -> Entry:
        """Return the entry at a 1-based position.

        Args:
            ordinal: Position as shown to the user.
            listing: The listing the user saw. Defaults to ``list_all()``.

        Raises:
            OutOfRangeError: ``ordinal`` is not within ``1..len(listing)``.
        """
        items = self.list_all() if listing is None else listing
        if not 1 <= ordinal <= len(items):
            if not items:
                raise OutOfRangeError("There are no entries to choose from.")
            raise OutOfRangeError(f"Invalid number {ordinal}: choose between 1 and {len(items)}.")
        return items[ordinal - 1]

    # -- Read ---------------------------------------------------------------

    def read_lines(self, entry: Entry) -> Generator[str, None, None]:
        """Stream an entry file line by line, header included.

        The file is closed when the iterator is exhausted or closed.

        Raises:
            EntryNotFoundError: The file vanished.
            FileIOError: The file exists but could not be read.
        """
        try:
            with open(entry.path, encoding="utf-8") as f:
                for line in f:
                    yield line.rstrip("\n")
        except FileNotFoundError as e:
            raise EntryNotFoundError(f"Entry {entry.filename} no longer exists.") from e
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f"Cannot read entry {entry.filename}: {e}") from e

    def iter_body(self, entry: Entry) -> Iterator[str]:
        """Stream the body lines of an entry, skipping the header and separator."""
        cfg = self.config
        lines = self.read_lines(entry)
        try:
            head: list[str] = []
            for line in lines:
                head.append(line)
                if len(head) == 2:
                    break
            is_header = len(head) == 2 and head[0].startswith(cfg.header_prefix) and head[1] == cfg.separator
            if not is_header:
                yield from head
            yield from lines
        finally:
            lines.close()

    def read_body(self, entry: Entry) -> list[str]:
        """Return the body lines of an entry exactly as they were written."""
        return list(self.iter_body(entry))
