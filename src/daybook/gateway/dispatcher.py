"""Command dispatcher — routes Requests to the journal core and formats Replies.

Core errors never escape ``handle``: each is turned into a failed Reply so
the calling front end can report it and carry on.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from daybook.core.exceptions import DaybookError, FileIOError, ValidationError
from daybook.core.utils.text import parse_ordinal, pluralize
from daybook.journal import (
    BackupArchiver,
    DiarySession,
    Entry,
    EntryStore,
    JournalConfig,
    KeywordSearcher,
    StateStore,
)

from .base import Command, Reply, Request

MATCH_MARKER = ">>> "
PLAIN_MARKER = "    "


class CommandDispatcher:
    """Request/response facade over the journal core for one session."""

    def __init__(
        self,
        store: EntryStore,
        archiver: BackupArchiver,
        state_store: StateStore,
        session: DiarySession | None = None,
        config: JournalConfig | None = None,
    ):
        self.store = store
        self.searcher = KeywordSearcher(store)
        self.archiver = archiver
        self.state_store = state_store
        self.session = session if session is not None else state_store.load_session()
        self.config = config or store.config
        self._handlers: dict[Command, Callable[[Request], Reply]] = {
            Command.WRITE: self._write,
            Command.READ: self._read,
            Command.SEARCH: self._search,
            Command.SHOW_MATCH: self._show_match,
            Command.LIST: self._list,
            Command.BACKUP: self._backup,
            Command.EXIT: self._exit,
        }

    def handle(self, request: Request) -> Reply:
        """Run one request. Never raises for core-level errors."""
        handler = self._handlers[request.command]
        try:
            return handler(request)
        except DaybookError as e:
            logger.debug(f"{request.command.value} failed: {e}")
            return Reply.failure(e.kind, str(e))

    # -- Formatting ---------------------------------------------------------

    def _stamp(self, entry: Entry) -> str:
        return entry.created_at.strftime(self.config.display_format)

    def format_listing(self, entries: list[Entry]) -> str:
        rows = ["=== All Diary Entries ==="]
        for i, entry in enumerate(entries, 1):
            rows.append(f"{i:2d}. {self._stamp(entry)}  →  {entry.filename}")
        return "\n".join(rows)

    # -- Handlers -----------------------------------------------------------

    def _write(self, request: Request) -> Reply:
        entry = self.store.create(request.args)
        return Reply(text=f"Entry saved as: {entry.filename}")

    def _list(self, request: Request) -> Reply:
        entries = self.store.list_all()
        if not entries:
            return Reply(text="No diary entries found.")
        rows = self.format_listing(entries)
        return Reply(text=rows, lines=[(row, False) for row in rows.splitlines()[1:]])

    def _read(self, request: Request) -> Reply:
        ordinal = parse_ordinal(request.first_arg)
        entry = self.store.resolve_ordinal(ordinal)
        body = list(self.store.read_lines(entry))
        text = "\n".join([f"--- Reading: {entry.filename} ---", *body, "", "--- End of Entry ---"])
        return Reply(text=text, lines=[(line, False) for line in body])

    def _search(self, request: Request) -> Reply:
        keyword = request.first_arg.strip()
        results = self.searcher.search(keyword, self.session)
        if not results:
            return Reply(text=f"No entries found containing: {keyword}")

        found = pluralize(len(results), "entry", "entries")
        rows = [f"Found {found} containing '{keyword}':"]
        for i, result in enumerate(results, 1):
            rows.append(f"{i:2d}. {self._stamp(result.entry)}")
        return Reply(text="\n".join(rows), lines=[(row, False) for row in rows[1:]])

    def _show_match(self, request: Request) -> Reply:
        keyword = self.session.last_search_keyword
        if not keyword:
            raise ValidationError("Search for a keyword first.")
        ordinal = parse_ordinal(request.first_arg)
        entry = self.store.resolve_ordinal(ordinal, self.session.last_results)

        highlighted = [(line.text, line.is_match) for line in self.searcher.highlight(entry, keyword)]
        rows = [f"--- Match: {entry.filename} ---"]
        rows.extend((MATCH_MARKER if is_match else PLAIN_MARKER) + text for text, is_match in highlighted)
        rows.extend(["", "--- End ---"])
        return Reply(text="\n".join(rows), lines=highlighted)

    def _backup(self, request: Request) -> Reply:
        archive = self.archiver.create_backup(self.store.list_all())
        return Reply(text=f"Backup created successfully: {archive.path.resolve()}")

    def save_state(self) -> None:
        """Persist the session. Raises FileIOError on failure."""
        self.state_store.save_session(self.session)

    def _exit(self, request: Request) -> Reply:
        farewell = "Goodbye! Your diary is safe."
        try:
            self.save_state()
        except FileIOError as e:
            logger.warning(str(e))
            return Reply.failure(e.kind, f"{e}\n{farewell}", done=True)
        return Reply(text=farewell, done=True)
