"""Keyword search over journal entries.

A linear, case-insensitive substring scan of every entry body. There is no
index to build or keep in sync; each search re-reads the directory.
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from daybook.core.exceptions import DaybookError, ValidationError
from daybook.core.utils.text import contains_keyword, fold

from .models import Entry, HighlightedLine, SearchResult
from .state import DiarySession
from .store import JournalStore


def _require_keyword(keyword: str) -> str:
    if not keyword or not keyword.strip():
        raise ValidationError("Search cancelled: the keyword is empty.")
    return fold(keyword)


class KeywordSearcher:
    """Case-insensitive keyword search over a JournalStore.

    Example::

        searcher = KeywordSearcher(store)
        results = searcher.search("fox", session)
        for line in searcher.highlight(results[0].entry, "fox"):
            print(">>>" if line.is_match else "   ", line.text)
    """

    def __init__(self, store: JournalStore):
        self.store = store

    def _count_matches(self, entry: Entry, folded: str) -> int:
        return sum(1 for line in self.store.iter_body(entry) if contains_keyword(line, folded))

    def search(self, keyword: str, session: DiarySession | None = None) -> list[SearchResult]:
        """Find entries whose body contains ``keyword``.

        Args:
            keyword: Non-blank text, matched case-insensitively.
            session: Updated with the keyword and matches on success,
                even when nothing matches.

        Returns:
            Matching entries in ``list_all()`` order (most recent first).

        Raises:
            ValidationError: ``keyword`` is empty or whitespace-only.
        """
        folded = _require_keyword(keyword)

        results: list[SearchResult] = []
        for entry in self.store.list_all():
            try:
                count = self._count_matches(entry, folded)
            except DaybookError as e:
                logger.warning(f"Skipping {entry.filename} during search: {e}")
                continue
            if count:
                results.append(SearchResult(entry=entry, match_count=count))

        if session is not None:
            session.remember_search(keyword, [r.entry for r in results])
        logger.debug(f"Search for {keyword!r} matched {len(results)} entries")
        return results

    def highlight(self, entry: Entry, keyword: str) -> Iterator[HighlightedLine]:
        """Lazily yield the body lines of ``entry``, flagging those with ``keyword``."""
        folded = _require_keyword(keyword)
        for line in self.store.iter_body(entry):
            yield HighlightedLine(text=line, is_match=contains_keyword(line, folded))
