"""Journal core: entry storage, keyword search, backups and session state.

Provides file-backed entries, a linear keyword searcher, ZIP backups, and
a tiny persisted session. Front ends (menu, CLI, tests) call these directly.
"""

from .backup import BackupArchiver
from .config import EntryOrder, JournalConfig
from .models import BackupArchive, Entry, HighlightedLine, SearchResult
from .search import KeywordSearcher
from .state import DiarySession, StateStore
from .store import EntryStore, JournalStore

__all__ = [
    "BackupArchive",
    "BackupArchiver",
    "DiarySession",
    "Entry",
    "EntryOrder",
    "EntryStore",
    "HighlightedLine",
    "JournalConfig",
    "JournalStore",
    "KeywordSearcher",
    "SearchResult",
    "StateStore",
]
