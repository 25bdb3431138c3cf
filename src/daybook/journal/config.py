"""Configuration dataclass for the on-disk journal layout.

A pure data container with the defaults the file formats depend on.
Override fields from YAML config, env vars, or constructor args.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class EntryOrder(StrEnum):
    """How ``EntryStore.list_all`` orders entries (always newest first)."""

    CREATED = "created"  # timestamp encoded in the filename
    MODIFIED = "modified"  # filesystem modification time


@dataclass
class JournalConfig:
    """Naming and layout settings for entries and backups.

    Attributes:
        entry_prefix: Filename prefix of every entry file.
        entry_suffix: Filename extension of every entry file.
        backup_prefix: Filename prefix of backup archives.
        backup_suffix: Filename extension of backup archives.
        timestamp_format: strftime pattern embedded in filenames. Fixed width.
        display_format: strftime pattern shown to the user and in headers.
        header_prefix: Text before the display timestamp on an entry's first line.
        separator: Second line of every entry file.
        end_sentinel: Line that ends entry composition in the console.
        order: Sort key for listings.
    """

    entry_prefix: str = "diary_"
    entry_suffix: str = ".txt"
    backup_prefix: str = "diary_backup_"
    backup_suffix: str = ".zip"
    timestamp_format: str = "%Y_%m_%d_%H_%M_%S"
    display_format: str = "%Y-%m-%d %H:%M:%S"
    header_prefix: str = "Entry written on: "
    separator: str = "-" * 50
    end_sentinel: str = "END"
    order: EntryOrder = EntryOrder.CREATED

    def __post_init__(self):
        self.order = EntryOrder(self.order)

    @property
    def timestamp_width(self) -> int:
        """Length of a rendered filename timestamp (19 for the default pattern)."""
        # Zero-padded directives only, so any date renders to the same width.
        return len(datetime(2000, 1, 1).strftime(self.timestamp_format))
