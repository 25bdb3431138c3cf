"""Backup archives: one ZIP snapshot of every current entry.

Archives land in ``<backups_dir>/diary_backup_YYYY_MM_DD_HH_MM_SS.zip``.
Members are stored under their bare filenames, in the order given. The
archive is written to a temp file and renamed into place, so a failed
backup leaves nothing behind. Member times before 1980, which ZIP cannot
represent, are stored as 1980-01-01.
"""

from __future__ import annotations

import zipfile
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from loguru import logger

from daybook.core.exceptions import AlreadyExistsError, FileIOError, NoEntriesError
from daybook.core.utils.file_io import atomic_target
from daybook.core.utils.text import pluralize

from .config import JournalConfig
from .models import BackupArchive, Entry


class BackupArchiver:
    """Bundles entry files into timestamped ZIP archives."""

    def __init__(
        self,
        backups_dir: str | Path,
        config: JournalConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
        compression: int = zipfile.ZIP_DEFLATED,
    ) -> None:
        self.backups_dir = Path(backups_dir)
        self.config = config or JournalConfig()
        self._clock = clock
        self.compression = compression

    def archive_name(self, created_at: datetime) -> str:
        cfg = self.config
        return f"{cfg.backup_prefix}{created_at.strftime(cfg.timestamp_format)}{cfg.backup_suffix}"

    def create_backup(self, entries: Sequence[Entry]) -> BackupArchive:
        """Write every entry into a new archive.

        Args:
            entries: Entries to include, in archive order.

        Returns:
            Descriptor of the committed archive.

        Raises:
            NoEntriesError: ``entries`` is empty; no archive is created.
            AlreadyExistsError: An archive for the same second already exists.
            FileIOError: Any entry could not be read, or the archive could not be
                written. The whole backup is abandoned.
        """
        if not entries:
            raise NoEntriesError("No entries to back up.")

        created_at = self._clock().replace(microsecond=0)
        target = self.backups_dir / self.archive_name(created_at)
        if target.exists():
            raise AlreadyExistsError(f"A backup named {target.name} already exists.")

        members: list[str] = []
        try:
            with atomic_target(target, suffix=".zip.tmp") as tmp:
                with zipfile.ZipFile(tmp, "w", compression=self.compression, strict_timestamps=False) as zf:
                    for entry in entries:
                        zf.write(entry.path, arcname=entry.filename)
                        members.append(entry.filename)
        except (OSError, ValueError) as e:
            raise FileIOError(f"Backup failed, no archive was written: {e}") from e

        archive = BackupArchive(path=target, created_at=created_at, members=tuple(members))
        logger.info(f"Backed up {pluralize(archive.member_count, 'entry', 'entries')} to {target}")
        return archive
