"""Tests for daybook.journal.backup."""

import os
import zipfile
from datetime import datetime

import pytest

from daybook.core.exceptions import AlreadyExistsError, FileIOError, NoEntriesError
from daybook.journal.backup import BackupArchiver
from daybook.journal.store import EntryStore


@pytest.fixture
def store(tmp_path, clock):
    return EntryStore(tmp_path / "entries", clock=clock)


@pytest.fixture
def backups_dir(tmp_path):
    return tmp_path / "backups"


@pytest.fixture
def archiver(backups_dir):
    return BackupArchiver(backups_dir, clock=lambda: datetime(2024, 6, 1, 8, 0, 0, 123))


class TestCreateBackup:
    def test_empty_store_creates_nothing(self, archiver, store, backups_dir):
        with pytest.raises(NoEntriesError):
            archiver.create_backup(store.list_all())
        assert not backups_dir.exists() or list(backups_dir.iterdir()) == []

    def test_archive_contains_every_entry(self, archiver, store):
        for i in range(3):
            store.create([f"entry number {i}", "second line"])
        entries = store.list_all()

        archive = archiver.create_backup(entries)

        assert archive.path.name == "diary_backup_2024_06_01_08_00_00.zip"
        assert archive.created_at == datetime(2024, 6, 1, 8, 0, 0)
        assert archive.member_count == 3
        with zipfile.ZipFile(archive.path) as zf:
            assert zf.namelist() == [e.filename for e in entries]
            for entry in entries:
                assert zf.read(entry.filename) == entry.path.read_bytes()

    def test_members_use_bare_names(self, archiver, store):
        store.create(["only"])
        archive = archiver.create_backup(store.list_all())
        with zipfile.ZipFile(archive.path) as zf:
            assert all("/" not in name for name in zf.namelist())

    def test_archive_is_compressed(self, archiver, store):
        store.create(["repeated text " * 200])
        archive = archiver.create_backup(store.list_all())
        with zipfile.ZipFile(archive.path) as zf:
            (info,) = zf.infolist()
            assert info.compress_type == zipfile.ZIP_DEFLATED
            assert info.compress_size < info.file_size

    def test_missing_member_aborts_without_leftovers(self, archiver, store, backups_dir):
        store.create(["kept"])
        store.create(["vanishes"])
        entries = store.list_all()
        entries[1].path.unlink()

        with pytest.raises(FileIOError):
            archiver.create_backup(entries)
        assert list(backups_dir.iterdir()) == []

    def test_existing_archive_not_overwritten(self, archiver, store, backups_dir):
        store.create(["one"])
        backups_dir.mkdir()
        existing = backups_dir / "diary_backup_2024_06_01_08_00_00.zip"
        existing.write_bytes(b"previous")

        with pytest.raises(AlreadyExistsError):
            archiver.create_backup(store.list_all())
        assert existing.read_bytes() == b"previous"

    def test_pre_1980_mtime_is_clamped(self, archiver, store):
        store.create(["restored from an old tarball"])
        (entry,) = store.list_all()
        os.utime(entry.path, (0, 0))

        archive = archiver.create_backup([entry])

        with zipfile.ZipFile(archive.path) as zf:
            (info,) = zf.infolist()
            assert info.date_time == (1980, 1, 1, 0, 0, 0)
            assert zf.read(entry.filename) == entry.path.read_bytes()
