"""Tests for daybook.journal.config."""

import pytest

from daybook.journal.config import EntryOrder, JournalConfig


class TestJournalConfig:
    def test_defaults(self):
        config = JournalConfig()
        assert config.entry_prefix == "diary_"
        assert config.entry_suffix == ".txt"
        assert config.backup_prefix == "diary_backup_"
        assert config.separator == "-" * 50
        assert config.end_sentinel == "END"
        assert config.order == EntryOrder.CREATED

    def test_timestamp_width(self):
        assert JournalConfig().timestamp_width == 19

    def test_order_from_string(self):
        assert JournalConfig(order="modified").order is EntryOrder.MODIFIED

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            JournalConfig(order="alphabetical")
