"""Tests for daybook.journal.state."""

import json

import pytest

from daybook.core.exceptions import FileIOError
from daybook.journal.state import DiarySession, StateStore


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "diary_config.ser"


class TestStateStore:
    def test_fresh_environment_is_empty(self, state_path):
        assert StateStore(state_path).load() == ""

    def test_save_then_load_in_new_instance(self, state_path):
        StateStore(state_path).save("x")
        assert StateStore(state_path).load() == "x"

    def test_unicode_and_quotes_roundtrip(self, state_path):
        value = 'café "quoted" \\ back'
        StateStore(state_path).save(value)
        assert StateStore(state_path).load() == value

    def test_file_is_single_versioned_line(self, state_path):
        StateStore(state_path).save("fox")
        text = state_path.read_text(encoding="utf-8")
        assert text.count("\n") == 1
        assert json.loads(text) == {"version": 1, "last_search_keyword": "fox"}

    @pytest.mark.parametrize(
        "content",
        [
            b"",
            b"   \n",
            b"\xac\xed\x00\x05t\x00\x03fox",  # old binary serialization
            b"not json at all",
            b'["a", "list"]',
            b'{"version": 99, "last_search_keyword": "x"}',
            b'{"version": 1, "last_search_keyword": 42}',
        ],
    )
    def test_corrupt_file_loads_empty(self, state_path, content):
        state_path.write_bytes(content)
        assert StateStore(state_path).load() == ""

    def test_save_failure_raises_file_io_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        with pytest.raises(FileIOError):
            StateStore(blocker / "state.ser").save("x")

    def test_unencodable_value_keeps_previous_state(self, state_path):
        store = StateStore(state_path)
        store.save("fox")
        with pytest.raises(FileIOError):
            store.save("caf\udce9")
        assert store.load() == "fox"
        assert [p.name for p in state_path.parent.iterdir()] == [state_path.name]

    def test_save_leaves_no_temp_files(self, state_path):
        store = StateStore(state_path)
        store.save("one")
        store.save("two")
        assert [p.name for p in state_path.parent.iterdir()] == [state_path.name]


class TestSession:
    def test_load_session(self, state_path):
        StateStore(state_path).save("garden")
        session = StateStore(state_path).load_session()
        assert session.last_search_keyword == "garden"
        assert session.last_results == []

    def test_save_session(self, state_path):
        store = StateStore(state_path)
        store.save_session(DiarySession(last_search_keyword="tomatoes"))
        assert store.load() == "tomatoes"

    def test_sessions_are_isolated(self):
        a = DiarySession()
        b = DiarySession()
        a.remember_search("fox", [])
        assert b.last_search_keyword == ""
