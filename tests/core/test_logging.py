"""Tests for daybook.core.utils.logging."""

import os
import sys

import pytest
from loguru import logger

from daybook.core.exceptions import ConfigurationError
from daybook.core.utils.logging import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestResolveLevel:
    def test_case_insensitive(self):
        assert resolve_level(" info ") == "INFO"

    def test_default(self):
        assert resolve_level(None) == "WARNING"
        assert resolve_level("", default="ERROR") == "ERROR"

    def test_unknown(self):
        with pytest.raises(ConfigurationError):
            resolve_level("loud")


class TestSetupLogging:
    def test_file_sink_respects_level(self, tmp_dir):
        log_file = os.path.join(tmp_dir, "logs", "daybook.log")
        assert setup_logging(level="info", log_file=log_file) == "INFO"
        logger.debug("hidden detail")
        logger.info("entry saved")
        logger.remove()

        with open(log_file, encoding="utf-8") as f:
            content = f.read()
        assert "entry saved" in content
        assert "hidden detail" not in content

    def test_unknown_level_keeps_existing_sinks(self):
        messages: list[str] = []
        logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
        with pytest.raises(ConfigurationError):
            setup_logging(level="chatty")
        logger.warning("still captured")
        assert messages == ["still captured"]

    def test_log_dir_blocked(self, tmp_dir):
        blocker = os.path.join(tmp_dir, "blocker")
        with open(blocker, "w") as f:
            f.write("not a directory")
        with pytest.raises(ConfigurationError):
            setup_logging(log_file=os.path.join(blocker, "daybook.log"))
