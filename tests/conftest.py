"""Shared test fixtures for daybook."""

import os
import tempfile
from datetime import datetime, timedelta

import pytest
from loguru import logger


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "entries_dir": os.path.join(tmp_dir, "my-entries"),
            "backups_dir": os.path.join(tmp_dir, "my-backups"),
        },
        "logging": {"level": "INFO"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


class StepClock:
    """Deterministic clock: each call returns one more step past ``start``."""

    def __init__(self, start=datetime(2024, 3, 1, 9, 30, 0), step=timedelta(seconds=1)):
        self.current = start - step
        self.step = step

    def __call__(self):
        self.current += self.step
        return self.current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
