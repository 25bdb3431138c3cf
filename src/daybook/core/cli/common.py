"""Shared setup logic for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from loguru import logger

from daybook.core.exceptions import ConfigurationError

CONFIG_PATH = Path.home() / ".config" / "daybook" / "config.yaml"


def load_config(config_file: str | None = None, data_dir: str | None = None):
    """Load config from ``config_file`` or ~/.config/daybook/config.yaml if present."""
    from daybook.core.config import Config

    if config_file is None and CONFIG_PATH.exists():
        config_file = str(CONFIG_PATH)
    if config_file is not None and not Path(config_file).expanduser().exists():
        raise ConfigurationError(f"Config file not found: {config_file}")
    return Config(config_file=config_file, data_dir=data_dir)


def configure_logging(config, level: str | None = None) -> None:
    """Route loguru output according to config (CLI flag wins)."""
    from daybook.core.utils.logging import setup_logging

    name = setup_logging(
        level=level or config.get("logging.level"),
        log_file=config.get("logging.file") or None,
    )
    logger.debug(f"Logging at {name}")


def ensure_directories(config) -> None:
    """Create entries/ and backups/. A failure is reported, not fatal."""
    try:
        config.ensure_directories()
    except OSError as e:
        logger.error(f"Failed to create required directories: {e}")


def create_dispatcher(config):
    """Wire the journal core for one session from config."""
    from daybook.gateway.dispatcher import CommandDispatcher
    from daybook.journal import BackupArchiver, EntryStore, JournalConfig, StateStore

    try:
        journal_config = JournalConfig(order=config.get("journal.order", "created"))
    except ValueError as e:
        raise ConfigurationError(f"Invalid journal.order: {config.get('journal.order')!r}") from e

    store = EntryStore(config.get_path("entries_dir"), journal_config)
    archiver = BackupArchiver(config.get_path("backups_dir"), journal_config)
    state_store = StateStore(config.get_path("state_file"))
    return CommandDispatcher(store, archiver, state_store)


def emit(reply) -> None:
    """Print a reply; a failed reply ends the command with exit code 1."""
    if reply.ok:
        click.echo(reply.text)
        return
    click.echo(reply.text, err=True)
    sys.exit(1)


def open_dispatcher(config):
    """create_dispatcher for command bodies: config errors become click errors."""
    try:
        return create_dispatcher(config)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
