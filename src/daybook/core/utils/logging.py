"""
Logging setup for the daybook CLI.

Diagnostics go to stderr so they never mix with entry text printed on
stdout. An optional file sink keeps a rotating history of created entries,
backups and skipped files. Library modules only import ``logger`` from loguru.
"""

import os
import sys

from loguru import logger

from daybook.core.exceptions import ConfigurationError

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def resolve_level(level: str | None, default: str = "WARNING") -> str:
    """Normalise a level name from config or ``--log-level``.

    Raises:
        ConfigurationError: The name is not a loguru level.
    """
    name = (level or default).strip().upper()
    if name not in LEVELS:
        raise ConfigurationError(f"Unknown log level {level!r}, expected one of {', '.join(LEVELS)}")
    return name


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    *,
    rotation: str = "1 MB",
    retention: str = "14 days",
) -> str:
    """
    Replace loguru's sinks with a stderr sink and an optional log file.

    Args:
        level: Minimum level, any case. Defaults to WARNING.
        log_file: Log file path; its directory is created if missing.
        rotation: Size at which the log file rotates.
        retention: How long rotated files are kept.

    Returns:
        The level name in effect.

    Raises:
        ConfigurationError: Unknown level, or the log directory can't be created.
    """
    name = resolve_level(level)
    logger.remove()
    logger.add(sys.stderr, level=name, format=CONSOLE_FORMAT)

    if log_file:
        path = os.path.expanduser(log_file)
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Cannot create log directory for {path}: {e}") from e
        logger.add(path, level=name, format=FILE_FORMAT, rotation=rotation, retention=retention, encoding="utf-8")
    return name
