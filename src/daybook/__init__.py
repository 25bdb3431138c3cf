"""daybook: a personal journal kept as plain text files."""

__version__ = "0.1.0"
