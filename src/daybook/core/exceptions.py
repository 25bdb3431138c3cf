"""
Daybook exception hierarchy.

All daybook exceptions inherit from DaybookError, so a front end can catch
every core-level failure in one place while still telling the kinds apart.
"""


class DaybookError(Exception):
    """Base exception class for all daybook errors."""

    kind = "error"


class ConfigurationError(DaybookError):
    """Raised for configuration errors (missing keys, invalid values)."""

    kind = "configuration"


class ValidationError(DaybookError):
    """Raised for rejected input such as an empty entry body or blank keyword."""

    kind = "validation"


class EntryNotFoundError(DaybookError):
    """Raised when a referenced entry file has vanished."""

    kind = "not_found"


class OutOfRangeError(DaybookError):
    """Raised when an ordinal selection falls outside the listing."""

    kind = "out_of_range"


class AlreadyExistsError(DaybookError):
    """Raised when a file for the same timestamp already exists."""

    kind = "already_exists"


class NoEntriesError(DaybookError):
    """Raised when a backup is requested with nothing to back up."""

    kind = "no_entries"


class FileIOError(DaybookError):
    """Raised for file I/O errors."""

    kind = "io"


class MalformedInputError(DaybookError):
    """Raised when an ordinal is not a number."""

    kind = "malformed_input"
