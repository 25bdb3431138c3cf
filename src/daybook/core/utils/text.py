"""Text helpers: ordinal parsing, keyword matching, pluralisation."""

from daybook.core.exceptions import MalformedInputError


def parse_ordinal(text: str) -> int:
    """Parse a user-typed 1-based position. Range is checked by the caller."""
    raw = (text or "").strip()
    try:
        return int(raw)
    except ValueError:
        raise MalformedInputError(f"Please enter a valid number, got {raw!r}.") from None


def fold(text: str) -> str:
    """Case-fold text for case-insensitive comparison."""
    return text.casefold()


def contains_keyword(line: str, folded_keyword: str) -> bool:
    """Whether ``line`` contains an already-folded keyword."""
    return folded_keyword in line.casefold()


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"1 entry"`` / ``"3 entries"`` style phrases."""
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"
