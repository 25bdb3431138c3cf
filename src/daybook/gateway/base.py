"""Base gateway — request/response types and the front-end contract.

Every front end (console menu, batch CLI, tests) turns user intent into a
Request, hands it to a CommandDispatcher, and renders the Reply it gets back.
No front end talks to the journal core directly.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Command(enum.Enum):
    """Operations a front end can request."""

    WRITE = "write"  # args: body lines
    READ = "read"  # args: [ordinal text] from the full listing
    SEARCH = "search"  # args: [keyword]
    SHOW_MATCH = "show-match"  # args: [ordinal text] from the last search
    LIST = "list"
    BACKUP = "backup"
    EXIT = "exit"


@dataclass
class Request:
    """A single command with its raw text arguments."""

    command: Command
    args: list[str] = field(default_factory=list)

    @property
    def first_arg(self) -> str:
        return self.args[0] if self.args else ""


@dataclass
class Reply:
    """Formatted outcome of a request.

    Attributes:
        text: Human-readable output, ready to print.
        ok: False when the request failed.
        error: Error kind (see ``DaybookError.kind``) when ``ok`` is False.
        lines: Structured lines for renderers that style output, as
            ``(text, is_match)`` pairs; empty for plain replies.
        done: True once the session should end.
    """

    text: str = ""
    ok: bool = True
    error: str | None = None
    lines: list[tuple[str, bool]] = field(default_factory=list)
    done: bool = False

    @classmethod
    def failure(cls, kind: str, message: str, *, done: bool = False) -> Reply:
        return cls(text=message, ok=False, error=kind, done=done)


class Gateway(ABC):
    """Abstract base for interactive front ends.

    Subclasses own the input loop; message handling is delegated to a
    dispatcher so the same core can be driven without a terminal.

    Usage::

        class ConsoleGateway(Gateway):
            def start(self):
                # Show a menu, read choices
                ...

            def handle(self, request):
                return self.dispatcher.handle(request)

        gateway = ConsoleGateway(dispatcher)
        gateway.start()
    """

    @abstractmethod
    def start(self) -> None:
        """Run until the user exits."""

    @abstractmethod
    def handle(self, request: Request) -> Reply:
        """Handle one request and return its reply."""

    def stop(self) -> None:  # noqa: B027
        """Stop the input loop. Optional override."""
