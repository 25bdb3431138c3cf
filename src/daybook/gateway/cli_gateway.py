"""CLI gateway — numbered-menu diary shell with rich formatting."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from daybook.gateway.base import Command, Gateway, Reply, Request
from daybook.gateway.dispatcher import MATCH_MARKER, CommandDispatcher

MENU = (
    ("1", "Write new entry"),
    ("2", "Read previous entries"),
    ("3", "Search entries"),
    ("4", "List all entries"),
    ("5", "Create backup (ZIP)"),
    ("6", "Exit"),
)


class ConsoleGateway(Gateway):
    """Terminal menu loop in front of a CommandDispatcher.

    Shows the menu, collects input, and renders replies. Input and output
    are injectable so the loop can be driven from tests.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        *,
        console: Console | None = None,
        input_fn: Callable[[str], str] | None = None,
    ):
        self.dispatcher = dispatcher
        self.console = console or Console(highlight=False)
        self._input = input_fn or (lambda prompt: self.console.input(escape(prompt)))
        self._running = False
        self._actions: dict[str, Callable[[], None]] = {
            "1": self._write_entry,
            "2": self._read_entry,
            "3": self._search_entries,
            "4": self._list_entries,
            "5": self._create_backup,
            "6": self._exit,
        }

    def start(self) -> None:
        """Run the menu loop until the user exits (or input ends)."""
        self._running = True
        while self._running:
            self._show_menu()
            try:
                choice = self._input("Choose an option (1-6): ").strip()
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                choice = "6"

            action = self._actions.get(choice)
            if action is None:
                self._say("Invalid option. Please try again.")
                continue
            action()

    def handle(self, request: Request) -> Reply:
        return self.dispatcher.handle(request)

    def stop(self) -> None:
        self._running = False

    # -- I/O helpers --------------------------------------------------------

    def _say(self, text: str = "", style: str | None = None) -> None:
        self.console.print(text, style=style, markup=False, soft_wrap=True)

    def _ask(self, prompt: str) -> str:
        """Prompt for one line; end of input counts as an empty answer."""
        try:
            return self._input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return ""

    def _render(self, reply: Reply) -> None:
        if not reply.ok:
            self._say(reply.text, style="red")
            return
        for row in reply.text.splitlines():
            self._say(row, style="bold yellow" if row.startswith(MATCH_MARKER) else None)

    def _show_menu(self) -> None:
        self._say()
        self._say("=== Personal Diary Manager ===", style="bold")
        for key, label in MENU:
            self._say(f"{key}. {label}")

    # -- Menu actions -------------------------------------------------------

    def _compose(self) -> list[str]:
        sentinel = self.dispatcher.config.end_sentinel
        lines: list[str] = []
        while True:
            try:
                line = self._input("")
            except (EOFError, KeyboardInterrupt):
                break
            if line == sentinel:
                break
            lines.append(line)
        return lines

    def _write_entry(self) -> None:
        sentinel = self.dispatcher.config.end_sentinel
        self._say()
        self._say("--- Write New Diary Entry ---")
        self._say(f"Enter your diary entry (type {sentinel} on a new line to finish):")
        self._render(self.handle(Request(Command.WRITE, self._compose())))

    def _read_entry(self) -> None:
        listing = self.handle(Request(Command.LIST))
        if not listing.ok:
            self._render(listing)
            return
        if not listing.lines:
            self._say("No entries to read.")
            return

        self._say()
        self._render(listing)
        self._say()
        choice = self._ask("Enter the number of the entry to read: ")
        self._say()
        self._render(self.handle(Request(Command.READ, [choice])))

    def _search_entries(self) -> None:
        last = self.dispatcher.session.last_search_keyword
        hint = f" (last: {last})" if last else ""
        keyword = self._ask(f"Enter keyword to search for{hint}: ")
        if not keyword:
            self._say("Search cancelled.")
            return

        found = self.handle(Request(Command.SEARCH, [keyword]))
        self._render(found)
        if not found.ok or not found.lines:
            return

        choice = self._ask("\nEnter number to read one (or press Enter to skip): ")
        if not choice:
            return
        self._say()
        self._render(self.handle(Request(Command.SHOW_MATCH, [choice])))

    def _list_entries(self) -> None:
        self._say()
        self._render(self.handle(Request(Command.LIST)))

    def _create_backup(self) -> None:
        self._render(self.handle(Request(Command.BACKUP)))

    def _exit(self) -> None:
        reply = self.handle(Request(Command.EXIT))
        self._render(reply)
        if reply.done:
            self.stop()
