"""daybook write / read / list — entry commands for scripts."""

from __future__ import annotations

import click

from daybook.gateway.base import Command, Request


def _read_body(sentinel: str) -> list[str]:
    """Read body lines from stdin until the sentinel line or end of input."""
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        click.echo(f"Enter your diary entry (type {sentinel} on a new line to finish):")
    lines: list[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line == sentinel:
            break
        lines.append(line)
    return lines


@click.command()
@click.option("--text", "-t", default=None, help="Entry text. Read from stdin when omitted.")
@click.pass_obj
def write(config, text: str | None) -> None:
    """Write a new entry."""
    from daybook.core.cli.common import emit, open_dispatcher

    dispatcher = open_dispatcher(config)
    body = text.splitlines() if text is not None else _read_body(dispatcher.config.end_sentinel)
    emit(dispatcher.handle(Request(Command.WRITE, body)))


@click.command("list")
@click.pass_obj
def list_entries(config) -> None:
    """List all entries, most recent first."""
    from daybook.core.cli.common import emit, open_dispatcher

    emit(open_dispatcher(config).handle(Request(Command.LIST)))


@click.command()
@click.argument("number")
@click.pass_obj
def read(config, number: str) -> None:
    """Print the entry at position NUMBER of the listing."""
    from daybook.core.cli.common import emit, open_dispatcher

    emit(open_dispatcher(config).handle(Request(Command.READ, [number])))
