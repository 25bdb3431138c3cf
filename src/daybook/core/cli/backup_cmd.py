"""daybook backup — archive every entry into a ZIP file."""

from __future__ import annotations

import click


@click.command()
@click.pass_obj
def backup(config) -> None:
    """Create a ZIP backup of all entries under backups/."""
    from daybook.core.cli.common import emit, open_dispatcher
    from daybook.gateway.base import Command, Request

    emit(open_dispatcher(config).handle(Request(Command.BACKUP)))
