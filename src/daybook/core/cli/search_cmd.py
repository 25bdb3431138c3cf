"""daybook search — keyword search from the command line."""

from __future__ import annotations

import click
from loguru import logger

from daybook.core.exceptions import FileIOError
from daybook.gateway.base import Command, Request


@click.command()
@click.argument("keyword")
@click.option("--show", "show", default=None, help="Also print match NUMBER with matching lines marked.")
@click.pass_obj
def search(config, keyword: str, show: str | None) -> None:
    """Find entries containing KEYWORD (case-insensitive).

    The keyword is remembered as the last search, like in the menu.
    """
    from daybook.core.cli.common import emit, open_dispatcher

    dispatcher = open_dispatcher(config)
    reply = dispatcher.handle(Request(Command.SEARCH, [keyword]))
    if reply.ok:
        try:
            dispatcher.save_state()
        except FileIOError as e:
            logger.warning(str(e))
    emit(reply)

    if show is not None:
        click.echo()
        emit(dispatcher.handle(Request(Command.SHOW_MATCH, [show])))
