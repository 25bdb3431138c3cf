"""daybook menu — the interactive numbered menu."""

from __future__ import annotations

import click


@click.command()
@click.pass_obj
def menu(config) -> None:
    """Open the interactive diary menu."""
    from daybook.core.cli.common import open_dispatcher
    from daybook.gateway.cli_gateway import ConsoleGateway

    ConsoleGateway(open_dispatcher(config)).start()
