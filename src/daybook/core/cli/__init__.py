"""Daybook CLI — entry point for the menu and the batch commands."""

import click

from daybook import __version__
from daybook.core.exceptions import DaybookError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, package_name="daybook")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML or JSON config file (default: ~/.config/daybook/config.yaml).",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding entries/, backups/ and the state file (default: current directory).",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, data_dir: str | None, log_level: str | None) -> None:
    """Daybook — a personal diary kept as plain text files.

    Run without a command to open the interactive menu.
    """
    from .common import configure_logging, ensure_directories, load_config

    try:
        config = load_config(config_file, data_dir)
        configure_logging(config, log_level)
    except DaybookError as e:
        raise click.ClickException(str(e)) from e

    ensure_directories(config)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


# Register subcommands
from .backup_cmd import backup
from .entry_cmd import list_entries, read, write
from .menu_cmd import menu
from .search_cmd import search

main.add_command(menu)
main.add_command(write)
main.add_command(read)
main.add_command(list_entries)
main.add_command(search)
main.add_command(backup)
