# ABOUTME: CLI package for Shelfdesk, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from shelfdesk.cli.commands import check_id_cmd, menu_cmd
from shelfdesk.cli.options import verbose_option


def _configure_logging(verbose: bool) -> None:
    """Route shelfdesk log records to stderr through Rich."""
    package_logger = logging.getLogger("shelfdesk")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )


@click.group(invoke_without_command=True)
@click.version_option(package_name="shelfdesk")
@verbose_option
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Shelfdesk - an in-memory library desk for books and borrowers.

    Runs the interactive menu when no command is given.
    """
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu_cmd.menu)


cli.add_command(menu_cmd.menu)
cli.add_command(check_id_cmd.check_id)
