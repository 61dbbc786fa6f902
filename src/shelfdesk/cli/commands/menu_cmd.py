# ABOUTME: The `shelfdesk menu` command for the interactive library desk.
# ABOUTME: Starts a MenuSession over a fresh, empty catalog and registry.

import click
from rich.console import Console

from shelfdesk.cli.menu import MenuSession


@click.command("menu")
def menu() -> None:
    """Manage books and borrowers through a numbered menu."""
    session = MenuSession(console=Console())
    session.run()
