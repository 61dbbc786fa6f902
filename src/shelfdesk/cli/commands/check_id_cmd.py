# ABOUTME: The `shelfdesk check-id` command for validating a book ID.
# ABOUTME: Exits 0 for a well-formed ID and 1 otherwise.

import click
from rich.console import Console
from rich.markup import escape

from shelfdesk.catalog import BOOK_ID_FORMAT, validate_book_id


@click.command("check-id")
@click.argument("book_id")
def check_id(book_id: str) -> None:
    """Check that BOOK_ID is one letter followed by four digits."""
    console = Console()

    if not validate_book_id(book_id):
        console.print(
            f"[red]Error:[/red] '{escape(book_id)}' is not a valid book ID "
            f"(expected format: {BOOK_ID_FORMAT})."
        )
        raise SystemExit(1)

    console.print(f"[green]{escape(book_id)} is valid.[/green]")
