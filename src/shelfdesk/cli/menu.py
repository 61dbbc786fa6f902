# ABOUTME: Interactive menu session for managing books and borrowers.
# ABOUTME: Prompts for a numbered choice, runs one catalog or registry action, and repeats.

from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfdesk.borrowers import Borrower, BorrowerRegistry
from shelfdesk.catalog import BOOK_ID_FORMAT, Book, BookCatalog, InvalidBookIdError

MENU_CHOICES = {
    1: "Add a new book",
    2: "Delete a book",
    3: "Search for a book",
    4: "Sort and list all books",
    5: "Add a new borrower",
    6: "Delete a borrower",
    7: "Search for a borrower",
    8: "List all borrowers and their books",
    9: "Exit",
}
EXIT_CHOICE = 9


def _parse_choice(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _prompt_text(label: str) -> str:
    """Prompt for free text. An empty line is a valid answer."""
    return click.prompt(label, type=str, default="", show_default=False)


def _prompt_book_id(label: str) -> str:
    """Prompt for a book ID, dropping surrounding whitespace."""
    return click.prompt(label, type=str).strip()


class MenuSession:
    """Interactive desk over one BookCatalog and one BorrowerRegistry.

    Each loop iteration shows the menu, reads a choice, and runs a single
    action. Actions catch their own errors and report them to the console,
    so nothing escapes the loop except click.Abort on end of input.
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        catalog: BookCatalog | None = None,
        registry: BorrowerRegistry | None = None,
    ) -> None:
        self._console = console or Console()
        self._catalog = catalog if catalog is not None else BookCatalog()
        self._registry = registry if registry is not None else BorrowerRegistry()
        self._actions: dict[int, Callable[[], None]] = {
            1: self._add_book,
            2: self._delete_book,
            3: self._search_book,
            4: self._sort_and_list_books,
            5: self._add_borrower,
            6: self._delete_borrower,
            7: self._search_borrower,
            8: self._list_borrowers,
        }

    def run(self) -> None:
        """Loop until the user picks the exit choice."""
        while True:
            self._show_menu()
            choice = _parse_choice(click.prompt("Select an option", type=str))

            if choice == EXIT_CHOICE:
                self._console.print("Goodbye.")
                return

            action = self._actions.get(choice) if choice is not None else None
            if action is None:
                self._console.print("[red]Invalid choice, please try again.[/red]")
                continue

            action()

    def _show_menu(self) -> None:
        self._console.print("\n[bold]========== Library Desk ==========[/bold]")
        for number, label in MENU_CHOICES.items():
            self._console.print(f"  {number}. {label}")

    # --- Book actions ---

    def _add_book(self) -> None:
        title = _prompt_text("Title")
        author = _prompt_text("Author")
        book_id = _prompt_book_id(f"Book ID (format: {BOOK_ID_FORMAT})")

        try:
            book = self._catalog.add(title, author, book_id)
        except InvalidBookIdError as exc:
            self._console.print(f"[red]Error:[/red] {escape(str(exc))}")
            return

        self._console.print(f"[green]Added:[/green] {escape(book.title)} ({escape(book.id)})")

    def _delete_book(self) -> None:
        book_id = _prompt_book_id("Book ID to delete")
        removed = self._catalog.remove(book_id)

        if removed:
            self._console.print(
                f"[green]Deleted {removed} book(s) with ID {escape(book_id)}.[/green]"
            )
        else:
            self._console.print(
                f"[yellow]No book with ID {escape(book_id)}; nothing deleted.[/yellow]"
            )

    def _search_book(self) -> None:
        book_id = _prompt_book_id("Book ID to search for")
        book = self._catalog.find(book_id)

        if book is None:
            self._console.print(f"[yellow]No book with ID {escape(book_id)}.[/yellow]")
            return

        self._console.print(f"[bold]Found:[/bold] {escape(book.label)}")

    def _sort_and_list_books(self) -> None:
        self._catalog.sort_by_id()
        self._console.print("[dim]Books sorted by ID.[/dim]")
        self._print_books(self._catalog.list_all())

    def _print_books(self, books: list[Book]) -> None:
        if not books:
            self._console.print("[yellow]No books in the catalog.[/yellow]")
            return

        table = Table()
        table.add_column("ID", style="dim", width=5)
        table.add_column("Title", style="bold")
        table.add_column("Author")

        for book in books:
            table.add_row(escape(book.id), escape(book.title), escape(book.author))

        self._console.print(table)
        self._console.print(f"\n[dim]{len(books)} book(s)[/dim]")

    # --- Borrower actions ---

    def _add_borrower(self) -> None:
        name = _prompt_text("Borrower name")
        count = click.prompt("Number of borrowed books", type=click.IntRange(min=0))
        book_ids = [
            _prompt_book_id(f"Book ID {i} (format: {BOOK_ID_FORMAT})")
            for i in range(1, count + 1)
        ]

        borrower = self._registry.add(name, book_ids)
        self._console.print(f"[green]Added borrower:[/green] {escape(borrower.name)}")

    def _delete_borrower(self) -> None:
        name = _prompt_text("Borrower name to delete")
        removed = self._registry.remove(name)

        if removed:
            self._console.print(
                f"[green]Deleted {removed} borrower(s) named {escape(name)}.[/green]"
            )
        else:
            self._console.print(
                f"[yellow]No borrower named {escape(name)}; nothing deleted.[/yellow]"
            )

    def _search_borrower(self) -> None:
        name = _prompt_text("Borrower name to search for")
        borrower = self._registry.find(name)

        if borrower is None:
            self._console.print(f"[yellow]No borrower named {escape(name)}.[/yellow]")
            return

        self._console.print(f"[bold]Found:[/bold] {escape(borrower.name)}")
        books = escape(borrower.books_display) or "[dim]none[/dim]"
        self._console.print(f"  Borrowed: {books}")

    def _list_borrowers(self) -> None:
        self._print_borrowers(self._registry.list_all())

    def _print_borrowers(self, borrowers: list[Borrower]) -> None:
        if not borrowers:
            self._console.print("[yellow]No borrowers registered.[/yellow]")
            return

        table = Table()
        table.add_column("Name", style="bold")
        table.add_column("Borrowed books")

        for borrower in borrowers:
            table.add_row(
                escape(borrower.name),
                escape(borrower.books_display) or "[dim]none[/dim]",
            )

        self._console.print(table)
        self._console.print(f"\n[dim]{len(borrowers)} borrower(s)[/dim]")
