# ABOUTME: Core record type for the Shelfdesk borrower registry.
# ABOUTME: Borrower holds a name and the raw book IDs they have borrowed.

from dataclasses import dataclass, field


@dataclass
class Borrower:
    """A registered borrower.

    borrowed_books holds raw ID strings. They are not checked against the
    catalog or against the book ID format.
    """

    name: str
    borrowed_books: list[str] = field(default_factory=list)

    @property
    def books_display(self) -> str:
        """Borrowed IDs joined by spaces for display."""
        return " ".join(self.borrowed_books)
