# ABOUTME: Core record type for the Shelfdesk book catalog.
# ABOUTME: Book holds title, author, and the letter-plus-four-digits ID.

from dataclasses import dataclass


@dataclass
class Book:
    """A cataloged book.

    The catalog orders books by ``id`` alone. Two books may share an ID;
    nothing here enforces uniqueness.
    """

    title: str
    author: str
    id: str

    @property
    def label(self) -> str:
        """One-line display form: title, author, and ID."""
        return f"{self.title} by {self.author} (ID: {self.id})"
