# ABOUTME: In-memory book catalog with add, remove, find, sort, and list.
# ABOUTME: Rejects malformed book IDs; removal deletes every matching entry.

import logging
from collections.abc import Iterator
from operator import attrgetter

from shelfdesk.catalog.types import Book
from shelfdesk.catalog.validation import BOOK_ID_FORMAT, validate_book_id

logger = logging.getLogger(__name__)


class InvalidBookIdError(ValueError):
    """Raised when a book ID does not match the letter-plus-four-digits format."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Invalid book ID '{book_id}' (expected format: {BOOK_ID_FORMAT})")
        self.book_id = book_id


class BookCatalog:
    """Ordered, in-memory collection of Book records.

    Books are kept in insertion order until sort_by_id() is called.
    Duplicate IDs are allowed.
    """

    def __init__(self) -> None:
        self._books: list[Book] = []

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    @property
    def is_empty(self) -> bool:
        return not self._books

    def add(self, title: str, author: str, book_id: str) -> Book:
        """Append a book to the catalog.

        Args:
            title: The book's title.
            author: The book's author.
            book_id: ID in the form of one letter and four digits.

        Returns:
            The Book that was appended.

        Raises:
            InvalidBookIdError: If book_id is malformed. The catalog is unchanged.
        """
        if not validate_book_id(book_id):
            logger.debug("Rejected book %r: invalid ID %r", title, book_id)
            raise InvalidBookIdError(book_id)

        book = Book(title=title, author=author, id=book_id)
        self._books.append(book)
        logger.debug("Added book %s", book.label)
        return book

    def remove(self, book_id: str) -> int:
        """Remove every book whose ID equals book_id.

        All matches are removed, not just the first. Removing an ID that is
        not present is a no-op.

        Returns:
            The number of books removed (0, 1, or more).
        """
        kept = [book for book in self._books if book.id != book_id]
        removed = len(self._books) - len(kept)
        self._books = kept
        logger.debug("Removed %d book(s) with ID %s", removed, book_id)
        return removed

    def find(self, book_id: str) -> Book | None:
        """Return the first book with the given ID, or None."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def sort_by_id(self) -> None:
        """Sort books by ascending ID. Books sharing an ID keep their order."""
        self._books.sort(key=attrgetter("id"))
        logger.debug("Sorted %d book(s) by ID", len(self._books))

    def list_all(self) -> list[Book]:
        """Return all books in current order. Empty list when the catalog is empty."""
        return list(self._books)
