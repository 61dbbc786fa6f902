# ABOUTME: Public API for the Shelfdesk book catalog.
# ABOUTME: Exports the Book type, the catalog, and book ID validation.

from shelfdesk.catalog.books import BookCatalog, InvalidBookIdError
from shelfdesk.catalog.types import Book
from shelfdesk.catalog.validation import BOOK_ID_FORMAT, validate_book_id

__all__ = [
    "BOOK_ID_FORMAT",
    "Book",
    "BookCatalog",
    "InvalidBookIdError",
    "validate_book_id",
]
