# ABOUTME: Unit tests for the Book and Borrower dataclasses.
# ABOUTME: Validates defaults and display helpers.

from shelfdesk.borrowers import Borrower
from shelfdesk.catalog import Book


class TestBook:
    """Tests for the Book dataclass."""

    def test_label(self) -> None:
        book = Book(title="Dune", author="Frank Herbert", id="A1234")
        assert book.label == "Dune by Frank Herbert (ID: A1234)"

    def test_equality_by_value(self) -> None:
        assert Book("Dune", "Herbert", "A1234") == Book("Dune", "Herbert", "A1234")


class TestBorrower:
    """Tests for the Borrower dataclass."""

    def test_defaults_to_no_books(self) -> None:
        borrower = Borrower(name="Ada")
        assert borrower.borrowed_books == []
        assert borrower.books_display == ""

    def test_default_list_not_shared(self) -> None:
        first = Borrower(name="Ada")
        second = Borrower(name="Grace")
        first.borrowed_books.append("A1234")
        assert second.borrowed_books == []

    def test_books_display(self) -> None:
        borrower = Borrower(name="Ada", borrowed_books=["A1234", "B0001"])
        assert borrower.books_display == "A1234 B0001"
