# ABOUTME: In-memory borrower registry with add, remove, find, and list.
# ABOUTME: Newest borrowers come first; removal deletes every matching name.

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from shelfdesk.borrowers.types import Borrower

logger = logging.getLogger(__name__)


class BorrowerRegistry:
    """Unordered, in-memory collection of Borrower records.

    New borrowers are inserted at the head, so iteration is newest first.
    Duplicate names are allowed.
    """

    def __init__(self) -> None:
        self._borrowers: deque[Borrower] = deque()

    def __len__(self) -> int:
        return len(self._borrowers)

    def __iter__(self) -> Iterator[Borrower]:
        return iter(list(self._borrowers))

    @property
    def is_empty(self) -> bool:
        return not self._borrowers

    def add(self, name: str, borrowed_book_ids: Iterable[str] = ()) -> Borrower:
        """Register a borrower at the head of the registry.

        Book IDs are stored as given, without checking that the books exist.
        """
        borrower = Borrower(name=name, borrowed_books=list(borrowed_book_ids))
        self._borrowers.appendleft(borrower)
        logger.debug(
            "Added borrower %s with %d book(s)", name, len(borrower.borrowed_books)
        )
        return borrower

    def remove(self, name: str) -> int:
        """Remove every borrower with the given name.

        Returns:
            The number of borrowers removed (0, 1, or more).
        """
        kept = deque(b for b in self._borrowers if b.name != name)
        removed = len(self._borrowers) - len(kept)
        self._borrowers = kept
        logger.debug("Removed %d borrower(s) named %s", removed, name)
        return removed

    def find(self, name: str) -> Borrower | None:
        """Return the first (newest) borrower with the given name, or None."""
        for borrower in self._borrowers:
            if borrower.name == name:
                return borrower
        return None

    def list_all(self) -> list[Borrower]:
        """Return all borrowers, newest first. Empty list when none are registered."""
        return list(self._borrowers)
