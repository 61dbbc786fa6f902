# ABOUTME: Book ID format validation for the Shelfdesk catalog.
# ABOUTME: A book ID is one ASCII letter followed by four ASCII digits.

import re

BOOK_ID_FORMAT = "A1234"

_BOOK_ID_PATTERN = re.compile(r"[A-Za-z][0-9]{4}")


def validate_book_id(book_id: str) -> bool:
    """Return True if book_id is one letter followed by four digits.

    No case or whitespace normalization is applied, so " A1234" and
    "A1234\\n" are both rejected.
    """
    return _BOOK_ID_PATTERN.fullmatch(book_id) is not None
