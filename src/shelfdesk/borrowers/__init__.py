# ABOUTME: Public API for the Shelfdesk borrower registry.
# ABOUTME: Exports the Borrower type and the registry.

from shelfdesk.borrowers.registry import BorrowerRegistry
from shelfdesk.borrowers.types import Borrower

__all__ = [
    "Borrower",
    "BorrowerRegistry",
]
