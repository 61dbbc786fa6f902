# ABOUTME: Shared pytest fixtures for Shelfdesk tests.
# ABOUTME: Provides empty and pre-populated catalogs, registries, and a capturing console.

from io import StringIO

import pytest
from rich.console import Console

from shelfdesk.borrowers import BorrowerRegistry
from shelfdesk.catalog import BookCatalog


@pytest.fixture
def catalog() -> BookCatalog:
    """An empty book catalog."""
    return BookCatalog()


@pytest.fixture
def stocked_catalog() -> BookCatalog:
    """A catalog holding three books in unsorted insertion order."""
    catalog = BookCatalog()
    catalog.add("The Name of the Rose", "Umberto Eco", "C0042")
    catalog.add("Dune", "Frank Herbert", "A1234")
    catalog.add("Foundation", "Isaac Asimov", "B0001")
    return catalog


@pytest.fixture
def registry() -> BorrowerRegistry:
    """An empty borrower registry."""
    return BorrowerRegistry()


@pytest.fixture
def console() -> Console:
    """A Rich console that writes to an in-memory buffer."""
    return Console(file=StringIO(), width=120)
