# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds backend/src to sys.path so `import bookstore` works without installing.
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
backend_src = project_root / "backend" / "src"
if str(backend_src) not in sys.path:
    sys.path.insert(0, str(backend_src))

from bookstore.config import get_settings  # noqa: E402
from bookstore.domain.models import CatalogItem  # noqa: E402


VALID_ISBN = "0306406152"
VALID_ISNI = "123456789012345X"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from BOOKSTORE_* variables and the settings cache."""
    for name in (
        "BOOKSTORE_DEFAULT_CURRENCY",
        "BOOKSTORE_ISNI_BASE_URL",
        "BOOKSTORE_ISBN_SEARCH_BASE_URL",
        "BOOKSTORE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def item() -> CatalogItem:
    """The reference item: priced, stocked, with an ISNI."""
    return CatalogItem(
        "Joe",
        "Book Title",
        "Publisher Name",
        VALID_ISBN,
        price=Decimal("25.99"),
        currency="USD",
        amount=10,
        book_binding="",
        isni=VALID_ISNI,
    )


@pytest.fixture
def plain_item() -> CatalogItem:
    """An item built from the mandatory fields only."""
    return CatalogItem("Joe", "Book Title", "Publisher Name", VALID_ISBN)
