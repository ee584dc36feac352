"""Tests for building catalog items from data and exporting snapshots."""

from datetime import datetime
from decimal import Decimal

import pydantic
import pytest

from bookstore.config import Settings
from bookstore.domain import CatalogItem, RangeError, ValidationError
from bookstore.schemas import CatalogItemData, CatalogItemView


def _data(**overrides) -> CatalogItemData:
    fields = {
        "author": "Joe",
        "title": "Book Title",
        "publisher": "Publisher Name",
        "isbn": "0306406152",
    }
    fields.update(overrides)
    return CatalogItemData(**fields)


def test_data_defaults():
    data = _data()

    assert data.price == Decimal(0)
    assert data.currency == "USD"
    assert data.amount == 0
    assert data.book_binding == " "
    assert data.isni is None
    assert data.published is None


def test_build_matches_constructor():
    published = datetime(2020, 5, 17)
    data = _data(
        price="25.99",
        currency="USD",
        amount=10,
        isni="123456789012345X",
        published=published,
    )

    item = data.build()

    assert isinstance(item, CatalogItem)
    assert item.price == Decimal("25.99")
    assert item.amount == 10
    assert item.has_isni is True
    assert item.published == published
    assert str(item) == 'Book Title, Joe, 123456789012345X, "25.99", USD, 10'


def test_build_from_json():
    data = CatalogItemData.model_validate_json(
        '{"author": "Joe", "title": "Book Title", "publisher": "Publisher Name",'
        ' "isbn": "080442957X", "price": "7.50", "currency": "EUR", "amount": 4}'
    )

    item = data.build()

    assert item.isbn == "080442957X"
    assert item.price == Decimal("7.50")
    assert item.currency == "EUR"


def test_build_keeps_domain_error_order():
    with pytest.raises(ValidationError, match="Author name"):
        _data(author=" ", isbn="bad").build()

    with pytest.raises(ValidationError, match="Invalid ISBN checksum"):
        _data(isbn="0306406153").build()


def test_build_rejects_negative_values():
    with pytest.raises(RangeError):
        _data(price="-0.01").build()
    with pytest.raises(RangeError):
        _data(amount=-1).build()


def test_data_is_immutable():
    data = _data()
    with pytest.raises(pydantic.ValidationError):
        data.price = Decimal(1)


def test_data_currency_default_follows_settings(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_DEFAULT_CURRENCY", "EUR")

    item = _data().build()

    assert item.currency == "EUR"


def test_view_from_item(item):
    view = CatalogItemView.from_item(item)

    assert view.author == "Joe"
    assert view.isbn == "0306406152"
    assert view.has_isni is True
    assert view.price == "25.99"
    assert view.isbn_search_uri == "https://isbnsearch.org/search?s=0306406152"
    assert view.isni_uri == "https://isni.org/isni/123456789012345X"


def test_view_without_isni(plain_item):
    view = CatalogItemView.from_item(plain_item)

    assert view.isni is None
    assert view.has_isni is False
    assert view.isni_uri is None
    assert view.model_dump()["price"] == "0"


def test_view_uses_configured_uri_bases(item):
    settings = Settings(
        isni_base_url="https://isni.example/",
        isbn_search_base_url="https://books.example/find?isbn=",
    )

    view = CatalogItemView.from_item(item, settings)

    assert view.isni_uri == "https://isni.example/123456789012345X"
    assert view.isbn_search_uri == "https://books.example/find?isbn=0306406152"


@pytest.mark.parametrize("amount", [True, "3", 2.0])
def test_data_amount_rejects_non_integers(amount):
    with pytest.raises(pydantic.ValidationError):
        _data(amount=amount)


def test_data_amount_accepts_json_integer():
    data = CatalogItemData.model_validate_json(
        '{"author": "Joe", "title": "Book Title", "publisher": "Publisher Name",'
        ' "isbn": "0306406152", "amount": 3}'
    )
    assert data.build().amount == 3
