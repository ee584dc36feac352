"""
Domain model for a single bookstore catalog entry.

A CatalogItem holds the bibliographic identity of a book (author, title,
publisher, ISBN-10, optional ISNI) and its commercial state (price,
currency, stock amount, binding, publication date).

Design Decisions:
- Identity fields are validated once, in a fixed order, and never change
- Commercial fields are properties whose setters validate before assigning,
  so a rejected assignment leaves the previous value in place
- Decimal for prices to avoid floating-point errors
- has_isni is derived from isni instead of being stored
"""

import logging
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TextIO

from .exceptions import RangeError, StateError, ValidationError
from .identifiers import (
    calculate_isbn_checksum,
    validate_currency,
    validate_isbn_checksum,
    validate_isbn_format,
    validate_isni_format,
)

logger = logging.getLogger(__name__)


DEFAULT_CURRENCY = "USD"
DEFAULT_BOOK_BINDING = " "

ISNI_URI_PREFIX = "https://isni.org/isni/"
ISBN_SEARCH_URI_PREFIX = "https://isbnsearch.org/search?s="


def _require_text(value: str, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a price input to Decimal without float artifacts."""
    if isinstance(value, bool):
        raise ValidationError(f"Price must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            # str() first so 25.99 stays 25.99 instead of its binary expansion
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"Price must be a number, got {value!r}") from None
    else:
        raise ValidationError(f"Price must be a number, got {value!r}")

    if not result.is_finite():
        raise ValidationError(f"Price must be a finite number, got {value!r}")
    return result


class CatalogItem:
    """
    A book offered by the store.

    All identity checks run at construction in this order: author, title,
    publisher, ISBN format, ISBN checksum, ISNI format. The first failure
    raises and no object is created. Price, currency and amount then go
    through their setters, so construction enforces the same rules as
    later assignment.
    """

    def __init__(
        self,
        author: str,
        title: str,
        publisher: str,
        isbn: str,
        *,
        price: Decimal | int | float | str = Decimal(0),
        currency: str = DEFAULT_CURRENCY,
        amount: int = 0,
        book_binding: str | None = DEFAULT_BOOK_BINDING,
        isni: str | None = None,
        published: datetime | None = None,
    ) -> None:
        self._author_name = _require_text(
            author, "Author name must have at least one letter character."
        )
        self._title = _require_text(
            title, "Title must have at least one letter character."
        )
        self._publisher = _require_text(
            publisher, "Publisher must have at least one letter character."
        )

        if not validate_isbn_format(isbn):
            raise ValidationError(
                "Invalid ISBN format. An ISBN code must have ten characters, "
                "each being a digit or 'X'."
            )
        if not validate_isbn_checksum(isbn):
            raise ValidationError("Invalid ISBN checksum. The ISBN code is not valid.")
        self._isbn = isbn

        if isni is not None and not validate_isni_format(isni):
            raise ValidationError(
                "Invalid ISNI format. An ISNI code must have sixteen characters, "
                "each being a digit or 'X'."
            )
        self._isni = isni

        self.published = published
        self.book_binding = book_binding

        self.price = price
        self.currency = currency
        self.amount = amount

        logger.debug(f"Created catalog item ISBN {self._isbn} ({self._title!r})")

    # ------------------------------------------------------------------
    # Identity (read-only)
    # ------------------------------------------------------------------

    @property
    def author_name(self) -> str:
        return self._author_name

    @property
    def title(self) -> str:
        return self._title

    @property
    def publisher(self) -> str:
        return self._publisher

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def isni(self) -> str | None:
        return self._isni

    @property
    def has_isni(self) -> bool:
        """True if the item was created with an ISNI."""
        return self._isni is not None

    # ------------------------------------------------------------------
    # Commercial state (guarded)
    # ------------------------------------------------------------------

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: Decimal | int | float | str) -> None:
        price = _to_decimal(value)
        if price < 0:
            raise RangeError("price", "Price must be greater or equal to zero.")
        if price.is_zero():
            # Drop the sign of -0 but keep the scale
            price = price.copy_abs()
        self._price = price
        logger.debug(f"ISBN {self._isbn}: price set to {price}")

    @property
    def currency(self) -> str:
        return self._currency

    @currency.setter
    def currency(self, value: str) -> None:
        validate_currency(value)
        self._currency = value
        logger.debug(f"ISBN {self._isbn}: currency set to {value}")

    @property
    def amount(self) -> int:
        """Number of copies in stock."""
        return self._amount

    @amount.setter
    def amount(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Amount must be an integer, got {value!r}")
        if value < 0:
            raise RangeError("amount", "Amount must be greater or equal to zero.")
        self._amount = value
        logger.debug(f"ISBN {self._isbn}: amount set to {value}")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def is_valid_isbn_checksum(self) -> bool:
        """Self-check through the recomputed checksum remainder."""
        return calculate_isbn_checksum(self._isbn) == 0

    def format_isbn_with_checksum(self) -> str:
        return f"ISBN with checksum: {self._isbn}-{calculate_isbn_checksum(self._isbn)}"

    def display_isbn_with_checksum(self, stream: TextIO | None = None) -> str:
        """Write the ISBN/checksum line to stream (stdout by default) and return it."""
        line = self.format_isbn_with_checksum()
        print(line, file=sys.stdout if stream is None else stream)
        return line

    def get_isni_uri(self, base_url: str = ISNI_URI_PREFIX) -> str:
        """
        Build the ISNI lookup URI.

        The ISNI is appended to base_url as is, without URL encoding.

        Raises:
            StateError: If the item has no ISNI
        """
        if self._isni is None:
            raise StateError("ISNI is not set.")
        return f"{base_url}{self._isni}"

    def get_isbn_search_uri(self, base_url: str = ISBN_SEARCH_URI_PREFIX) -> str:
        """Build the ISBN search URI (raw ISBN appended to base_url)."""
        return f"{base_url}{self._isbn}"

    @property
    def formatted_price(self) -> str:
        """Price as plain fixed-point text: period separator, no grouping."""
        return format(self._price, "f")

    def __str__(self) -> str:
        if self._isni is None:
            return (
                f'{self._title}, {self._author_name}, "{self.formatted_price}", '
                f"{self._currency}, {self._amount}"
            )
        return (
            f'{self._title}, {self._author_name}, {self._isni}, "{self.formatted_price}", '
            f"{self._currency}, {self._amount}"
        )

    def __repr__(self) -> str:
        return (
            f"CatalogItem(isbn={self._isbn!r}, title={self._title!r}, "
            f"author={self._author_name!r}, price={self._price!r}, "
            f"currency={self._currency!r}, amount={self._amount!r})"
        )
