"""
Pydantic schemas for building and exporting catalog items.

CatalogItemData names every constructor argument with its default, so a
catalog entry can be described as data (e.g. parsed from JSON) and built
in one call. CatalogItemView is a serializable snapshot of an item.

Domain rules are not duplicated here: building an item always goes through
CatalogItem, so the error order and error types are the domain's.
All monetary values are exported as strings to avoid floating point issues.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from bookstore.config import Settings, get_settings
from bookstore.domain.models import DEFAULT_BOOK_BINDING, CatalogItem


def _default_currency() -> str:
    return get_settings().default_currency


class CatalogItemData(BaseModel):
    """Named-field description of a catalog item."""
    model_config = ConfigDict(frozen=True)

    author: str
    title: str
    publisher: str
    isbn: str
    price: Decimal = Field(default=Decimal(0), description="Unit price")
    currency: str = Field(
        default_factory=_default_currency,
        description="Three-letter currency code",
    )
    amount: int = Field(default=0, strict=True, description="Copies in stock")
    book_binding: str | None = DEFAULT_BOOK_BINDING
    isni: str | None = None
    published: datetime | None = None

    def build(self) -> CatalogItem:
        """
        Create the CatalogItem described by this data.

        Raises:
            ValidationError: If an identity field or the currency is invalid
            RangeError: If price or amount is negative
        """
        return CatalogItem(
            self.author,
            self.title,
            self.publisher,
            self.isbn,
            price=self.price,
            currency=self.currency,
            amount=self.amount,
            book_binding=self.book_binding,
            isni=self.isni,
            published=self.published,
        )


class CatalogItemView(BaseModel):
    """Read-only snapshot of a catalog item."""
    author: str
    title: str
    publisher: str
    isbn: str
    isni: str | None = None
    has_isni: bool
    price: str
    currency: str
    amount: int
    book_binding: str | None = None
    published: datetime | None = None
    isbn_search_uri: str
    isni_uri: str | None = None

    @classmethod
    def from_item(
        cls,
        item: CatalogItem,
        settings: Settings | None = None,
    ) -> "CatalogItemView":
        """Snapshot an item, building lookup URIs from the configured bases."""
        settings = settings or get_settings()
        return cls(
            author=item.author_name,
            title=item.title,
            publisher=item.publisher,
            isbn=item.isbn,
            isni=item.isni,
            has_isni=item.has_isni,
            price=item.formatted_price,
            currency=item.currency,
            amount=item.amount,
            book_binding=item.book_binding,
            published=item.published,
            isbn_search_uri=item.get_isbn_search_uri(settings.isbn_search_base_url),
            isni_uri=(
                item.get_isni_uri(settings.isni_base_url) if item.has_isni else None
            ),
        )
