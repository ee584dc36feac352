"""
Domain package - Core business logic with no external dependencies.

This package contains the catalog item entity and the pure validation
rules for the identifiers it carries (ISBN-10, ISNI, currency codes).
"""

from .exceptions import CatalogError, RangeError, StateError, ValidationError
from .models import CatalogItem

__all__ = [
    "CatalogError",
    "CatalogItem",
    "RangeError",
    "StateError",
    "ValidationError",
]
