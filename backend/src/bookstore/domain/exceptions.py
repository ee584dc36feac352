"""Domain-level exceptions.

All rule violations raised by the catalog domain derive from CatalogError
so callers can catch them uniformly. Each concrete error also derives from
the closest builtin so plain ``except ValueError`` handlers keep working.
"""


class CatalogError(Exception):
    """Base class for all catalog domain errors."""


class ValidationError(CatalogError, ValueError):
    """A value does not have the required format or content."""


class RangeError(CatalogError, ValueError):
    """A numeric value is outside its allowed range."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class StateError(CatalogError, RuntimeError):
    """The operation is not available in the entity's current state."""
