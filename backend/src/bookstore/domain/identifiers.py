"""
Identifier rules for catalog entries: ISBN-10, ISNI and currency codes.

Pure functions, no side effects, no I/O. The catalog item calls them
during construction and from its guarded setters, and they are equally
usable on their own.

Design Decisions:
- Only ASCII digits and an uppercase 'X' are accepted inside codes
- Checksum helpers require a format-valid code and raise otherwise
- ISNI is format-checked only; its check character is not verified
"""

import string

from .exceptions import ValidationError


ISBN_LENGTH = 10
ISNI_LENGTH = 16
CURRENCY_LENGTH = 3

# Value of the check character 'X' in ISBN-10
CHECK_CHARACTER_X = 10

ISBN_MODULUS = 11

CODE_CHARACTERS = frozenset(string.digits + "X")


def _has_code_format(code: object, length: int) -> bool:
    """True if code is a string of `length` digits or 'X' characters."""
    if not isinstance(code, str) or len(code) != length:
        return False
    return all(c in CODE_CHARACTERS for c in code)


def _character_value(c: str) -> int:
    return CHECK_CHARACTER_X if c == "X" else int(c)


def _weighted_sum(code: str) -> int:
    """Sum of value * (10 - position) over all ten ISBN positions."""
    if not validate_isbn_format(code):
        raise ValidationError(
            f"Cannot compute an ISBN checksum for malformed code {code!r}"
        )
    return sum(
        (ISBN_LENGTH - position) * _character_value(c)
        for position, c in enumerate(code)
    )


def validate_isbn_format(code: object) -> bool:
    """
    Check the ISBN-10 shape.

    Returns:
        True if code is exactly ten characters, each a digit or 'X'.
    """
    return _has_code_format(code, ISBN_LENGTH)


def validate_isni_format(code: object) -> bool:
    """
    Check the ISNI shape.

    Returns:
        True if code is exactly sixteen characters, each a digit or 'X'.
    """
    return _has_code_format(code, ISNI_LENGTH)


def validate_isbn_checksum(code: str) -> bool:
    """
    Validate the ISBN-10 check character.

    Rule: sum(value(c_i) * (10 - i) for i in 0..9) % 11 == 0

    The tenth character takes part in the sum with weight 1, so the whole
    code is checked for self-consistency.

    Raises:
        ValidationError: If code does not pass validate_isbn_format
    """
    return _weighted_sum(code) % ISBN_MODULUS == 0


def calculate_isbn_checksum(code: str) -> int:
    """
    Recompute the checksum remainder of an ISBN-10.

    The first nine characters are weighted 10..2, the tenth is added as is,
    and the total is reduced mod 11. A remainder of 10 is reported as 0.

    Example:
        >>> calculate_isbn_checksum("0306406152")
        0

    Raises:
        ValidationError: If code does not pass validate_isbn_format
    """
    checksum = _weighted_sum(code) % ISBN_MODULUS
    return 0 if checksum == 10 else checksum


def isbn_check_character(prefix: str) -> str:
    """
    Compute the tenth ISBN-10 character for a nine-digit prefix.

    Args:
        prefix: The first nine characters of an ISBN-10 (digits only)

    Returns:
        The digit, or 'X' for ten, that makes validate_isbn_checksum pass.
    """
    if not isinstance(prefix, str) or len(prefix) != ISBN_LENGTH - 1 or not all(
        c in string.digits for c in prefix
    ):
        raise ValidationError(f"ISBN prefix must be nine digits, got {prefix!r}")

    partial = sum(
        (ISBN_LENGTH - position) * int(c) for position, c in enumerate(prefix)
    )
    # The check character has weight 1: pick the value that zeroes the remainder
    value = (ISBN_MODULUS - partial % ISBN_MODULUS) % ISBN_MODULUS
    return "X" if value == CHECK_CHARACTER_X else str(value)


def validate_currency(code: object) -> None:
    """
    Validate a three-letter currency code.

    Case is not checked and the code is not compared against ISO 4217.

    Raises:
        ValidationError: If the code is not three characters long or
            contains anything other than letters
    """
    if not isinstance(code, str) or len(code) != CURRENCY_LENGTH:
        raise ValidationError("Currency must have three characters.")

    if not all(c.isalpha() for c in code):
        raise ValidationError("Currency must contain only letters.")


def is_valid_currency(code: object) -> bool:
    """Predicate form of validate_currency."""
    try:
        validate_currency(code)
    except ValidationError:
        return False
    return True
