"""Character classification for KDL number literals.

Predicates used by tokenizers to decide when a numeric literal starts and by
the literal scanner to validate digit runs per radix.

ASCII only: str.isdigit() accepts characters like '²' or '٣' which KDL does
not treat as digits, so every predicate is an explicit membership test.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from kdlnumbers.diagnostics import ErrorTemplate, InvalidRadixError

__all__ = [
    "digit_predicate",
    "is_valid_binary_char",
    "is_valid_decimal_char",
    "is_valid_hex_char",
    "is_valid_numeric_start",
    "is_valid_octal_char",
    "is_valid_sign_char",
]

_SIGN_CHARS: frozenset[str] = frozenset("+-")
_BINARY_DIGITS: frozenset[str] = frozenset("01")
_OCTAL_DIGITS: frozenset[str] = frozenset("01234567")
_DECIMAL_DIGITS: frozenset[str] = frozenset("0123456789")
_HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")
_NUMERIC_START_CHARS: frozenset[str] = _SIGN_CHARS | _DECIMAL_DIGITS


def is_valid_numeric_start(ch: str) -> bool:
    """Check if a character can begin a numeric literal ('+', '-' or 0-9).

    Example:
        >>> is_valid_numeric_start("-")
        True
        >>> is_valid_numeric_start(".")
        False
    """
    return ch in _NUMERIC_START_CHARS


def is_valid_sign_char(ch: str) -> bool:
    """Check if a character is a literal sign ('+' or '-')."""
    return ch in _SIGN_CHARS


def is_valid_decimal_char(ch: str) -> bool:
    """Check if a character is an ASCII decimal digit."""
    return ch in _DECIMAL_DIGITS


def is_valid_hex_char(ch: str) -> bool:
    """Check if a character is a hexadecimal digit (either case)."""
    return ch in _HEX_DIGITS


def is_valid_octal_char(ch: str) -> bool:
    """Check if a character is an octal digit."""
    return ch in _OCTAL_DIGITS


def is_valid_binary_char(ch: str) -> bool:
    """Check if a character is a binary digit."""
    return ch in _BINARY_DIGITS


_DIGIT_PREDICATES: dict[int, Callable[[str], bool]] = {
    2: is_valid_binary_char,
    8: is_valid_octal_char,
    10: is_valid_decimal_char,
    16: is_valid_hex_char,
}


def digit_predicate(radix: int) -> Callable[[str], bool]:
    """Get the digit predicate for a radix.

    Args:
        radix: One of 2, 8, 10, 16

    Returns:
        Predicate accepting exactly the digits of that radix

    Raises:
        InvalidRadixError: If radix is not a KDL radix
    """
    predicate = _DIGIT_PREDICATES.get(radix)
    if predicate is None:
        raise InvalidRadixError(ErrorTemplate.invalid_radix(radix))
    return predicate
