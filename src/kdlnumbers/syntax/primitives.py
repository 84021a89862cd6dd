"""Primitive scanners for KDL number literals.

This module provides low-level scanners for digit runs, base 10 literals and
radix-prefixed literals per the KDL number grammar:

    decimal := sign? digits ('.' digits)? (('e' | 'E') sign? digits)?
    hex     := '0x' hex-digit (hex-digit | '_')*
    octal   := '0o' octal-digit (octal-digit | '_')*
    binary  := '0b' ('0' | '1') ('0' | '1' | '_')*
    digits  := digit (digit | '_')*

Scanners return the raw source text; conversion to a typed value happens in
kdlnumbers.parsing.

Error Context:
    Functions store error context on failure via _set_parse_error().
    Retrieve with get_last_parse_error() for detailed diagnostics.
"""

from collections.abc import Callable
from dataclasses import dataclass
from threading import local as thread_local

from kdlnumbers.constants import DECIMAL_POINT, DIGIT_SEPARATOR, EXPONENT_MARKERS, PREFIX_RADIXES
from kdlnumbers.syntax.char_classes import (
    digit_predicate,
    is_valid_decimal_char,
    is_valid_sign_char,
)
from kdlnumbers.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ParseErrorContext",
    "clear_parse_error",
    "get_last_parse_error",
    "is_well_formed",
    "parse_decimal_literal",
    "parse_digits",
    "parse_number_literal",
]

# Human-readable digit classes for ParseErrorContext.expected
_EXPECTED_DIGITS: dict[int, tuple[str, ...]] = {
    2: ("0", "1"),
    8: ("0-7",),
    10: ("0-9",),
    16: ("0-9", "a-f", "A-F"),
}

# Thread-local storage for parse error context
_error_thread_local = thread_local()


@dataclass(frozen=True, slots=True)
class ParseErrorContext:
    """Context information for scan failures.

    Retrieve via get_last_parse_error() after a scanner returns None.

    Attributes:
        message: Human-readable error description
        position: Character position in source where error occurred
        expected: What the scanner expected to find (optional)
    """

    message: str
    position: int
    expected: tuple[str, ...] = ()


def _set_parse_error(
    message: str, position: int, expected: tuple[str, ...] = ()
) -> None:
    """Store parse error context for later retrieval."""
    _error_thread_local.last_error = ParseErrorContext(
        message=message, position=position, expected=expected
    )


def get_last_parse_error() -> ParseErrorContext | None:
    """Get the last scan error context (if any).

    Example:
        >>> if parse_digits(cursor, 16) is None:
        ...     error = get_last_parse_error()
        ...     print(f"Error at position {error.position}: {error.message}")
    """
    return getattr(_error_thread_local, "last_error", None)


def clear_parse_error() -> None:
    """Clear the last parse error context."""
    _error_thread_local.last_error = None


def _scan_digit_run(
    cursor: Cursor, is_digit: Callable[[str], bool], radix: int, what: str
) -> Cursor | None:
    """Scan digit (digit | '_')* and return the cursor after it."""
    if cursor.is_eof or not is_digit(cursor.current):
        _set_parse_error(f"Expected {what}", cursor.pos, _EXPECTED_DIGITS[radix])
        return None
    return cursor.advance().skip_while(lambda ch: is_digit(ch) or ch == DIGIT_SEPARATOR)


def parse_digits(cursor: Cursor, radix: int) -> ParseResult[str] | None:
    """Parse an unsigned digit run in the given radix.

    Digit separators are allowed after the first digit.

    Examples:
        ff_ff (radix 16) → "ff_ff"
        1010 (radix 2) → "1010"

    Args:
        cursor: Current position in source
        radix: One of 2, 8, 10, 16

    Returns:
        ParseResult(digit_text, new_cursor) on success, None otherwise

    Raises:
        InvalidRadixError: If radix is not a KDL radix
    """
    clear_parse_error()
    end = _scan_digit_run(cursor, digit_predicate(radix), radix, f"base {radix} digit")
    if end is None:
        return None
    return ParseResult(cursor.slice_to(end.pos), end)


def parse_decimal_literal(cursor: Cursor) -> ParseResult[str] | None:
    """Parse base 10 literal: sign? digits ('.' digits)? ([eE] sign? digits)?

    Examples:
        42 → "42"
        -3.14 → "-3.14"
        +1_000.5e-3 → "+1_000.5e-3"

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(literal_text, new_cursor) on success, None otherwise
    """
    clear_parse_error()
    start = cursor

    if not cursor.is_eof and is_valid_sign_char(cursor.current):
        cursor = cursor.advance()

    end = _scan_digit_run(cursor, is_valid_decimal_char, 10, "digit")
    if end is None:
        return None
    cursor = end

    # Optional fraction
    after_point = cursor.expect(DECIMAL_POINT)
    if after_point is not None:
        end = _scan_digit_run(after_point, is_valid_decimal_char, 10, "digit after decimal point")
        if end is None:
            return None
        cursor = end

    # Optional exponent
    if not cursor.is_eof and cursor.current in EXPONENT_MARKERS:
        cursor = cursor.advance()
        if not cursor.is_eof and is_valid_sign_char(cursor.current):
            cursor = cursor.advance()
        end = _scan_digit_run(cursor, is_valid_decimal_char, 10, "exponent digit")
        if end is None:
            return None
        cursor = end

    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_number_literal(cursor: Cursor) -> ParseResult[str] | None:
    """Parse one KDL number literal token, prefix included.

    A leading "0x", "0o" or "0b" selects a radix-prefixed literal; anything
    else is scanned as a base 10 literal. Signs are only part of base 10
    literals, so "-0x10" scans as "-0" and stops at 'x'.

    Examples:
        0x1F → "0x1F"
        0b1010_1010 → "0b1010_1010"
        -1.5E+3 → "-1.5E+3"

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(raw_literal, new_cursor) on success, None otherwise
    """
    radix = PREFIX_RADIXES.get(cursor.peek(1) or "") if cursor.peek() == "0" else None
    if radix is None:
        return parse_decimal_literal(cursor)

    digits = parse_digits(cursor.advance(2), radix)
    if digits is None:
        return None
    return ParseResult(cursor.slice_to(digits.cursor.pos), digits.cursor)


def is_well_formed(text: str, radix: int) -> bool:
    """Check that text is exactly one literal body in the given radix.

    For radix 10 the full decimal grammar applies (sign, fraction,
    exponent). For 2, 8 and 16 only an unsigned digit run is accepted;
    the radix prefix must already be stripped.

    Args:
        text: Candidate literal text
        radix: One of 2, 8, 10, 16

    Returns:
        True if the whole text matches, False otherwise (error context set)

    Raises:
        InvalidRadixError: If radix is not a KDL radix
    """
    cursor = Cursor(text, 0)
    result = parse_decimal_literal(cursor) if radix == 10 else parse_digits(cursor, radix)
    if result is None:
        return False
    if not result.cursor.is_eof:
        _set_parse_error(
            f"Unexpected character '{result.cursor.current}' in base {radix} literal",
            result.cursor.pos,
            _EXPECTED_DIGITS[radix],
        )
        return False
    return True
