"""Literal text to typed KDL number conversion.

- parse_number() returns KDLNumber | None
- Malformed text returns None; it is never raised
- Raises only for capability failures (UnsupportedMagnitudeError,
  InvalidRadixError) so callers can tell "not a number" apart from
  "a number this format cannot hold"

Cascade:
    1. Base 10 with a decimal point       -> Float64Number via float()
    2. Base 10 with an exponent           -> Float64Number via Decimal, then float()
    3. Integer that fits signed 32 bits   -> Int32Number
    4. Integer that fits signed 64 bits   -> Int64Number
    5. Anything wider, base 10 or 16      -> BigIntNumber
       Anything wider, base 2 or 8        -> UnsupportedMagnitudeError

Non-decimal radices are unsigned: a value that only fits a width by using
its sign bit escalates to the next width instead of becoming negative.

Thread-safe. No global state besides the scanner's thread-local error context.

Python 3.13+.
"""

import logging
import math
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from kdlnumbers.constants import (
    BIGINT_PARSE_RADIXES,
    DECIMAL_POINT,
    DIGIT_SEPARATOR,
    EXPONENT_MARKERS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    PREFIX_RADIXES,
    SUPPORTED_RADIXES,
)
from kdlnumbers.diagnostics import ErrorTemplate, InvalidRadixError, UnsupportedMagnitudeError
from kdlnumbers.enums import ParseFlags
from kdlnumbers.syntax.primitives import get_last_parse_error, is_well_formed
from kdlnumbers.value_types import (
    BigIntNumber,
    Float64Number,
    Int32Number,
    Int64Number,
    KDLNumber,
    zero,
)

__all__ = ["parse_literal", "parse_number", "scan_flags"]

logger = logging.getLogger(__name__)

# Fixed-width attempts in escalation order: (constructor, min, max).
type _IntegerAttempt = tuple[Callable[[int, int, str | None], KDLNumber], int, int]

_INTEGER_CASCADE: tuple[_IntegerAttempt, ...] = (
    (Int32Number, INT32_MIN, INT32_MAX),
    (Int64Number, INT64_MIN, INT64_MAX),
)


def scan_flags(text: str) -> ParseFlags:
    """Collect lexical flags from literal text in a single pass.

    Example:
        >>> scan_flags("1.5e3")
        <ParseFlags.HAS_DECIMAL_POINT|HAS_SCIENTIFIC_NOTATION: 3>
    """
    flags = ParseFlags.NONE
    for ch in text:
        if ch in EXPONENT_MARKERS:
            flags |= ParseFlags.HAS_SCIENTIFIC_NOTATION
        elif ch == DECIMAL_POINT:
            flags |= ParseFlags.HAS_DECIMAL_POINT
    return flags


def parse_number(text: str, type: str | None = None) -> KDLNumber | None:  # noqa: A002
    """Parse a KDL number literal into the narrowest variant that holds it.

    This is the entry point for tokenizers: text already recognized as a
    numeric literal candidate goes in, a typed value (or None) comes out.

    Args:
        text: Literal text, including any "0x", "0o" or "0b" prefix
        type: Optional user type annotation carried onto the value

    Returns:
        The parsed number, or None if text is empty or not a number

    Raises:
        UnsupportedMagnitudeError: If text is a valid literal too large for
            the format (binary/octal beyond Int64, double overflow)

    Examples:
        >>> parse_number("42")
        Int32Number(value=42, radix=10, type=None)
        >>> parse_number("0xFFFFFFFF")
        Int64Number(value=4294967295, radix=16, type=None)
        >>> parse_number("1e10").as_basic_string()
        '1E+10'
        >>> parse_number("12abc") is None
        True
    """
    if not text:
        return None

    radix = 10
    digits = text
    if text[0] == "0":
        if len(text) == 1:
            return zero(10, type)
        prefix_radix = PREFIX_RADIXES.get(text[1])
        if prefix_radix is not None:
            radix = prefix_radix
            digits = text[2:]

    return parse_literal(digits, radix, scan_flags(digits), type)


def parse_literal(
    digits: str,
    radix: int,
    flags: ParseFlags,
    type: str | None = None,  # noqa: A002
) -> KDLNumber | None:
    """Run the overflow cascade on prefix-stripped literal text.

    Args:
        digits: Literal text with any radix prefix already removed
        radix: One of 2, 8, 10, 16
        flags: Lexical flags of the text (only meaningful for radix 10)
        type: Optional user type annotation carried onto the value

    Returns:
        The narrowest variant holding the value, or None if malformed

    Raises:
        InvalidRadixError: If radix is not 2, 8, 10 or 16
        UnsupportedMagnitudeError: If the value is too large for the format
    """
    if not digits:
        return None

    if radix not in SUPPORTED_RADIXES:
        raise InvalidRadixError(ErrorTemplate.invalid_radix(radix))

    if not is_well_formed(digits, radix):
        if logger.isEnabledFor(logging.DEBUG):
            context = get_last_parse_error()
            reason = context.message if context is not None else "malformed literal"
            logger.debug("%s", ErrorTemplate.malformed_literal(digits, radix, reason))
        return None

    text = digits.replace(DIGIT_SEPARATOR, "")

    if radix == 10 and ParseFlags.HAS_DECIMAL_POINT in flags:
        # Never tried as an integer, even when integral ("3.0").
        return _make_double(float(text), digits, flags, type)

    if radix == 10 and ParseFlags.HAS_SCIENTIFIC_NOTATION in flags:
        return _make_double(_read_scientific(text), digits, flags, type)

    return _select_integer(_read_magnitude(text, radix), digits, radix, type)


def _read_scientific(text: str) -> float:
    """Read well-formed base 10 scientific text as a double.

    Decimal keeps the mantissa exact until the exponent is applied. Decimal
    cannot hold exponents beyond its own limits; those are read by sign:
    a negative exponent (or a zero mantissa) underflows to a signed zero,
    a positive one overflows to infinity.
    """
    try:
        return float(Decimal(text))
    except InvalidOperation:
        marker = max(text.rfind(m) for m in EXPONENT_MARKERS)
        mantissa, exponent = text[:marker], text[marker + 1 :]
        sign = -1.0 if mantissa.startswith("-") else 1.0
        if exponent.startswith("-") or Decimal(mantissa) == 0:
            return math.copysign(0.0, sign)
        return math.copysign(math.inf, sign)


def _read_magnitude(text: str, radix: int) -> int:
    """Read well-formed integer text of any length."""
    try:
        return int(text, radix)
    except ValueError:
        # Only base 10 text past CPython's int max_str_digits limit lands
        # here; Decimal converts without going through that limit.
        return int(Decimal(text))


def _make_double(
    value: float, digits: str, flags: ParseFlags, type: str | None  # noqa: A002
) -> Float64Number:
    if math.isinf(value):
        raise UnsupportedMagnitudeError(ErrorTemplate.double_overflow(digits))
    return Float64Number(value, 10, type, flags)


def _select_integer(
    magnitude: int, digits: str, radix: int, type: str | None  # noqa: A002
) -> KDLNumber:
    """Pick the narrowest integer variant for an already-read magnitude."""
    # Non-decimal text is validated unsigned; a negative magnitude there
    # cannot come from the scanner, but it must never fit a signed width.
    unsigned_only = radix != 10
    for constructor, low, high in _INTEGER_CASCADE:
        if unsigned_only and magnitude < 0:
            break
        if low <= magnitude <= high:
            return constructor(magnitude, radix, type)

    if radix not in BIGINT_PARSE_RADIXES:
        raise UnsupportedMagnitudeError(ErrorTemplate.magnitude_unsupported(digits, radix))

    # int(text, 16) never reads a high-bit leading digit as a sign, and
    # signs in hex text were rejected by is_well_formed().
    return BigIntNumber(magnitude, radix, type)
