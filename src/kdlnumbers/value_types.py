"""Core value types for KDL numbers.

Defines the closed set of storage variants a KDL number can take:
    - Int32Number: 32-bit signed integer (fast path for small literals)
    - Int64Number: 64-bit signed integer
    - BigIntNumber: Arbitrary-precision integer (base 10 and 16 only)
    - Float64Number: IEEE double (base 10 only), carrying lexical flags
    - KDLNumber: Union of the four variants

Every variant is an immutable value object. Equality compares variant,
radix and value; the user type annotation and the lexical flags never
participate, and Int32Number(5) != Int64Number(5).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar, TypeIs

from kdlnumbers.constants import (
    BIGINT_PARSE_RADIXES,
    BIGINT_RENDER_RADIXES,
    DECIMAL_POINT,
    FLOAT_RADIXES,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    SUPPORTED_RADIXES,
)
from kdlnumbers.diagnostics import (
    ErrorTemplate,
    InvalidRadixError,
    UnsupportedMagnitudeError,
    UnsupportedRadixError,
)
from kdlnumbers.enums import NumberKind, ParseFlags

__all__ = [
    "BigIntNumber",
    "Float64Number",
    "Int32Number",
    "Int64Number",
    "KDLNumber",
    "from_bigint",
    "from_double",
    "from_int32",
    "from_int64",
    "is_kdl_number",
    "zero",
]


def _check_radix(radix: int) -> None:
    if radix not in SUPPORTED_RADIXES:
        raise InvalidRadixError(ErrorTemplate.invalid_radix(radix))


def _check_integer(kind: NumberKind, value: int, radix: int, low: int, high: int) -> None:
    if not low <= value <= high:
        msg = f"{kind} value {value} outside [{low}, {high}]"
        raise ValueError(msg)
    if value < 0 and radix != 10:
        msg = f"{kind} value {value} is negative; base {radix} numbers are unsigned"
        raise ValueError(msg)


def _format_integer(value: int, radix: int) -> str:
    """Render an int in the given radix (lowercase digits, sign-magnitude)."""
    match radix:
        case 10:
            return str(value)
        case 16:
            return format(value, "x")
        case 8:
            return format(value, "o")
        case 2:
            return format(value, "b")
        case _:
            raise InvalidRadixError(ErrorTemplate.invalid_radix(radix))


def _format_double(value: float, flags: ParseFlags) -> str:
    """Render a double in the form its source literal was written in.

    Scientific literals keep exponential form: mantissa precision 0, or 1
    when the source also had a decimal point, and an exponent with no
    leading zeros ("1E+10", "1.0E-5"). Everything else renders positionally
    with at least one fractional digit ("1.0", never "1").
    """
    if not math.isfinite(value):
        return repr(value)

    if ParseFlags.HAS_SCIENTIFIC_NOTATION in flags:
        precision = 1 if ParseFlags.HAS_DECIMAL_POINT in flags else 0
        mantissa, _, exponent = format(value, f".{precision}E").partition("E")
        digits = exponent[1:].lstrip("0") or "0"
        return f"{mantissa}E{exponent[0]}{digits}"

    # repr() gives the shortest round-tripping digits; Decimal expands any
    # exponent it uses into plain positional notation.
    text = format(Decimal(repr(value)), "f")
    return text if DECIMAL_POINT in text else text + ".0"


@dataclass(frozen=True, slots=True)
class Int32Number:
    """32-bit signed integer in base 2, 8, 10 or 16.

    Attributes:
        value: Integer in [-2**31, 2**31 - 1]
        radix: Radix the number was written in (default 10)
        type: Optional user type annotation, excluded from equality
    """

    value: int
    radix: int = 10
    type: str | None = field(default=None, compare=False)

    kind: ClassVar[NumberKind] = NumberKind.INT32

    def __post_init__(self) -> None:
        """Validate radix and range.

        Raises:
            InvalidRadixError: If radix is not 2, 8, 10 or 16
            ValueError: If value does not fit 32 bits, or is negative in a
                non-decimal radix
        """
        _check_radix(self.radix)
        _check_integer(self.kind, self.value, self.radix, INT32_MIN, INT32_MAX)

    def as_basic_string(self, radix: int = 10) -> str:
        """Render digits only (no prefix) in the requested radix."""
        return _format_integer(self.value, radix)

    def __str__(self) -> str:
        return self.as_basic_string()


@dataclass(frozen=True, slots=True)
class Int64Number:
    """64-bit signed integer in base 2, 8, 10 or 16.

    Attributes:
        value: Integer in [-2**63, 2**63 - 1]
        radix: Radix the number was written in (default 10)
        type: Optional user type annotation, excluded from equality
    """

    value: int
    radix: int = 10
    type: str | None = field(default=None, compare=False)

    kind: ClassVar[NumberKind] = NumberKind.INT64

    def __post_init__(self) -> None:
        """Validate radix and range.

        Raises:
            InvalidRadixError: If radix is not 2, 8, 10 or 16
            ValueError: If value does not fit 64 bits, or is negative in a
                non-decimal radix
        """
        _check_radix(self.radix)
        _check_integer(self.kind, self.value, self.radix, INT64_MIN, INT64_MAX)

    def as_basic_string(self, radix: int = 10) -> str:
        """Render digits only (no prefix) in the requested radix."""
        return _format_integer(self.value, radix)

    def __str__(self) -> str:
        return self.as_basic_string()


@dataclass(frozen=True, slots=True)
class BigIntNumber:
    """Arbitrary-precision integer read from a base 10 or base 16 literal.

    Rendering is base 10 only; asking for any other radix raises
    UnsupportedRadixError instead of producing truncated digits.

    Attributes:
        value: Integer of any magnitude
        radix: Radix the number was written in (10 or 16)
        type: Optional user type annotation, excluded from equality
    """

    value: int
    radix: int = 10
    type: str | None = field(default=None, compare=False)

    kind: ClassVar[NumberKind] = NumberKind.BIGINT

    def __post_init__(self) -> None:
        """Validate radix and sign.

        Raises:
            InvalidRadixError: If radix is not 10 or 16
            ValueError: If value is negative with radix 16
        """
        _check_radix(self.radix)
        if self.radix not in BIGINT_PARSE_RADIXES:
            raise InvalidRadixError(
                ErrorTemplate.variant_radix_unsupported(self.kind, self.radix)
            )
        if self.value < 0 and self.radix != 10:
            msg = f"{self.kind} value is negative; base {self.radix} numbers are unsigned"
            raise ValueError(msg)

    def as_basic_string(self, radix: int = 10) -> str:
        """Render base 10 digits.

        Raises:
            UnsupportedRadixError: If radix is not 10
        """
        if radix not in BIGINT_RENDER_RADIXES:
            raise UnsupportedRadixError(
                ErrorTemplate.render_radix_unsupported(self.kind, radix)
            )
        # str() refuses ints past CPython's max_str_digits; Decimal does not.
        return format(Decimal(self.value), "f")

    def __str__(self) -> str:
        return self.as_basic_string()


@dataclass(frozen=True, slots=True)
class Float64Number:
    """IEEE double written as a base 10 literal.

    The flags record whether the source literal had a decimal point and/or
    an exponent. They select the rendering form and are part of the value's
    immutable state, but not of its identity: 1.0 and 1E+0 compare equal.

    Attributes:
        value: The double
        radix: Always 10
        type: Optional user type annotation, excluded from equality
        flags: Lexical flags captured at parse time, excluded from equality

    Example:
        >>> str(Float64Number(1e10, flags=ParseFlags.HAS_SCIENTIFIC_NOTATION))
        '1E+10'
        >>> str(Float64Number(1e10))
        '10000000000.0'
    """

    value: float
    radix: int = 10
    type: str | None = field(default=None, compare=False)
    flags: ParseFlags = field(default=ParseFlags.NONE, compare=False)

    kind: ClassVar[NumberKind] = NumberKind.FLOAT64

    def __post_init__(self) -> None:
        """Coerce value to float and validate radix.

        Raises:
            InvalidRadixError: If radix is not 10
            UnsupportedMagnitudeError: If value is an int too large for a double
        """
        _check_radix(self.radix)
        if self.radix not in FLOAT_RADIXES:
            raise InvalidRadixError(
                ErrorTemplate.variant_radix_unsupported(self.kind, self.radix)
            )
        try:
            value = float(self.value)
        except OverflowError as e:
            raise UnsupportedMagnitudeError(ErrorTemplate.double_value_overflow()) from e
        object.__setattr__(self, "value", value)

    def as_basic_string(self, radix: int = 10) -> str:
        """Render in the form chosen by the lexical flags.

        Raises:
            UnsupportedRadixError: If radix is not 10
        """
        if radix not in FLOAT_RADIXES:
            raise UnsupportedRadixError(
                ErrorTemplate.render_radix_unsupported(self.kind, radix)
            )
        return _format_double(self.value, self.flags)

    def __str__(self) -> str:
        return self.as_basic_string()


# Closed union of storage variants. Consumers match on it exhaustively.
type KDLNumber = Int32Number | Int64Number | BigIntNumber | Float64Number


def is_kdl_number(obj: object) -> TypeIs[KDLNumber]:
    """Type guard for any KDL number variant."""
    return isinstance(obj, (Int32Number, Int64Number, BigIntNumber, Float64Number))


def from_int32(value: int, radix: int = 10, type: str | None = None) -> Int32Number:  # noqa: A002
    """Build an Int32Number directly (no text involved)."""
    return Int32Number(value, radix, type)


def from_int64(value: int, radix: int = 10, type: str | None = None) -> Int64Number:  # noqa: A002
    """Build an Int64Number directly (no text involved)."""
    return Int64Number(value, radix, type)


def from_bigint(value: int, radix: int = 10, type: str | None = None) -> BigIntNumber:  # noqa: A002
    """Build a BigIntNumber directly (no text involved)."""
    return BigIntNumber(value, radix, type)


def from_double(
    value: float, radix: int = 10, type: str | None = None  # noqa: A002
) -> Float64Number:
    """Build a Float64Number directly (no text involved).

    Programmatic doubles carry no lexical flags and render positionally.

    Raises:
        UnsupportedMagnitudeError: If value is an int too large for a double
    """
    return Float64Number(value, radix, type)


def zero(radix: int, type: str | None = None) -> Int32Number:  # noqa: A002
    """Canonical zero for a radix.

    Args:
        radix: One of 2, 8, 10, 16
        type: Optional user type annotation

    Returns:
        Int32Number(0, radix, type)

    Raises:
        InvalidRadixError: If radix is not 2, 8, 10 or 16

    Example:
        >>> zero(16)
        Int32Number(value=0, radix=16, type=None)
    """
    _check_radix(radix)
    return Int32Number(0, radix, type)
