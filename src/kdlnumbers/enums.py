"""Enumerations for kdlnumbers type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import Flag, StrEnum, auto


class NumberKind(StrEnum):
    """Native storage used by a KDL number.

    StrEnum provides automatic string conversion: str(NumberKind.INT32) == "int32"
    """

    INT32 = "int32"
    """32-bit signed integer: the fast path for small literals"""

    INT64 = "int64"
    """64-bit signed integer: overflow fallback from INT32"""

    BIGINT = "bigint"
    """Arbitrary-precision integer: overflow fallback from INT64 (base 10 and 16)"""

    FLOAT64 = "float64"
    """IEEE double: base 10 literals with a decimal point or an exponent"""


class ParseFlags(Flag):
    """Lexical features seen in a literal's source text.

    Captured once by the literal parser and stored on Float64 values so the
    writer can reproduce the original form. The flags never affect the
    numeric value itself.
    """

    NONE = 0
    HAS_DECIMAL_POINT = auto()
    """The literal contained '.'"""

    HAS_SCIENTIFIC_NOTATION = auto()
    """The literal contained 'e' or 'E'"""


__all__ = [
    "NumberKind",
    "ParseFlags",
]
