"""Shared constants for kdlnumbers.

This module provides centralized constants used across the value, parsing
and syntax packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Width limits: Range of the fixed-width integer variants
- Radix tables: Which radices each variant accepts and how they are spelled
- Output: Exponent markers accepted by the writer

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Width limits
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    # Radix tables
    "SUPPORTED_RADIXES",
    "BIGINT_PARSE_RADIXES",
    "BIGINT_RENDER_RADIXES",
    "FLOAT_RADIXES",
    "RADIX_PREFIXES",
    "PREFIX_RADIXES",
    # Lexical markers
    "DIGIT_SEPARATOR",
    "DECIMAL_POINT",
    "EXPONENT_MARKERS",
    # Output
    "DEFAULT_EXPONENT_CHAR",
    "EXPONENT_CHARS",
]

# ============================================================================
# WIDTH LIMITS
# ============================================================================

# Two's complement bounds of the fixed-width variants.
# Python ints are unbounded, so these are enforced explicitly.
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# ============================================================================
# RADIX TABLES
# ============================================================================

# Every radix a KDL number literal can be written in.
SUPPORTED_RADIXES: frozenset[int] = frozenset({2, 8, 10, 16})

# Radices the cascade may fall back to BigInt in.
# Binary and octal literals wider than Int64 are rejected outright.
BIGINT_PARSE_RADIXES: frozenset[int] = frozenset({10, 16})

# BigInt rendering is base 10 only.
BIGINT_RENDER_RADIXES: frozenset[int] = frozenset({10})

# Floating point literals only exist in base 10.
FLOAT_RADIXES: frozenset[int] = frozenset({10})

# Conventional literal prefix per non-decimal radix (writer side).
RADIX_PREFIXES: dict[int, str] = {
    2: "0b",
    8: "0o",
    16: "0x",
}

# Character following a leading "0" mapped to the radix it selects (reader side).
PREFIX_RADIXES: dict[str, int] = {
    "b": 2,
    "o": 8,
    "x": 16,
}

# ============================================================================
# LEXICAL MARKERS
# ============================================================================

# Separator allowed between digits ("1_000"); carries no value.
DIGIT_SEPARATOR: str = "_"

DECIMAL_POINT: str = "."

# Characters that introduce an exponent in a base 10 literal.
EXPONENT_MARKERS: frozenset[str] = frozenset({"e", "E"})

# ============================================================================
# OUTPUT
# ============================================================================

# Exponent marker emitted by the writer unless configured otherwise.
DEFAULT_EXPONENT_CHAR: str = "E"

# Exponent markers a writer may be configured with; both re-parse.
EXPONENT_CHARS: frozenset[str] = frozenset({"e", "E"})
