"""Hypothesis strategies for kdlnumbers property-based testing.

Usage:
    from tests.strategies import radix_literals, int32_values
    from tests.strategies.numbers import to_literal
"""

from .numbers import (
    RADIXES,
    beyond_int64_values,
    decimal_point_literals,
    int32_values,
    int64_only_values,
    non_negative_int32_values,
    non_negative_int64_only_values,
    radix_literals,
    radixes,
    scientific_literals,
    separated_digits,
    to_literal,
    width_of,
)

__all__ = [
    "RADIXES",
    "beyond_int64_values",
    "decimal_point_literals",
    "int32_values",
    "int64_only_values",
    "non_negative_int32_values",
    "non_negative_int64_only_values",
    "radix_literals",
    "radixes",
    "scientific_literals",
    "separated_digits",
    "to_literal",
    "width_of",
]
