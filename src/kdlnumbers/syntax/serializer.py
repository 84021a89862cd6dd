"""Serialize KDL numbers back to literal text.

Converts number values to the text a KDL document writer emits. Useful for:
- Document writers and formatters
- Property-based testing (roundtrip: parse → serialize → parse)

Python 3.13+.
"""

import logging
from typing import TextIO

from kdlnumbers.constants import RADIX_PREFIXES
from kdlnumbers.syntax.print_config import PrintConfig
from kdlnumbers.value_types import (
    BigIntNumber,
    Float64Number,
    Int32Number,
    Int64Number,
    KDLNumber,
)

__all__ = ["serialize_number", "write_number"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = PrintConfig()


def serialize_number(number: KDLNumber, config: PrintConfig | None = None) -> str:
    """Serialize a number to KDL literal text.

    With ``respect_radix`` (the default), integers written in base 2, 8 or 16
    get their "0b"/"0o"/"0x" prefix and are rendered in that radix. Base 10
    output has its exponent marker replaced by ``config.exponent_char``.

    BigInt values only render in base 10, so a base 16 BigInt is written
    as plain base 10 digits (same value, no prefix).

    Args:
        number: Number to serialize
        config: Output options (default: PrintConfig())

    Returns:
        Literal text

    Example:
        >>> from kdlnumbers import parse_number
        >>> serialize_number(parse_number("0x1F"))
        '0x1f'
        >>> serialize_number(parse_number("0x1F"), PrintConfig(respect_radix=False))
        '31'
    """
    if config is None:
        config = _DEFAULT_CONFIG

    match number:
        case Int32Number() | Int64Number():
            if config.respect_radix and number.radix != 10:
                return RADIX_PREFIXES[number.radix] + number.as_basic_string(number.radix)
            return number.as_basic_string()
        case BigIntNumber():
            if config.respect_radix and number.radix != 10:
                logger.debug(
                    "Writing base %d bigint in base 10; bigint rendering is base 10 only",
                    number.radix,
                )
            return number.as_basic_string()
        case Float64Number():
            return number.as_basic_string().replace("E", config.exponent_char)


def write_number(
    number: KDLNumber, stream: TextIO, config: PrintConfig | None = None
) -> None:
    """Write a number's literal text to a text stream.

    Args:
        number: Number to write
        stream: Destination (file, io.StringIO, ...)
        config: Output options (default: PrintConfig())
    """
    stream.write(serialize_number(number, config))
