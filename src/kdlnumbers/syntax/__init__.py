"""KDL number syntax package.

Provides character classes, the literal scanner and serialization.
Separate from value types to enable tooling (tokenizers, formatters).

Python 3.13+.
"""

from .char_classes import (
    digit_predicate,
    is_valid_binary_char,
    is_valid_decimal_char,
    is_valid_hex_char,
    is_valid_numeric_start,
    is_valid_octal_char,
    is_valid_sign_char,
)
from .cursor import Cursor, ParseResult
from .primitives import (
    ParseErrorContext,
    clear_parse_error,
    get_last_parse_error,
    is_well_formed,
    parse_decimal_literal,
    parse_digits,
    parse_number_literal,
)
from .print_config import PrintConfig
from .serializer import serialize_number, write_number

__all__ = [
    "Cursor",
    "ParseErrorContext",
    "ParseResult",
    "PrintConfig",
    "clear_parse_error",
    "digit_predicate",
    "get_last_parse_error",
    "is_valid_binary_char",
    "is_valid_decimal_char",
    "is_valid_hex_char",
    "is_valid_numeric_start",
    "is_valid_octal_char",
    "is_valid_sign_char",
    "is_well_formed",
    "parse_decimal_literal",
    "parse_digits",
    "parse_number_literal",
    "serialize_number",
    "write_number",
]
