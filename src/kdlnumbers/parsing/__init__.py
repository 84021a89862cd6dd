"""Literal parsing: KDL number text to typed values.

- Functions NEVER raise for malformed text - they return None
- Capability failures (too large for the format) raise KDLError subclasses

Public API:
    parse_number - Full literal (prefix included) -> KDLNumber | None
    parse_literal - Prefix-stripped text + radix + flags -> KDLNumber | None
    scan_flags - Lexical flags of a literal's text

Example:
    >>> from kdlnumbers.parsing import parse_number
    >>> parse_number("0b1010")
    Int32Number(value=10, radix=2, type=None)

Python 3.13+.
"""

from .literals import parse_literal, parse_number, scan_flags

__all__ = [
    "parse_literal",
    "parse_number",
    "scan_flags",
]
