"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Capability errors (the number format cannot express a value)
        2000-2999: Literal errors (text that is not a number)
    """

    # Capability errors (1000-1999)
    INVALID_RADIX = 1001
    UNSUPPORTED_MAGNITUDE = 1002
    UNSUPPORTED_RENDER_RADIX = 1003

    # Literal errors (2000-2999)
    # Malformed literals are reported to callers as None, never raised;
    # these codes label the scanner context that gets logged.
    MALFORMED_LITERAL = 2001
    UNEXPECTED_EOF = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        literal: Source text of the literal involved (if any)
        radix: Radix involved in the failure (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    literal: str | None = None
    radix: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNSUPPORTED_MAGNITUDE]: Base 2 literal '1111...' exceeds signed 64-bit range
              = literal: 1111...
              = radix: 2
              = help: Write the value in base 10 or base 16

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
