"""KDL number exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Only capability failures are raised; text that is not a number is
reported as None by the parser instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class KDLError(Exception):
    """Base exception for all kdlnumbers errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize KDLError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidRadixError(KDLError):
    """Radix outside the set a KDL number can be written in.

    Only 2, 8, 10 and 16 are valid. Raised by zero(), the variant
    constructors and integer rendering.
    """


class UnsupportedMagnitudeError(KDLError):
    """Literal is well formed but too large for the number format.

    Examples:
    - Binary or octal literal wider than signed 64 bits
    - Double literal that overflows to infinity

    Distinct from a malformed literal: the text IS a number, this
    implementation just cannot hold it.
    """


class UnsupportedRadixError(KDLError):
    """Value cannot be rendered in the requested radix.

    BigInt values render in base 10 only and doubles only exist in base 10.
    """
