"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

# Literals longer than this are shortened inside messages.
_MAX_LITERAL_PREVIEW: int = 40


def _preview(literal: str) -> str:
    if len(literal) <= _MAX_LITERAL_PREVIEW:
        return literal
    return literal[:_MAX_LITERAL_PREVIEW] + "..."


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def invalid_radix(radix: int) -> Diagnostic:
        """Radix outside {2, 8, 10, 16}.

        Args:
            radix: The rejected radix

        Returns:
            Diagnostic for INVALID_RADIX
        """
        msg = f"Radix must be one of: [2, 8, 10, 16], got {radix}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RADIX,
            message=msg,
            hint="KDL numbers are written in binary, octal, decimal or hexadecimal",
            radix=radix,
        )

    @staticmethod
    def variant_radix_unsupported(kind: str, radix: int) -> Diagnostic:
        """Radix valid for KDL but not for this storage variant.

        Args:
            kind: NumberKind value of the variant
            radix: The rejected radix

        Returns:
            Diagnostic for INVALID_RADIX
        """
        msg = f"{kind} numbers cannot be stored with radix {radix}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RADIX,
            message=msg,
            hint="float64 values are base 10 only; bigint values are base 10 or 16",
            radix=radix,
        )

    @staticmethod
    def magnitude_unsupported(literal: str, radix: int) -> Diagnostic:
        """Integer literal wider than Int64 in a radix BigInt cannot parse.

        Args:
            literal: Digit text of the literal (prefix stripped)
            radix: Radix the literal is written in

        Returns:
            Diagnostic for UNSUPPORTED_MAGNITUDE
        """
        msg = f"Base {radix} literal '{_preview(literal)}' exceeds signed 64-bit range"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_MAGNITUDE,
            message=msg,
            hint="Write the value in base 10 or base 16",
            literal=literal,
            radix=radix,
        )

    @staticmethod
    def double_overflow(literal: str) -> Diagnostic:
        """Floating point literal too large for an IEEE double.

        Args:
            literal: The literal text

        Returns:
            Diagnostic for UNSUPPORTED_MAGNITUDE
        """
        msg = f"Literal '{_preview(literal)}' overflows a 64-bit float"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_MAGNITUDE,
            message=msg,
            hint="Doubles hold magnitudes up to about 1.8E+308",
            literal=literal,
            radix=10,
        )

    @staticmethod
    def double_value_overflow() -> Diagnostic:
        """Integer value too large to convert to an IEEE double.

        Returns:
            Diagnostic for UNSUPPORTED_MAGNITUDE
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_MAGNITUDE,
            message="Integer value overflows a 64-bit float",
            hint="Store the value with from_bigint() instead",
            radix=10,
        )

    @staticmethod
    def render_radix_unsupported(kind: str, radix: int) -> Diagnostic:
        """Rendering requested in a radix the variant cannot produce.

        Args:
            kind: NumberKind value of the variant
            radix: The requested radix

        Returns:
            Diagnostic for UNSUPPORTED_RENDER_RADIX
        """
        msg = f"{kind} numbers can only be rendered in base 10, not base {radix}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_RENDER_RADIX,
            message=msg,
            hint="Render with radix=10",
            radix=radix,
        )

    @staticmethod
    def malformed_literal(literal: str, radix: int, reason: str) -> Diagnostic:
        """Text that is not a number in the given radix.

        Args:
            literal: Digit text that failed to parse
            radix: Radix the text was read in
            reason: Scanner or conversion failure description

        Returns:
            Diagnostic for MALFORMED_LITERAL
        """
        msg = f"Not a base {radix} number '{_preview(literal)}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_LITERAL,
            message=msg,
            literal=literal,
            radix=radix,
            severity="warning",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check for an incomplete literal",
        )
