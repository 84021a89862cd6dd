"""Print configuration for writing KDL numbers.

Provides a single frozen dataclass that encapsulates the number-related
options of a KDL document writer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from kdlnumbers.constants import DEFAULT_EXPONENT_CHAR, EXPONENT_CHARS

__all__ = ["PrintConfig"]


@dataclass(frozen=True, slots=True)
class PrintConfig:
    """Immutable configuration for number output.

    All fields have defaults; ``PrintConfig()`` reproduces literals as they
    were written.

    Attributes:
        respect_radix: Write non-decimal numbers with their "0b"/"0o"/"0x"
            prefix in their own radix (default: True). If False, every
            number is written in base 10.
        exponent_char: Exponent marker written for scientific doubles,
            "E" or "e" (default: "E").

    Example:
        >>> from kdlnumbers import parse_number, serialize_number
        >>> config = PrintConfig(exponent_char="e")
        >>> serialize_number(parse_number("1.5e-3"), config)
        '1.5e-3'
    """

    respect_radix: bool = True
    exponent_char: str = DEFAULT_EXPONENT_CHAR

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If exponent_char is not "e" or "E"
        """
        if self.exponent_char not in EXPONENT_CHARS:
            msg = f"exponent_char must be 'e' or 'E', got {self.exponent_char!r}"
            raise ValueError(msg)
