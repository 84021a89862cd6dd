"""Immutable cursor infrastructure for type-safe literal scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from collections.abc import Callable
from dataclasses import dataclass

from kdlnumbers.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("0x1F", 0)
        >>> cursor.current
        '0'
        >>> cursor.advance(2).current
        '1'
        >>> cursor.current  # Original unchanged (immutability)
        '0'
        >>> Cursor("12", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input. Check is_eof first.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("-5", 0).expect("-").pos
            1
            >>> Cursor("5", 0).expect("-") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def skip_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """Return cursor advanced past every consecutive character matching predicate."""
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return c

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor and slice once scanning is done:

            >>> start = Cursor("123abc", 0)
            >>> end = start.skip_while(str.isdigit)
            >>> start.slice_to(end.pos)
            '123'
        """
        return self.source[self.pos : end_pos]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing scanned value and new cursor position.

    Type Parameters:
        T: The type of the scanned value

    Example:
        >>> cursor = Cursor("42", 0)
        >>> result = ParseResult("4", cursor.advance())
        >>> result.value
        '4'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
