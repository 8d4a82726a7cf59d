"""Immutable cursor infrastructure for single-pass scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - The unconsumed text is always available as rest()

Input Model:
    The source is a str. Callers scanning bytes decode them as latin-1 first,
    which maps every byte to exactly one character and back.
"""

from dataclasses import dataclass

from radixint.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("34.5", 0)
        >>> cursor.current
        '3'
        >>> cursor.advance(2).rest()
        '.5'
        >>> cursor.current  # Original unchanged (immutability)
        '3'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

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

    def rest(self) -> str:
        """Return the unconsumed source from the current position."""
        return self.source[self.pos :]
