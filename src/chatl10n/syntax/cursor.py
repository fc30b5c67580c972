"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)

Line Ending Support:
    \\n is the line delimiter. CRLF text works because the \\n is still
    present; CR-only text reports every position on line 1.
"""

from dataclasses import dataclass

from chatl10n.diagnostics import ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseResult"]

# Whitespace allowed between tokens inside ${ }.
_EXPRESSION_WHITESPACE: frozenset[str] = frozenset({" ", "\t", "\n", "\r"})


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
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
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Example:
            >>> Cursor("hello", 0).slice_ahead(3)
            'hel'
            >>> Cursor("hello", 0).slice_ahead(10)  # More than available
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def starts_with(self, text: str) -> bool:
        """Check if the source continues with text at the current position."""
        return self.source.startswith(text, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip whitespace characters (space, tab, newline, carriage return).

        Example:
            >>> Cursor("  \\t hello", 0).skip_whitespace().pos
            4
        """
        c = self
        while not c.is_eof and c.current in _EXPRESSION_WHITESPACE:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("(x)", 0).expect("(").pos
            1
            >>> Cursor("x", 0).expect("(") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end_pos: int | None = None) -> SourceSpan:
        """Build a diagnostic span from this position to end_pos.

        Args:
            end_pos: End offset (exclusive). Defaults to one character past
                the current position, clamped to the source length.
        """
        if end_pos is None:
            end_pos = min(self.pos + 1, len(self.source))
        line, column = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end_pos, self.pos), line=line, column=column)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
