"""Immutable cursor infrastructure for the control-file scanner.

Implements the immutable cursor pattern with one character of lookahead.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), and peek() reports it as None
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Fully supported
    - CR-only (Classic Mac, \\r): Accepted as a line terminator by
      skip_line_end(); compute_line_col() counts only \\n, so line numbers
      in diagnostics for CR-only files are reported as line 1.

Character Classes:
    Field names are ASCII only. is_alphanumeric() deliberately does not use
    str.isalnum(), which accepts any Unicode letter or digit.
"""

from dataclasses import dataclass

from controlfile.diagnostics import SourceSpan

__all__ = [
    "Cursor",
    "ParseResult",
    "is_alphanumeric",
    "is_field_name_char",
    "is_line_end",
]

_ASCII_ALPHANUMERIC: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)

_HORIZONTAL_WHITESPACE: tuple[str, str] = (" ", "\t")


def is_alphanumeric(ch: str | None) -> bool:
    """Check for an ASCII letter or digit. None (EOF) is never alphanumeric."""
    return ch is not None and ch in _ASCII_ALPHANUMERIC


def is_field_name_char(ch: str | None) -> bool:
    """Check for a character allowed inside a field name: [A-Za-z0-9-]."""
    return ch == "-" or is_alphanumeric(ch)


def is_line_end(ch: str | None) -> bool:
    """Check for a line terminator: CR, LF, or end of input (None)."""
    return ch is None or ch in ("\r", "\n")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency
        3. Simple position - Just an integer offset
        4. EOF is a property - peek() returns None there

    Example:
        >>> cursor = Cursor("Source: zlib", 0)
        >>> cursor.peek()
        'S'
        >>> cursor.advance().peek()
        'o'
        >>> cursor.peek()  # Original unchanged (immutability)
        'S'
        >>> Cursor("ab", 2).peek() is None
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
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
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self) -> str | None:
        """Return the current character, or None at end of input.

        The scanner's single character of lookahead. Never mutates and
        never raises.
        """
        if self.is_eof:
            return None
        return self.source[self.pos]

    def advance(self) -> "Cursor":
        """Return new cursor advanced by one position.

        Clamped at end of input: advancing an EOF cursor returns an
        equivalent EOF cursor.

        Example:
            >>> cursor = Cursor("ab", 0)
            >>> cursor.advance().pos
            1
            >>> Cursor("ab", 2).advance().pos
            2
        """
        new_pos = min(self.pos + 1, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_from(self, start_pos: int) -> str:
        """Extract source text from start_pos up to the current position.

        Example:
            >>> start = Cursor("Version: 1.2", 0)
            >>> end = start.skip_to_line_end()
            >>> end.slice_from(start.pos)
            'Version: 1.2'
        """
        return self.source[start_pos : self.pos]

    def skip_horizontal_whitespace(self) -> "Cursor":
        """Skip space (U+0020) and tab (U+0009) characters.

        Stops at any other character, including CR/LF, and at end of input.

        Example:
            >>> Cursor(" \\t x", 0).skip_horizontal_whitespace().pos
            3
            >>> Cursor("   ", 0).skip_horizontal_whitespace().is_eof
            True
        """
        c = self
        while not c.is_eof and c.source[c.pos] in _HORIZONTAL_WHITESPACE:
            c = c.advance()
        return c

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line terminator.

        Returns:
            New cursor positioned at \\r, \\n, or end of input (the
            terminator itself is not consumed).
        """
        c = self
        while not c.is_eof and c.source[c.pos] not in ("\n", "\r"):
            c = c.advance()
        return c

    def skip_line_end(self) -> "Cursor":
        """Consume a CR if present, then an LF if present.

        Handles:
            - LF (\\n): Skip 1 character
            - CRLF (\\r\\n): Skip 2 characters
            - CR (\\r): Skip 1 character

        Returns:
            New cursor past the terminator, or unchanged if not at one.

        Example:
            >>> Cursor("a\\r\\nb", 1).skip_line_end().pos
            3
        """
        cursor = self
        if cursor.peek() == "\r":
            cursor = cursor.advance()
        if cursor.peek() == "\n":
            cursor = cursor.advance()
        return cursor

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> cursor = Cursor("A: 1\\nB 2", 7)
            >>> cursor.compute_line_col()
            (2, 2)
        """
        pos = min(self.pos, len(self.source))
        line = self.source.count("\n", 0, pos) + 1
        last_newline = self.source.rfind("\n", 0, pos)
        col = pos - last_newline if last_newline >= 0 else pos + 1
        return (line, col)

    def to_span(self, end_pos: int | None = None) -> SourceSpan:
        """Build a SourceSpan starting at this cursor.

        Args:
            end_pos: Exclusive end offset (defaults to one character, or
                zero width at end of input)
        """
        start = min(self.pos, len(self.source))
        if end_pos is None:
            end_pos = start if self.is_eof else start + 1
        line, col = self.compute_line_col()
        return SourceSpan(start=start, end=end_pos, line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every reader has signature:
            def read_foo(cursor: Cursor) -> ParseResult[Foo]:
                ...
                return ParseResult(parsed_value, new_cursor)

        Failures are raised as ControlSyntaxError subclasses.

    Example:
        >>> result = ParseResult("zlib", Cursor("zlib\\n", 4))
        >>> result.value
        'zlib'
        >>> result.cursor.peek()
        '\\n'
    """

    value: T
    cursor: Cursor
