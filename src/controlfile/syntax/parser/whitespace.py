"""Whitespace handling utilities for the control-file scanner.

Two kinds of whitespace matter to the grammar:
    blank_inline ::= (" " | "\\t")+
    blank        ::= (" " | "\\t" | "\\r" | "\\n")+

blank_inline separates a field name's colon from its value and indents
continuation lines. blank separates paragraphs.
"""

from controlfile.syntax.cursor import Cursor

_BLANK_CHARS: tuple[str, ...] = (" ", "\t", "\r", "\n")


def skip_blank_inline(cursor: Cursor) -> Cursor:
    """Skip spaces and tabs on the current line.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-space, non-tab character (or EOF)
    """
    return cursor.skip_horizontal_whitespace()


def skip_blank(cursor: Cursor) -> Cursor:
    """Skip a run of blank characters between paragraphs.

    Accepts spaces, tabs, CR and LF in any combination, so runs of blank
    lines with trailing whitespace and mixed line endings are all consumed.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-blank character (or EOF)
    """
    c = cursor
    while not c.is_eof and c.current in _BLANK_CHARS:
        c = c.advance()
    return c
