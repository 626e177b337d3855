"""Field readers for the control-file scanner.

A field is a name, a colon, optional inline whitespace, and a value that
may continue over several physical lines:

    Build-Depends: zlib,
     openssl

Value Continuation:
    After each physical line the reader looks at the next line without
    committing to it:

    - starts with [A-Za-z0-9]   -> next field begins; value ends
    - blank (only " "/"\\t")     -> paragraph ends; value ends
    - anything else             -> continuation; joined with a single "\\n"

    The first line of a value never carries leading whitespace (it was
    skipped after the colon) while continuation lines keep theirs
    verbatim. Downstream consumers rely on this asymmetry, so both
    readers must keep it exact.
"""

from controlfile.diagnostics import ErrorTemplate, MalformedFieldNameError
from controlfile.syntax.cursor import (
    Cursor,
    ParseResult,
    is_alphanumeric,
    is_field_name_char,
    is_line_end,
)
from controlfile.syntax.parser.whitespace import skip_blank_inline

__all__ = ["read_field_name", "read_field_value"]


def read_field_name(cursor: Cursor) -> ParseResult[str]:
    """Read a field name and its terminating colon.

    Consumes [A-Za-z0-9-]+ followed by ':' and any spaces or tabs after
    it, leaving the cursor at the first character of the value.

    Args:
        cursor: Position at the first character of the name

    Returns:
        ParseResult with the field name and cursor at the value

    Raises:
        MalformedFieldNameError: If the name is empty or not followed by ':'
    """
    start_pos = cursor.pos
    while is_field_name_char(cursor.peek()):
        cursor = cursor.advance()

    if cursor.peek() != ":" or cursor.pos == start_pos:
        diagnostic = ErrorTemplate.malformed_field_name(cursor.peek(), cursor.to_span())
        raise MalformedFieldNameError(diagnostic, cursor.pos)

    name = cursor.slice_from(start_pos)
    cursor = skip_blank_inline(cursor.advance())
    return ParseResult(name, cursor)


def read_field_value(cursor: Cursor) -> ParseResult[str]:
    """Read a field value, following continuation lines.

    Line terminators (LF, CRLF, CR) are never stored; joins between
    physical lines are always a single "\\n".

    Args:
        cursor: Position at the first character of the value

    Returns:
        ParseResult with the value. The cursor is either at the first
        character of the next field name, or at the line terminator (or
        EOF) of the blank line that ends the paragraph.
    """
    parts: list[str] = []
    line_start = cursor.pos
    while True:
        cursor = cursor.skip_to_line_end()
        parts.append(cursor.slice_from(line_start))
        cursor = cursor.skip_line_end()

        if is_alphanumeric(cursor.peek()):
            break

        line_start = cursor.pos
        cursor = skip_blank_inline(cursor)
        if is_line_end(cursor.peek()):
            break

        parts.append("\n")

    return ParseResult("".join(parts), cursor)
