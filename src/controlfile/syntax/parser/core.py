"""Core control-file parser implementation.

This module provides the ControlParser class that splits control text into
paragraphs of fields.

Architecture:
    The parser uses an immutable cursor pattern
    (:class:`~controlfile.syntax.cursor.Cursor`) to traverse source text.
    Each reader (in :mod:`~controlfile.syntax.parser.fields` and here)
    returns a :class:`~controlfile.syntax.cursor.ParseResult` containing
    the parsed value and updated cursor position, or raises a
    :class:`~controlfile.diagnostics.ControlSyntaxError`.

Grammar:
    document  ::= blank? (paragraph blank?)*
    paragraph ::= field+
    field     ::= name ":" blank_inline? value
    name      ::= [A-Za-z0-9-]+

Failure Model:
    All-or-nothing. The first malformed field name or duplicate field
    aborts the whole parse; no partial document is ever returned.

Security:
    Includes configurable input size limit to prevent DoS via unbounded
    memory allocation from extremely large inputs.
"""

from controlfile.constants import MAX_SOURCE_SIZE
from controlfile.diagnostics import DuplicateFieldError, ErrorTemplate
from controlfile.syntax.cursor import Cursor, ParseResult, is_line_end
from controlfile.syntax.parser.fields import read_field_name, read_field_value
from controlfile.syntax.parser.whitespace import skip_blank
from controlfile.types import Document, Paragraph

__all__ = ["ControlParser", "parse_paragraph"]


def parse_paragraph(cursor: Cursor) -> ParseResult[Paragraph]:
    """Parse one paragraph: consecutive fields up to a blank line or EOF.

    Field names are compared exactly; 'Version' and 'version' are two
    distinct fields.

    Args:
        cursor: Position at the first character of the first field name

    Returns:
        ParseResult with the paragraph (fields in source order) and the
        cursor at the terminator of the blank line that ended it, or EOF

    Raises:
        MalformedFieldNameError: If a field name is not followed by ':'
        DuplicateFieldError: If a field name repeats within the paragraph
    """
    fields: Paragraph = {}
    while True:
        name_start = cursor
        name_result = read_field_name(cursor)
        name = name_result.value

        if name in fields:
            diagnostic = ErrorTemplate.duplicate_field(
                name, name_start.to_span(name_start.pos + len(name))
            )
            raise DuplicateFieldError(diagnostic, name_start.pos, name)

        value_result = read_field_value(name_result.cursor)
        fields[name] = value_result.value
        cursor = value_result.cursor

        if is_line_end(cursor.peek()):
            return ParseResult(fields, cursor)


class ControlParser:
    """Control-file parser using immutable cursor pattern.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Errors carry a Diagnostic with line:column of the failure
    - Instances hold only configuration and are safe to share across threads

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MiB characters

    Attributes:
        max_source_size: Maximum allowed source size in characters
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                             Set to 0 to disable the limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> Document:
        """Parse control text into its paragraphs.

        Blank characters (spaces, tabs, CR, LF) between paragraphs are
        skipped, so leading and trailing blank runs are ignored.

        Args:
            source: Decoded control text

        Returns:
            List of paragraphs in source order (possibly empty)

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            MalformedFieldNameError: If a field name is not followed by ':'
            DuplicateFieldError: If a field repeats within one paragraph

        Example:
            >>> ControlParser().parse("Source: zlib\\nVersion: 1.2.11\\n")
            [{'Source': 'zlib', 'Version': '1.2.11'}]
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in ControlParser constructor to increase limit."
            )
            raise ValueError(msg)

        cursor = Cursor(source, 0)
        paragraphs: Document = []

        while not cursor.is_eof:
            cursor = skip_blank(cursor)
            if cursor.is_eof:
                break

            result = parse_paragraph(cursor)
            paragraphs.append(result.value)
            cursor = result.cursor

        return paragraphs
