"""Control-file syntax package.

Provides the immutable cursor and the paragraph/field parser.
Separate from loading and repository layers so tooling can parse text
without touching the filesystem.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult, is_alphanumeric, is_field_name_char, is_line_end
from .parser import ControlParser, parse_paragraph, read_field_name, read_field_value

__all__ = [
    "ControlParser",
    "Cursor",
    "ParseResult",
    "is_alphanumeric",
    "is_field_name_char",
    "is_line_end",
    "parse_paragraph",
    "read_field_name",
    "read_field_value",
]
