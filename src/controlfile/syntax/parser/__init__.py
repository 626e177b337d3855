"""Control-file parser module.

This module provides the ControlParser class and the field/paragraph
readers it is built from, organized into focused submodules.

Module Organization:
- core.py: ControlParser class, parse() entry point and parse_paragraph()
- fields.py: Field-name and field-value readers (continuation handling)
- whitespace.py: Inline and inter-paragraph whitespace skipping

Public API:
    ControlParser: Main parser class
    parse_paragraph: Single-paragraph reader (advanced usage)
"""

from controlfile.syntax.parser.core import ControlParser, parse_paragraph
from controlfile.syntax.parser.fields import read_field_name, read_field_value

__all__ = ["ControlParser", "parse_paragraph", "read_field_name", "read_field_value"]
