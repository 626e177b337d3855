"""Type aliases for parsed control data.

Provides semantic type aliases used throughout the package and by user
code when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ControlSource",
    "Document",
    "FieldName",
    "FieldValue",
    "Paragraph",
]

type FieldName = str
"""Field name matching [A-Za-z0-9-]+ (e.g., 'Source', 'Build-Depends')."""

type FieldValue = str
"""Field value with continuation lines joined by '\\n'."""

type Paragraph = dict[FieldName, FieldValue]
"""One record: field names mapped to values, in source order."""

type Document = list[Paragraph]
"""All paragraphs of one source text, in source order."""

type ControlSource = str
"""Raw control text as a Python string (already decoded)."""
