"""Hypothesis strategies for controlfile property-based testing.

Usage:
    from tests.strategies import field_names, paragraphs, render_document
"""

from .control import (
    FIELD_NAME_CHARS,
    FIRST_NAME_CHARS,
    control_chaos_source,
    documents,
    field_names,
    field_values,
    line_endings,
    paragraphs,
    render_document,
    render_paragraph,
)

__all__ = [
    "FIELD_NAME_CHARS",
    "FIRST_NAME_CHARS",
    "control_chaos_source",
    "documents",
    "field_names",
    "field_values",
    "line_endings",
    "paragraphs",
    "render_document",
    "render_paragraph",
]
