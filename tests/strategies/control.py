"""Hypothesis strategies for control-file text and parsed structures.

Generates paragraphs as Python dicts together with a renderer that turns
them into control text, so tests can check what the parser recovers
against what was generated.

Rendering contract:
    - "Name: " precedes the first value line
    - value lines after the first are emitted as-is (each already starts
      with a non-alphanumeric, non-line-end character)
    - paragraphs are separated by one blank line
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st

from controlfile.types import Document, Paragraph

FIRST_NAME_CHARS: str = string.ascii_letters + string.digits
FIELD_NAME_CHARS: str = FIRST_NAME_CHARS + "-"

_LINE_CHARS = st.characters(
    blacklist_characters="\r\n",
    blacklist_categories=("Cs",),
)
_INLINE_WS = " \t"

line_endings = st.sampled_from(["\n", "\r\n", "\r"])


@st.composite
def field_names(draw: st.DrawFn) -> str:
    """Field name matching [A-Za-z0-9][A-Za-z0-9-]*.

    A leading "-" is valid syntax but would read as a continuation line
    anywhere except the first field of a paragraph.
    """
    head = draw(st.sampled_from(FIRST_NAME_CHARS))
    tail = draw(st.text(alphabet=FIELD_NAME_CHARS, max_size=15))
    return head + tail


@st.composite
def _first_line(draw: st.DrawFn) -> str:
    """First value line: no leading inline whitespace (eaten after ':')."""
    text = draw(st.text(alphabet=_LINE_CHARS, max_size=30))
    return text.lstrip(_INLINE_WS)


@st.composite
def _continuation_line(draw: st.DrawFn) -> str:
    """Continuation line: not blank, does not start with [A-Za-z0-9]."""
    lead = draw(st.text(alphabet=_INLINE_WS, max_size=3))
    first = draw(
        _LINE_CHARS.filter(
            lambda c: c not in _INLINE_WS and (lead != "" or c not in FIRST_NAME_CHARS)
        )
    )
    rest = draw(st.text(alphabet=_LINE_CHARS, max_size=20))
    event(f"continuation_lead={'ws' if lead else 'symbol'}")
    return lead + first + rest


@st.composite
def field_values(draw: st.DrawFn) -> str:
    """Field value as the parser stores it (continuations joined by '\\n')."""
    lines = [draw(_first_line())]
    lines.extend(draw(st.lists(_continuation_line(), max_size=3)))
    event(f"value_lines={len(lines)}")
    return "\n".join(lines)


def paragraphs() -> st.SearchStrategy[Paragraph]:
    """Non-empty paragraph with unique (case-sensitive) field names."""
    return st.dictionaries(field_names(), field_values(), min_size=1, max_size=6)


def documents() -> st.SearchStrategy[Document]:
    """Zero or more paragraphs."""
    return st.lists(paragraphs(), max_size=4)


def render_paragraph(paragraph: Paragraph, newline: str = "\n") -> str:
    """Render a paragraph as control text, each line ending with newline."""
    lines = []
    for name, value in paragraph.items():
        value_lines = value.split("\n")
        lines.append(f"{name}: {value_lines[0]}")
        lines.extend(value_lines[1:])
    return "".join(line + newline for line in lines)


def render_document(document: Document, newline: str = "\n") -> str:
    """Render paragraphs separated by one blank line."""
    return newline.join(render_paragraph(p, newline) for p in document)


@st.composite
def control_chaos_source(draw: st.DrawFn) -> str:
    """Arbitrary text biased towards the scanner's significant characters."""
    alphabet = st.sampled_from(["A", "z", "0", "-", ":", " ", "\t", "\r", "\n", "#", "é"])
    text = draw(st.text(alphabet=alphabet, max_size=60))
    has_cr = "\r" in text
    event(f"chaos_has_cr={has_cr}")
    return text
