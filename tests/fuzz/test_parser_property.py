"""Fuzz property-based tests for the control-file parser.

Intensive variants of the properties in test_parser_hypothesis.py, with
larger inputs and more examples.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from controlfile.diagnostics import ControlSyntaxError, DuplicateFieldError
from controlfile.syntax.cursor import Cursor
from controlfile.syntax.parser import ControlParser
from controlfile.syntax.parser.fields import read_field_value
from controlfile.types import Document
from tests.strategies import documents, line_endings, render_document

pytestmark = pytest.mark.fuzz

_PARSER = ControlParser()


@pytest.mark.fuzz
class TestParserFuzz:
    """High-volume parser properties."""

    @given(source=st.text(max_size=500))
    @settings(max_examples=1500)
    def test_arbitrary_unicode_is_total(self, source: str) -> None:
        """PROPERTY: arbitrary text parses or raises ControlSyntaxError."""
        try:
            document = _PARSER.parse(source)
        except ControlSyntaxError as e:
            event(f"error={type(e).__name__}")
        else:
            event(f"paragraphs={min(len(document), 3)}")
            assert all(paragraph for paragraph in document)

    @given(document=documents(), newline=line_endings)
    @settings(max_examples=1000)
    def test_duplicate_injection_detected(self, document: Document, newline: str) -> None:
        """PROPERTY: repeating any existing field name is always rejected."""
        if not document:
            return
        name = next(iter(document[-1]))
        source = render_document(document, newline) + f"{name}: again{newline}"

        with pytest.raises(DuplicateFieldError) as exc_info:
            _PARSER.parse(source)

        assert exc_info.value.field_name == name

    @given(
        first=st.text(alphabet="abc :-", max_size=10),
        indent=st.text(alphabet=" \t", min_size=1, max_size=4),
        body=st.text(alphabet="xyz.#", min_size=1, max_size=10),
        newline=line_endings,
    )
    @settings(max_examples=1000)
    def test_continuation_indent_kept_verbatim(
        self, first: str, indent: str, body: str, newline: str
    ) -> None:
        """PROPERTY: a continuation line's indentation is stored verbatim."""
        source = first + newline + indent + body + newline
        result = read_field_value(Cursor(source, 0))

        assert result.value == first + "\n" + indent + body
