"""Control text loading: file and string entry points.

Provides the protocol for text readers, a disk implementation, and the
entry points that combine reading with ControlParser and enforce the
single-paragraph contract.

Components:
    TextReader - Protocol for reading decoded text (structural typing)
    PathTextReader - Disk-based reader (UTF-8, line endings preserved)
    parse_paragraphs / parse_single_paragraph - String entry points
    get_paragraphs / get_single_paragraph - File entry points

Error Model:
    Reader failures (OSError, UnicodeDecodeError) propagate unchanged.
    Parse failures raise ControlSyntaxError subclasses; a paragraph count
    other than one raises ExpectedOnlyOneParagraphError.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from controlfile.constants import CONTROL_ENCODING
from controlfile.diagnostics import ErrorTemplate, ExpectedOnlyOneParagraphError
from controlfile.syntax.parser import ControlParser
from controlfile.types import ControlSource, Document, Paragraph

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TextReader",
    # Concrete reader
    "PathTextReader",
    # String entry points
    "parse_paragraphs",
    "parse_single_paragraph",
    "load_document",
    "load_single_paragraph",
    # File entry points
    "get_paragraphs",
    "get_single_paragraph",
]

logger = logging.getLogger(__name__)

_DEFAULT_PARSER = ControlParser()


class TextReader(Protocol):
    """Protocol for reading a file's decoded text.

    This is a Protocol (structural typing) rather than ABC so that tests
    and embedding applications can pass any object with a matching
    read_text() method (an in-memory mapping, an archive reader, ...).

    Implementations used by load_all_ports() are called from worker
    threads and must be safe for concurrent use.

    Example:
        >>> class DictReader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def read_text(self, path: Path) -> str:
        ...         try:
        ...             return self.files[str(path)]
        ...         except KeyError:
        ...             raise FileNotFoundError(str(path)) from None
    """

    def read_text(self, path: Path) -> ControlSource:
        """Read the full text of path.

        Args:
            path: File to read

        Returns:
            Decoded file contents

        Raises:
            OSError: If the file cannot be read
        """
        ...


@dataclass(frozen=True, slots=True)
class PathTextReader:
    """File system text reader.

    Reads with newline translation disabled, so CR and CRLF terminators
    reach the parser exactly as stored on disk.

    Attributes:
        encoding: Text encoding (strict decoding, no detection)
    """

    encoding: str = CONTROL_ENCODING

    def read_text(self, path: Path) -> ControlSource:
        """Read file from disk.

        Raises:
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
            UnicodeDecodeError: If file is not valid in the configured encoding
        """
        with Path(path).open(encoding=self.encoding, newline="") as f:
            return f.read()


_DEFAULT_READER = PathTextReader()


def parse_paragraphs(text: ControlSource, *, parser: ControlParser | None = None) -> Document:
    """Parse control text into all of its paragraphs.

    Args:
        text: Decoded control text
        parser: Parser to use (default: shared ControlParser with default limits)

    Returns:
        Paragraphs in source order (possibly empty)
    """
    return (parser or _DEFAULT_PARSER).parse(text)


def parse_single_paragraph(
    text: ControlSource,
    *,
    parser: ControlParser | None = None,
    source_path: str | None = None,
) -> Paragraph:
    """Parse control text that must contain exactly one paragraph.

    Args:
        text: Decoded control text
        parser: Parser to use (default: shared ControlParser)
        source_path: File name reported in diagnostics (optional)

    Returns:
        The single paragraph

    Raises:
        ExpectedOnlyOneParagraphError: If the text holds zero or several paragraphs
    """
    paragraphs = parse_paragraphs(text, parser=parser)
    if len(paragraphs) != 1:
        diagnostic = ErrorTemplate.expected_one_paragraph(len(paragraphs), source_path)
        raise ExpectedOnlyOneParagraphError(diagnostic, len(paragraphs))
    return paragraphs[0]


load_document = parse_paragraphs
load_single_paragraph = parse_single_paragraph


def get_paragraphs(
    path: Path | str,
    *,
    reader: TextReader | None = None,
    parser: ControlParser | None = None,
) -> Document:
    """Read a file and parse all of its paragraphs.

    Args:
        path: File to read
        reader: Text reader (default: PathTextReader)
        parser: Parser to use (default: shared ControlParser)

    Raises:
        OSError: Propagated unchanged from the reader
    """
    text = (reader or _DEFAULT_READER).read_text(Path(path))
    paragraphs = parse_paragraphs(text, parser=parser)
    logger.debug("Parsed %d paragraph(s) from %s", len(paragraphs), path)
    return paragraphs


def get_single_paragraph(
    path: Path | str,
    *,
    reader: TextReader | None = None,
    parser: ControlParser | None = None,
) -> Paragraph:
    """Read a file that must contain exactly one paragraph.

    Args:
        path: File to read
        reader: Text reader (default: PathTextReader)
        parser: Parser to use (default: shared ControlParser)

    Raises:
        OSError: Propagated unchanged from the reader
        ExpectedOnlyOneParagraphError: If the file holds zero or several paragraphs
    """
    text = (reader or _DEFAULT_READER).read_text(Path(path))
    logger.debug("Read %d characters from %s", len(text), path)
    return parse_single_paragraph(text, parser=parser, source_path=str(path))
