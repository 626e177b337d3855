"""controlfile - CONTROL-file paragraph parser for package metadata.

Parses RFC822/Debian-control-like text into paragraphs of fields, with
exact line-ending normalization, multi-line value continuation and
duplicate-field rejection, and loads port and cached-package manifests
from a package repository.

Public API:
    ControlParser - Configurable paragraph parser
    parse_paragraphs / parse_single_paragraph - Parse text
    get_paragraphs / get_single_paragraph - Read and parse a file
    try_load_port / try_load_cached_package - Load one manifest
    load_all_ports - Lenient batch load of a ports tree
    extract_port_names_and_versions - Name to version mapping (first wins)

Exceptions:
    ControlError - Base exception class
    ControlSyntaxError - Scanner failures
    MalformedFieldNameError, DuplicateFieldError - Specific syntax errors
    ExpectedOnlyOneParagraphError - Single-paragraph contract violated
    ManifestFieldMissingError - Manifest projection failure

Submodules:
    controlfile.syntax - Cursor and parser internals
    controlfile.loading - Text readers and entry points
    controlfile.repository - Manifests, package specs and port loaders
    controlfile.diagnostics - Error types, codes and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ControlError,
    ControlSyntaxError,
    DuplicateFieldError,
    ExpectedOnlyOneParagraphError,
    MalformedFieldNameError,
    ManifestFieldMissingError,
)
from .loading import (
    PathTextReader,
    TextReader,
    get_paragraphs,
    get_single_paragraph,
    load_document,
    load_single_paragraph,
    parse_paragraphs,
    parse_single_paragraph,
)
from .repository import (
    BinaryParagraph,
    PackageSpec,
    RepositoryPaths,
    SourceParagraph,
    extract_port_names_and_versions,
    load_all_ports,
    try_load_cached_package,
    try_load_port,
)
from .syntax import ControlParser

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("controlfile")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BinaryParagraph",
    "ControlError",
    "ControlParser",
    "ControlSyntaxError",
    "DuplicateFieldError",
    "ExpectedOnlyOneParagraphError",
    "MalformedFieldNameError",
    "ManifestFieldMissingError",
    "PackageSpec",
    "PathTextReader",
    "RepositoryPaths",
    "SourceParagraph",
    "TextReader",
    "__version__",
    "extract_port_names_and_versions",
    "get_paragraphs",
    "get_single_paragraph",
    "load_all_ports",
    "load_document",
    "load_single_paragraph",
    "parse_paragraphs",
    "parse_single_paragraph",
    "try_load_cached_package",
    "try_load_port",
]
