"""Diagnostic system for controlfile errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ControlError,
    ControlSyntaxError,
    DuplicateFieldError,
    ExpectedOnlyOneParagraphError,
    MalformedFieldNameError,
    ManifestFieldMissingError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ControlError",
    "ControlSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateFieldError",
    "ErrorTemplate",
    "ExpectedOnlyOneParagraphError",
    "MalformedFieldNameError",
    "ManifestFieldMissingError",
    "OutputFormat",
    "SourceSpan",
]
