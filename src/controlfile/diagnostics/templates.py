"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def malformed_field_name(found: str | None, span: SourceSpan) -> Diagnostic:
        """Field-name run not terminated by ':'.

        Args:
            found: Character that ended the run, or None at end of input
            span: Location of the offending character

        Returns:
            Diagnostic for MALFORMED_FIELD_NAME
        """
        found_desc = "end of input" if found is None else repr(found)
        msg = f"Expected ':' after field name, found {found_desc}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_FIELD_NAME,
            message=msg,
            span=span,
            hint="Field names use only A-Z, a-z, 0-9 and '-' and end with ':'",
        )

    @staticmethod
    def duplicate_field(field_name: str, span: SourceSpan) -> Diagnostic:
        """Field name repeated within one paragraph.

        Args:
            field_name: The repeated name
            span: Location of the second occurrence

        Returns:
            Diagnostic for DUPLICATE_FIELD
        """
        msg = f"Duplicate field '{field_name}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_FIELD,
            message=msg,
            span=span,
            hint="Each field name may appear only once per paragraph",
        )

    @staticmethod
    def expected_one_paragraph(
        paragraph_count: int, source_path: str | None = None
    ) -> Diagnostic:
        """Single-paragraph contract violated.

        Args:
            paragraph_count: Number of paragraphs found
            source_path: File the text came from (if known)

        Returns:
            Diagnostic for EXPECTED_ONE_PARAGRAPH
        """
        msg = f"Expected exactly one paragraph, found {paragraph_count}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_ONE_PARAGRAPH,
            message=msg,
            hint="Separate paragraphs are delimited by blank lines",
            source_path=source_path,
        )

    @staticmethod
    def manifest_field_missing(field_name: str, manifest_kind: str) -> Diagnostic:
        """Required manifest field absent.

        Args:
            field_name: The missing field
            manifest_kind: Human-readable manifest type ("port", "package")

        Returns:
            Diagnostic for MANIFEST_FIELD_MISSING
        """
        msg = f"Required field '{field_name}' missing from {manifest_kind} manifest"
        return Diagnostic(
            code=DiagnosticCode.MANIFEST_FIELD_MISSING,
            message=msg,
            hint=f"Add a '{field_name}:' line to the CONTROL file",
        )
