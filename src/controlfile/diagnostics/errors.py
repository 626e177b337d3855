"""Exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error
information. Callers catch ControlError to handle every parse, shape and
projection failure; I/O failures stay OSError and are never wrapped.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ControlError",
    "ControlSyntaxError",
    "DuplicateFieldError",
    "ExpectedOnlyOneParagraphError",
    "MalformedFieldNameError",
    "ManifestFieldMissingError",
]


class ControlError(Exception):
    """Base exception for all controlfile errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ControlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ControlSyntaxError(ControlError):
    """Scanner failure while splitting text into paragraphs and fields.

    Fatal to the current parse: no partial document is returned.

    Attributes:
        position: Character offset where the failure was detected
    """

    def __init__(self, message: str | Diagnostic, position: int) -> None:
        super().__init__(message)
        self.position = position


class MalformedFieldNameError(ControlSyntaxError):
    """Field-name run is empty or not terminated by ':'."""


class DuplicateFieldError(ControlSyntaxError):
    """A field name appears twice within one paragraph.

    Attributes:
        field_name: The repeated field name
    """

    def __init__(self, message: str | Diagnostic, position: int, field_name: str) -> None:
        super().__init__(message, position)
        self.field_name = field_name


class ExpectedOnlyOneParagraphError(ControlError):
    """Text expected to hold exactly one paragraph held zero or several.

    Attributes:
        paragraph_count: Number of paragraphs actually parsed
    """

    def __init__(self, message: str | Diagnostic, paragraph_count: int) -> None:
        super().__init__(message)
        self.paragraph_count = paragraph_count


class ManifestFieldMissingError(ControlError):
    """A manifest projection could not find a required field.

    Attributes:
        field_name: The missing field name
    """

    def __init__(self, message: str | Diagnostic, field_name: str) -> None:
        super().__init__(message)
        self.field_name = field_name
