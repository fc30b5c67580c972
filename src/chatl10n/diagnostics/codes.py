"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (missing resource keys, parameters, properties)
        2000-2999: Evaluation errors (runtime template failures)
        3000-3999: Syntax errors (template parser failures)
        4000-4999: Loading errors (repository ingestion)
        5000-5999: Analysis errors (parameter analyzer)
    """

    # Reference errors (1000-1999)
    RESOURCE_KEY_NOT_FOUND = 1001
    PARAMETER_NOT_PROVIDED = 1002
    PROPERTY_NOT_FOUND = 1003

    # Evaluation errors (2000-2999)
    NOT_CALLABLE = 2001
    HELPER_FAILED = 2002
    TEMPLATE_EVALUATION_FAILED = 2003
    MAX_DEPTH_EXCEEDED = 2004
    UNKNOWN_EXPRESSION = 2005

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNTERMINATED_EXPRESSION = 3002
    EMPTY_EXPRESSION = 3003
    UNEXPECTED_CHARACTER = 3004
    UNTERMINATED_STRING = 3005
    NESTING_DEPTH_EXCEEDED = 3006

    # Loading errors (4000-4999)
    DIRECTORY_NOT_FOUND = 4001
    FILE_PARSE_FAILED = 4002
    INVALID_DOCUMENT = 4003
    TEMPLATE_COMPILE_FAILED = 4004

    # Analysis errors (5000-5999)
    ANALYSIS_PARSE_FAILED = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Template source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Template source location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        language: Language code the error occurred under
        resource_key: Resource key the error occurred in
        location: File or other origin of the offending input
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    language: str | None = None
    resource_key: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[RESOURCE_KEY_NOT_FOUND]: Resource 'ru.checkout' not found
              = language: ru
              = key: checkout
              = help: Load the key for this language or enable allow_missing

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
