"""Diagnostic system for chatl10n errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    AnalysisParseError,
    KeyNotFoundError,
    LocalizationError,
    RenderError,
    RepositoryLoadError,
    TemplateEvaluationError,
    TemplateRuntimeError,
    TemplateSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AnalysisParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "KeyNotFoundError",
    "LocalizationError",
    "OutputFormat",
    "RenderError",
    "RepositoryLoadError",
    "SourceSpan",
    "TemplateEvaluationError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
]
