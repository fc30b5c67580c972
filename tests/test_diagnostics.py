"""Tests for diagnostics: codes, spans, formatting and the error hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from chatl10n.diagnostics import (
    AnalysisParseError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    KeyNotFoundError,
    LocalizationError,
    OutputFormat,
    RenderError,
    RepositoryLoadError,
    SourceSpan,
    TemplateEvaluationError,
    TemplateRuntimeError,
    TemplateSyntaxError,
)


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid_span(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=0, end=3, line=1, column=1)
        assert span.end == 3

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (5, 4, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int) -> None:
        """Negative offsets, reversed ranges and zero line/column are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestFormatter:
    """DiagnosticFormatter output styles."""

    def test_rust_format(self) -> None:
        """Rust style shows code, language, key and help."""
        diagnostic = ErrorTemplate.resource_key_not_found("ru", "checkout")
        text = diagnostic.format_error()
        assert text.startswith("error[RESOURCE_KEY_NOT_FOUND]: Resource 'ru.checkout' not found")
        assert "  = language: ru" in text
        assert "  = key: checkout" in text
        assert "  = help: " in text

    def test_rust_format_with_span(self) -> None:
        """Spans render as line and column."""
        diagnostic = ErrorTemplate.empty_expression(SourceSpan(4, 7, 2, 3))
        assert "  --> line 2, column 3" in diagnostic.format_error()

    def test_rust_format_with_location(self) -> None:
        """Locations render when there is no span."""
        diagnostic = ErrorTemplate.file_parse_failed("locales/en.yaml", "bad indent")
        assert "  --> locales/en.yaml" in diagnostic.format_error()

    def test_simple_format(self) -> None:
        """Simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        text = formatter.format(ErrorTemplate.parameter_not_provided("name"))
        assert text == "PARAMETER_NOT_PROVIDED: Parameter 'name' not provided"

    def test_json_format(self) -> None:
        """JSON style carries the code and span fields."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.unterminated_string(SourceSpan(1, 2, 1, 2))))
        assert data["code"] == "UNTERMINATED_STRING"
        assert data["code_value"] == DiagnosticCode.UNTERMINATED_STRING.value
        assert data["line"] == 1
        assert data["column"] == 2

    def test_sanitize_truncates(self) -> None:
        """Long messages are cut when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.HELPER_FAILED, message="x" * 50)
        assert formatter.format(diagnostic) == "HELPER_FAILED: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Several diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        text = formatter.format_all(
            [ErrorTemplate.parameter_not_provided("a"), ErrorTemplate.parameter_not_provided("b")]
        )
        assert text.count("\n\n") == 1

    def test_analysis_preview_truncated(self) -> None:
        """Long templates are shortened in analysis diagnostics."""
        diagnostic = ErrorTemplate.analysis_parse_failed("k", "${" + "a" * 200, "boom")
        assert diagnostic.message.endswith("...")
        assert diagnostic.resource_key == "k"


class TestErrorHierarchy:
    """Exception classes."""

    @pytest.mark.parametrize(
        "error_type",
        [
            TemplateSyntaxError,
            TemplateRuntimeError,
            RepositoryLoadError,
            RenderError,
            KeyNotFoundError,
            TemplateEvaluationError,
            AnalysisParseError,
        ],
    )
    def test_all_derive_from_base(self, error_type: type[Exception]) -> None:
        """Every error is a LocalizationError."""
        assert issubclass(error_type, LocalizationError)

    def test_render_errors(self) -> None:
        """Missing keys and evaluation failures are render errors."""
        assert issubclass(KeyNotFoundError, RenderError)
        assert issubclass(TemplateEvaluationError, RenderError)

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = LocalizationError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is kept and formatted into the message."""
        diagnostic = ErrorTemplate.not_callable("name", "str")
        error = TemplateRuntimeError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[NOT_CALLABLE]")

    def test_key_not_found_attributes(self) -> None:
        """KeyNotFoundError records language and key."""
        error = KeyNotFoundError(
            ErrorTemplate.resource_key_not_found("ru", "x"), language="ru", resource_key="x"
        )
        assert (error.language, error.resource_key) == ("ru", "x")
