"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Template text included in diagnostics is cut to this many characters.
_TEMPLATE_PREVIEW_LENGTH: int = 80


def _preview(text: str) -> str:
    if len(text) > _TEMPLATE_PREVIEW_LENGTH:
        return text[:_TEMPLATE_PREVIEW_LENGTH] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable, consistent, and documents every error case.
    """

    # ------------------------------------------------------------------
    # Reference errors
    # ------------------------------------------------------------------

    @staticmethod
    def resource_key_not_found(language: str, resource_key: str) -> Diagnostic:
        """Resolution reached the end of the fallback chain.

        Args:
            language: Language code the lookup was made under
            resource_key: Resource key that was not found

        Returns:
            Diagnostic for RESOURCE_KEY_NOT_FOUND
        """
        msg = f"Resource '{language}.{resource_key}' not found"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_KEY_NOT_FOUND,
            message=msg,
            hint="Load the key for this language, or enable allow_missing "
            "or default_language_on_missing",
            language=language,
            resource_key=resource_key,
        )

    @staticmethod
    def parameter_not_provided(name: str) -> Diagnostic:
        """Template referenced a parameter absent from the render data.

        Args:
            name: Parameter name

        Returns:
            Diagnostic for PARAMETER_NOT_PROVIDED
        """
        msg = f"Parameter '{name}' not provided"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{name}' in the render parameters or the context template data",
        )

    @staticmethod
    def property_not_found(path: str, prop: str) -> Diagnostic:
        """Property access on a value that does not have the property.

        Args:
            path: Dotted path of the object being accessed
            prop: Property name that was missing

        Returns:
            Diagnostic for PROPERTY_NOT_FOUND
        """
        msg = f"Property '{prop}' not found on '{path}'"
        return Diagnostic(
            code=DiagnosticCode.PROPERTY_NOT_FOUND,
            message=msg,
            hint=f"Make sure '{path}' is a mapping or object with '{prop}'",
        )

    # ------------------------------------------------------------------
    # Evaluation errors
    # ------------------------------------------------------------------

    @staticmethod
    def not_callable(name: str, type_name: str) -> Diagnostic:
        """Call expression targeted a non-callable value.

        Args:
            name: Source text of the call target
            type_name: Type of the value found

        Returns:
            Diagnostic for NOT_CALLABLE
        """
        msg = f"'{name}' is not callable (got {type_name})"
        return Diagnostic(
            code=DiagnosticCode.NOT_CALLABLE,
            message=msg,
            hint=f"Pass a function for '{name}'",
        )

    @staticmethod
    def helper_failed(name: str, error: str) -> Diagnostic:
        """A helper function raised while being called from a template.

        Args:
            name: Source text of the call target
            error: Message of the underlying exception

        Returns:
            Diagnostic for HELPER_FAILED
        """
        msg = f"Helper '{name}' failed: {error}"
        return Diagnostic(code=DiagnosticCode.HELPER_FAILED, message=msg)

    @staticmethod
    def template_evaluation_failed(language: str, resource_key: str, error: str) -> Diagnostic:
        """Rendering a resolved template failed.

        Args:
            language: Language code of the rendering context
            resource_key: Resource key being rendered
            error: Message of the underlying exception

        Returns:
            Diagnostic for TEMPLATE_EVALUATION_FAILED
        """
        msg = f"Resource '{language}.{resource_key}' compile error: {error}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_EVALUATION_FAILED,
            message=msg,
            hint="Check that every parameter the template uses is supplied",
            language=language,
            resource_key=resource_key,
        )

    @staticmethod
    def expression_depth_exceeded(max_depth: int) -> Diagnostic:
        """Nesting exceeded the configured depth limit.

        Args:
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting in the template or resource definitions",
        )

    @staticmethod
    def unknown_expression(type_name: str) -> Diagnostic:
        """Evaluator met a node type it does not know.

        Args:
            type_name: Name of the node class

        Returns:
            Diagnostic for UNKNOWN_EXPRESSION
        """
        msg = f"Unknown expression type: {type_name}"
        return Diagnostic(code=DiagnosticCode.UNKNOWN_EXPRESSION, message=msg)

    # ------------------------------------------------------------------
    # Syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Input ended where more was required.

        Args:
            position: Character offset of the end of input

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message=msg)

    @staticmethod
    def unterminated_expression(span: SourceSpan) -> Diagnostic:
        """An '${' was never closed.

        Args:
            span: Location of the opening marker

        Returns:
            Diagnostic for UNTERMINATED_EXPRESSION
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_EXPRESSION,
            message="Expected '}' to close expression",
            span=span,
            hint="Close every '${' with a matching '}', or escape it as '\\${'",
        )

    @staticmethod
    def empty_expression(span: SourceSpan) -> Diagnostic:
        """An '${}' with nothing inside.

        Args:
            span: Location of the empty expression

        Returns:
            Diagnostic for EMPTY_EXPRESSION
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_EXPRESSION,
            message="Empty expression",
            span=span,
            hint="Put a parameter name or call between '${' and '}'",
        )

    @staticmethod
    def unexpected_character(
        found: str, expected: tuple[str, ...], span: SourceSpan
    ) -> Diagnostic:
        """Parser found a character it cannot use here.

        Args:
            found: The offending character (or "EOF")
            expected: Human-readable list of acceptable tokens
            span: Location of the character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        expected_str = ", ".join(expected)
        msg = f"Unexpected {found!r} (expected: {expected_str})"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
        )

    @staticmethod
    def unterminated_string(span: SourceSpan) -> Diagnostic:
        """String literal without its closing quote.

        Args:
            span: Location of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="Unterminated string literal",
            span=span,
            hint="Close the string with the same quote character it starts with",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan) -> Diagnostic:
        """Parser nesting limit reached.

        Args:
            max_depth: Configured parser nesting limit
            span: Location where the limit was hit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Expression nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
        )

    # ------------------------------------------------------------------
    # Loading errors
    # ------------------------------------------------------------------

    @staticmethod
    def directory_not_found(directory: str) -> Diagnostic:
        """Locale directory does not exist.

        Args:
            directory: Path that was requested

        Returns:
            Diagnostic for DIRECTORY_NOT_FOUND
        """
        msg = f"Locales directory '{directory}' not found"
        return Diagnostic(
            code=DiagnosticCode.DIRECTORY_NOT_FOUND,
            message=msg,
            location=directory,
        )

    @staticmethod
    def file_parse_failed(path: str, error: str) -> Diagnostic:
        """Locale file is not valid YAML or JSON.

        Args:
            path: File path
            error: Parser error message

        Returns:
            Diagnostic for FILE_PARSE_FAILED
        """
        msg = f"Failed to parse locale file: {error}"
        return Diagnostic(
            code=DiagnosticCode.FILE_PARSE_FAILED,
            message=msg,
            location=path,
        )

    @staticmethod
    def invalid_document(location: str, type_name: str) -> Diagnostic:
        """Locale document is not a mapping.

        Args:
            location: File path or language code
            type_name: Type of the top-level document

        Returns:
            Diagnostic for INVALID_DOCUMENT
        """
        msg = f"Locale definitions must be a mapping, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DOCUMENT,
            message=msg,
            location=location,
        )

    @staticmethod
    def definitions_too_deep(language: str, error: str) -> Diagnostic:
        """Resource definitions nest deeper than the depth limit.

        Args:
            language: Language being loaded
            error: Depth limit error message

        Returns:
            Diagnostic for INVALID_DOCUMENT
        """
        msg = f"Locale definitions for '{language}' nest too deeply: {error}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DOCUMENT,
            message=msg,
            hint="Reduce the nesting of resource definitions",
            language=language,
        )

    @staticmethod
    def template_compile_failed(language: str, resource_key: str, error: str) -> Diagnostic:
        """A resource template failed to compile during loading.

        Args:
            language: Language being loaded
            resource_key: Key of the failing template
            error: Syntax error message

        Returns:
            Diagnostic for TEMPLATE_COMPILE_FAILED
        """
        msg = f"Template '{language}.{resource_key}' failed to compile: {error}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_COMPILE_FAILED,
            message=msg,
            language=language,
            resource_key=resource_key,
        )

    # ------------------------------------------------------------------
    # Analysis errors
    # ------------------------------------------------------------------

    @staticmethod
    def analysis_parse_failed(resource_key: str, template: str, error: str) -> Diagnostic:
        """Parameter analyzer could not parse a template.

        Args:
            resource_key: Key of the failing template
            template: The template text
            error: Syntax error message

        Returns:
            Diagnostic for ANALYSIS_PARSE_FAILED
        """
        msg = (
            f"Parsing of the key '{resource_key}' failed: {error}\n"
            f"template: {_preview(template)}"
        )
        return Diagnostic(
            code=DiagnosticCode.ANALYSIS_PARSE_FAILED,
            message=msg,
            resource_key=resource_key,
        )
