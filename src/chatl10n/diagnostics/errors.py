"""chatl10n exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "AnalysisParseError",
    "KeyNotFoundError",
    "LocalizationError",
    "RenderError",
    "RepositoryLoadError",
    "TemplateEvaluationError",
    "TemplateRuntimeError",
    "TemplateSyntaxError",
]


class LocalizationError(Exception):
    """Base exception for all chatl10n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TemplateSyntaxError(LocalizationError):
    """Template source text could not be parsed.

    Raised at compile time (repository loading) and by the parameter
    analyzer. Never raised by rendering.

    Attributes:
        source: The template text being parsed
        position: Character offset of the error
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "", position: int = 0) -> None:
        """Initialize TemplateSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            source: Template text being parsed
            position: Character offset of the error
        """
        super().__init__(message)
        self.source = source
        self.position = position


class TemplateRuntimeError(LocalizationError):
    """A compiled template failed while evaluating against its parameters.

    Examples:
    - Required parameter missing from the render data
    - Property access on a value without that property
    - Call of a value that is not callable

    The template itself stays valid and reusable.
    """


class RepositoryLoadError(LocalizationError):
    """Locale definitions could not be ingested.

    The repository keeps its prior state for the language being loaded.
    """


class RenderError(LocalizationError):
    """Rendering a resource key failed.

    Attributes:
        language: Language code of the rendering context
        resource_key: Resource key being rendered
    """

    def __init__(self, message: str | Diagnostic, *, language: str, resource_key: str) -> None:
        """Initialize RenderError.

        Args:
            message: Error message string OR Diagnostic object
            language: Language code of the rendering context
            resource_key: Resource key being rendered
        """
        super().__init__(message)
        self.language = language
        self.resource_key = resource_key


class KeyNotFoundError(RenderError):
    """Resource key not found anywhere in the fallback chain.

    Only raised when allow_missing is disabled.
    """


class TemplateEvaluationError(RenderError):
    """A resolved template raised while rendering.

    The original exception is chained as ``__cause__``.
    """


class AnalysisParseError(LocalizationError):
    """Parameter analyzer could not parse a resource template.

    Aborts the whole analysis batch.

    Attributes:
        resource_key: Key of the unparseable template
        template: The template text
    """

    def __init__(self, message: str | Diagnostic, *, resource_key: str, template: str) -> None:
        """Initialize AnalysisParseError.

        Args:
            message: Error message string OR Diagnostic object
            resource_key: Key of the unparseable template
            template: The template text
        """
        super().__init__(message)
        self.resource_key = resource_key
        self.template = template
