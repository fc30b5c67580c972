"""chatl10n - Template-based localization for chat bots.

Loads per-language resource strings with ${ } placeables, renders them for
a conversation's language with a fallback chain, and statically derives the
parameters every template needs.

Public API:
    I18n - Load languages, render, report translation coverage
    I18nConfig - Immutable configuration
    RenderContext - Per-conversation language and ambient data
    compile_template - Compile one resource string
    analyze - Parameter schema of resource definitions
    generate_contract - Typing module for call sites
    context_helper - Decorator for helpers that receive the context
    pluralize - Built-in CLDR plural helper

Exceptions:
    LocalizationError - Base exception class
    TemplateSyntaxError - Malformed template text
    KeyNotFoundError - Resource key missing from the fallback chain
    TemplateEvaluationError - Template failed while rendering
    RepositoryLoadError - Locale definitions could not be ingested
    AnalysisParseError - Analyzer could not parse a template

Submodules:
    chatl10n.syntax - Template AST, parser, visitor and serializer
    chatl10n.runtime - Compiler, evaluator and helpers
    chatl10n.localization - Repository, resolution, contexts and loading
    chatl10n.analysis - Parameter analysis and contract generation
    chatl10n.diagnostics - Error types and diagnostic formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .analysis import analyze, generate_contract
from .diagnostics import (
    AnalysisParseError,
    KeyNotFoundError,
    LocalizationError,
    RepositoryLoadError,
    TemplateEvaluationError,
    TemplateSyntaxError,
)
from .localization import I18n, I18nConfig, RenderContext
from .runtime import compile_template, context_helper, pluralize

# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("chatl10n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnalysisParseError",
    "I18n",
    "I18nConfig",
    "KeyNotFoundError",
    "LocalizationError",
    "RenderContext",
    "RepositoryLoadError",
    "TemplateEvaluationError",
    "TemplateSyntaxError",
    "__version__",
    "analyze",
    "compile_template",
    "context_helper",
    "generate_contract",
    "pluralize",
]
