"""Runtime: template compiler, evaluator and built-in helpers.

Python 3.13+. Depends on Babel (via plural_rules).
"""

from .evaluator import TemplateEvaluator, format_value
from .helpers import LanguageAware, context_helper, is_context_helper, pluralize
from .plural_rules import plural_categories, select_plural_category
from .template import (
    CompiledTemplate,
    MissingKeyTemplate,
    StaticTemplate,
    TemplateValue,
    compile_template,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Compilation
    "compile_template",
    "TemplateValue",
    "StaticTemplate",
    "CompiledTemplate",
    "MissingKeyTemplate",
    # Evaluation
    "TemplateEvaluator",
    "format_value",
    # Helpers
    "context_helper",
    "is_context_helper",
    "pluralize",
    "LanguageAware",
    # Plural rules
    "plural_categories",
    "select_plural_category",
]
