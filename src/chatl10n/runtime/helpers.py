"""Built-in template helpers.

Helpers are plain callables placed in template data. A helper decorated
with @context_helper receives the rendering context as its first argument,
ahead of the arguments written in the template:

    ${pluralize(count, 'apple', 'apples')}
    -> pluralize(<context>, count, 'apple', 'apples')

Python 3.13+. Depends on Babel (via plural_rules).
"""

from collections.abc import Callable
from decimal import Decimal
from typing import Protocol

from .plural_rules import plural_categories, select_plural_category

__all__ = ["LanguageAware", "context_helper", "is_context_helper", "pluralize"]

# Attribute name marking helpers that take the rendering context first.
_CONTEXT_HELPER_ATTR: str = "_chatl10n_context_helper"


class LanguageAware(Protocol):
    """Anything exposing the resolved language code of a rendering context."""

    @property
    def language(self) -> str:
        ...  # pragma: no cover  # Protocol stub - not executable


def context_helper[F: Callable[..., object]](func: F) -> F:
    """Mark a helper as taking the rendering context as its first argument.

    Args:
        func: Helper function to mark

    Returns:
        The same function, marked

    Example:
        >>> @context_helper
        ... def lang(ctx):
        ...     return ctx.language
    """
    setattr(func, _CONTEXT_HELPER_ATTR, True)
    return func


def is_context_helper(func: object) -> bool:
    """Check if a callable was marked with @context_helper."""
    return getattr(func, _CONTEXT_HELPER_ATTR, False) is True


@context_helper
def pluralize(context: LanguageAware, count: int | float | Decimal, *forms: object) -> object:
    """Pick the plural form of a word for count in the context's language.

    Forms are listed in CLDR category order, restricted to the categories
    the language distinguishes (English: one, other; Russian: one, few,
    many, other). When fewer forms are given than the language has
    categories, the last form covers the rest.

    Args:
        context: Rendering context (supplied automatically)
        count: Number to pluralize for
        *forms: Word forms in category order

    Returns:
        The selected form ("" when no forms are given)

    Examples:
        ${pluralize(1, 'apple', 'apples')}  -> apple
        ${pluralize(3, 'яблоко', 'яблока', 'яблок')} under "ru" -> яблока
    """
    if not forms:
        return ""
    if isinstance(count, bool) or not isinstance(count, (int, float, Decimal)):
        msg = f"pluralize() count must be a number, got {type(count).__name__}"
        raise TypeError(msg)
    language = context.language
    categories = plural_categories(language)
    category = select_plural_category(count, language)
    index = categories.index(category) if category in categories else len(categories) - 1
    return forms[min(index, len(forms) - 1)]
