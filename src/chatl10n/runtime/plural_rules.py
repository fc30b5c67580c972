"""CLDR plural rules implementation using Babel.

Provides plural category selection for chat language codes using Babel's
CLDR data, falling back from "pt-br" to "pt" and finally to a one/other rule
for codes Babel does not know.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from chatl10n.locale_utils import get_babel_locale, short_language_code

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = ["PLURAL_CATEGORY_ORDER", "plural_categories", "select_plural_category"]

logger = logging.getLogger(__name__)

# CLDR category order. Plural forms passed to pluralize() follow this order,
# restricted to the categories the language uses.
PLURAL_CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

_FALLBACK_CATEGORIES: tuple[str, ...] = ("one", "other")


@functools.lru_cache(maxsize=128)
def _plural_rule(language_code: str) -> PluralRule | None:
    """Find the Babel plural rule for a code, trying its short form second."""
    candidates = [language_code]
    short = short_language_code(language_code)
    if short != language_code:
        candidates.append(short)
    for candidate in candidates:
        try:
            return get_babel_locale(candidate).plural_form
        except (UnknownLocaleError, ValueError):
            continue
    logger.debug("No CLDR plural rules for '%s'; using one/other", language_code)
    return None


def plural_categories(language_code: str) -> tuple[str, ...]:
    """Plural categories a language distinguishes, in CLDR order.

    Always ends with "other".

    Examples:
        >>> plural_categories("en")
        ('one', 'other')
        >>> plural_categories("ru")
        ('one', 'few', 'many', 'other')
    """
    rule = _plural_rule(language_code)
    if rule is None:
        return _FALLBACK_CATEGORIES
    # PluralRule.tags omits the implicit "other" category.
    return tuple(c for c in PLURAL_CATEGORY_ORDER if c in rule.tags or c == "other")


def select_plural_category(n: int | float | Decimal, language_code: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        language_code: Language code (e.g., "en", "ru", "pt-br")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(42, "ja")
        'other'
    """
    rule = _plural_rule(language_code)
    if rule is None:
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"
    return rule(n)
