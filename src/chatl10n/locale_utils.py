"""Locale utilities for converting chat language codes to Babel locales.

Chat platforms report BCP-47-like codes ("en-us", "pt-br"), lowercased by
the repository. Babel wants POSIX identifiers ("en_US"). This module is the
single place that bridges the two.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from chatl10n.constants import LANGUAGE_SEPARATOR

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "short_language_code",
]


def short_language_code(language_code: str) -> str:
    """Return the portion of a language code before the first '-'.

    Example:
        >>> short_language_code("en-us")
        'en'
        >>> short_language_code("ru")
        'ru'
    """
    return language_code.split(LANGUAGE_SEPARATOR, 1)[0]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-br")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_br")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace(LANGUAGE_SEPARATOR, "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
